"""Janelas de período: construção, navegação e rótulos pt-BR."""
from datetime import date
from unittest import TestCase

from clinic_core.core.domain.entities.period_entity import PeriodRange, PeriodType
from clinic_core.core.domain.services import period_resolver as pr

REFERENCE = date(2026, 10, 19)  # segunda-feira


class PeriodConstructionTests(TestCase):
    def test_week_starts_on_monday(self) -> None:
        period = pr.period_for("week", date(2026, 10, 22))
        self.assertEqual(period.start_date, date(2026, 10, 19))
        self.assertEqual(period.end_date, date(2026, 10, 25))

    def test_sunday_belongs_to_previous_week(self) -> None:
        period = pr.period_for(PeriodType.WEEK, date(2026, 10, 25))
        self.assertEqual(period.start_date, date(2026, 10, 19))

    def test_month_covers_whole_calendar_month(self) -> None:
        period = pr.period_for("month", date(2028, 2, 10))
        self.assertEqual((period.start_date, period.end_date), (date(2028, 2, 1), date(2028, 2, 29)))

    def test_custom_swaps_inverted_dates(self) -> None:
        period = pr.custom(date(2026, 10, 30), date(2026, 10, 1))
        self.assertEqual(period.start_date, date(2026, 10, 1))
        self.assertEqual(period.end_date, date(2026, 10, 30))
        self.assertEqual(period.width_days, 30)

    def test_change_type_uses_start_as_reference(self) -> None:
        week = pr.period_for("week", REFERENCE)
        month = pr.change_type(week, "month")
        self.assertEqual(month.start_date, date(2026, 10, 1))
        self.assertEqual(pr.change_type(month, "custom").end_date, date(2026, 10, 31))

    def test_resolve_orders_hand_built_range(self) -> None:
        raw = PeriodRange(PeriodType.CUSTOM, date(2026, 10, 5), date(2026, 10, 1))
        self.assertEqual(pr.resolve(raw), (date(2026, 10, 1), date(2026, 10, 5)))

    def test_to_dict_uses_camel_case(self) -> None:
        self.assertEqual(
            pr.today("day", REFERENCE).to_dict(),
            {"type": "day", "startDate": "2026-10-19", "endDate": "2026-10-19"},
        )


class PeriodNavigationTests(TestCase):
    def test_round_trip_for_aligned_types(self) -> None:
        for period_type in ("day", "week", "month"):
            for reference in (REFERENCE, date(2026, 1, 31), date(2026, 12, 31), date(2028, 2, 29)):
                with self.subTest(period_type=period_type, reference=reference):
                    base = pr.period_for(period_type, reference)
                    for direction in (1, -1):
                        moved = pr.navigate(base, direction)
                        self.assertLessEqual(moved.start_date, moved.end_date)
                        self.assertEqual(pr.navigate(moved, -direction), base)

    def test_custom_round_trip_keeps_width(self) -> None:
        base = pr.custom(date(2026, 10, 3), date(2026, 10, 12))
        forward = pr.navigate(base, 1)
        self.assertEqual(forward.start_date, date(2026, 10, 13))
        self.assertEqual(forward.width_days, base.width_days)
        self.assertEqual(pr.navigate(forward, -1), base)

    def test_month_navigation_lands_on_month_bounds(self) -> None:
        january = pr.period_for("month", date(2026, 1, 15))
        previous = pr.navigate(january, -1)
        self.assertEqual((previous.start_date, previous.end_date), (date(2025, 12, 1), date(2025, 12, 31)))
        following = pr.navigate(january, 1)
        self.assertEqual(following.end_date, date(2026, 2, 28))

    def test_week_moves_seven_days(self) -> None:
        week = pr.period_for("week", REFERENCE)
        self.assertEqual(pr.navigate(week, -1).start_date, date(2026, 10, 12))

    def test_invalid_direction_raises(self) -> None:
        with self.assertRaises(ValueError):
            pr.navigate(pr.period_for("day", REFERENCE), 2)


class PeriodFilterAndLabelTests(TestCase):
    def test_filter_is_inclusive_and_drops_missing_dates(self) -> None:
        period = pr.custom(date(2026, 10, 1), date(2026, 10, 3))
        items = [date(2026, 9, 30), date(2026, 10, 1), date(2026, 10, 3), None, date(2026, 10, 4)]
        self.assertEqual(
            pr.filter_by_period(items, period, lambda d: d),
            [date(2026, 10, 1), date(2026, 10, 3)],
        )
        self.assertTrue(pr.contains(period, date(2026, 10, 2)))

    def test_labels(self) -> None:
        self.assertEqual(pr.label(pr.period_for("day", REFERENCE)), "19 de outubro de 2026")
        self.assertEqual(pr.label(pr.period_for("week", REFERENCE)), "19 out - 25 out 2026")
        self.assertEqual(pr.label(pr.period_for("month", REFERENCE)), "outubro de 2026")
        self.assertEqual(
            pr.label(pr.custom(date(2026, 9, 28), date(2026, 10, 2))),
            "28 set 2026 - 02 out 2026",
        )
