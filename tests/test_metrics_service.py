"""Indicadores do painel: contagens do dia, ocupação e receita do mês."""
from datetime import date, datetime
from decimal import Decimal
from unittest import TestCase

from clinic_core.core.application.services.metrics_service import (
    compute_metrics,
    occupancy_rate,
    total_slots_for,
)
from clinic_core.core.domain.entities.company_config_entity import (
    BusinessHours,
    CompanyConfigEntity,
    DayHours,
)
from tests.helpers.builders import TODAY, appointment, entry

NOW = datetime(2026, 10, 19, 10, 0)


def _company(**days) -> CompanyConfigEntity:
    return CompanyConfigEntity(id="c1", name="Clínica", business_hours=BusinessHours(**days))


class OccupancyTests(TestCase):
    def test_rate_is_clamped(self) -> None:
        for booked in (0, 5, 20, 45, 10_000):
            with self.subTest(booked=booked):
                self.assertTrue(0 <= occupancy_rate(booked, 20) <= 100)
        self.assertEqual(occupancy_rate(10_000, 20), 100)

    def test_non_positive_slots_give_zero(self) -> None:
        self.assertEqual(occupancy_rate(3, 0), 0)
        self.assertEqual(occupancy_rate(3, -4), 0)

    def test_slots_from_business_hours(self) -> None:
        company = _company(monday=DayHours(open="08:00", close="12:00"))
        self.assertEqual(total_slots_for(company, TODAY, slot_minutes=30), 8)

    def test_closed_day_or_missing_config_uses_default(self) -> None:
        closed = _company(monday=DayHours(is_open=False))
        self.assertEqual(total_slots_for(closed, TODAY, default_total_slots=20), 20)
        self.assertEqual(total_slots_for(None, TODAY, default_total_slots=20), 20)


class ComputeMetricsTests(TestCase):
    def test_counts_by_status_and_next_appointment(self) -> None:
        appointments = [
            appointment("p1", "scheduled", "09:00"),
            appointment("p2", "scheduled", "11:30"),
            appointment("p3", "confirmed", "10:15"),
            appointment("p4", "in-progress", "09:30"),
            appointment("p5", "completed", "08:00"),
            appointment("p6", "cancelled", "13:00"),
            appointment("p7", "mystery", "14:00"),
            appointment("p8", "scheduled", "12:00", day=date(2026, 10, 20)),
        ]
        metrics = compute_metrics(appointments, [], None, NOW, default_total_slots=20)

        self.assertEqual(metrics.today_patients, 6)
        self.assertEqual(metrics.scheduled_appointments, 2)
        self.assertEqual(metrics.waiting_patients, 1)
        self.assertEqual(metrics.in_consultation_patients, 1)
        self.assertEqual(metrics.completed_today, 1)
        self.assertEqual(metrics.total_slots, 20)
        self.assertEqual(metrics.occupancy_rate, 30)
        self.assertEqual(metrics.next_appointment, "10:15")

    def test_no_upcoming_after_last_slot(self) -> None:
        metrics = compute_metrics(
            [appointment("p1", "scheduled", "09:00")], [], None, datetime(2026, 10, 19, 18, 0)
        )
        self.assertIsNone(metrics.next_appointment)

    def test_monthly_revenue_sums_current_month_income(self) -> None:
        entries = [
            entry("income", "Consultas", 280),
            entry("income", "Exames", "120.50", day=date(2026, 10, 1)),
            entry("income", "Consultas", 999, day=date(2026, 9, 30)),
            entry("expense", "Aluguel", 3500),
        ]
        metrics = compute_metrics([], entries, None, NOW)
        self.assertEqual(metrics.monthly_revenue, Decimal("400.50"))
        self.assertEqual(metrics.today_patients, 0)
        self.assertEqual(metrics.occupancy_rate, 0)
