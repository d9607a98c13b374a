"""DRE, relatórios por período e formatação pt-BR."""
from datetime import date
from decimal import Decimal
from unittest import TestCase

from clinic_core.core.application.services.formatter_service import FormatterService
from clinic_core.core.application.services.income_statement_service import build_income_statement
from clinic_core.core.application.services.report_service import UNKNOWN_DOCTOR, ReportService
from clinic_core.core.domain.services import period_resolver
from tests.helpers.builders import TODAY, appointment, entry, patient


class IncomeStatementTests(TestCase):
    def test_groups_and_ranks_by_amount(self) -> None:
        dre = build_income_statement([
            entry("income", "Exames", 100),
            entry("income", "Consultas", 300),
            entry("income", "Consultas", 100),
            entry("expense", "Aluguel", 250),
        ])
        self.assertEqual([c.category for c in dre.revenue], ["Consultas", "Exames"])
        self.assertEqual(dre.revenue[0].share, 80.0)
        self.assertEqual(dre.total_revenue, Decimal("500"))
        self.assertEqual(dre.net_result, Decimal("250"))
        self.assertEqual(dre.margin, 50.0)

    def test_empty_statement_has_zero_margin(self) -> None:
        self.assertEqual(build_income_statement([]).margin, 0.0)


class ReportServiceTests(TestCase):
    def setUp(self) -> None:
        self.service = ReportService(FormatterService())

    def test_summarize_period(self) -> None:
        period = period_resolver.period_for("month", TODAY)
        report = self.service.summarize_period(
            [patient("p1"), patient("p2")],
            [
                appointment("p1", "completed", doctor_name="Dra. Ana"),
                appointment("p2", "cancelled", doctor_name="Dra. Ana"),
                appointment("p2", "scheduled"),
                appointment("p1", "completed", day=date(2026, 11, 2)),
            ],
            [entry("income", "Consultas", 280), entry("income", "Consultas", 50, day=date(2026, 9, 1))],
            period,
        )
        self.assertEqual(report.label, "outubro de 2026")
        self.assertEqual(report.total_patients, 2)
        self.assertEqual(report.total_appointments, 3)
        self.assertEqual(report.completed_appointments, 1)
        self.assertEqual(report.cancelled_appointments, 1)
        self.assertEqual(report.appointments_by_doctor, {"Dra. Ana": 2, UNKNOWN_DOCTOR: 1})
        self.assertEqual(report.income_statement.total_revenue, Decimal("280"))

    def test_monthly_trend_oldest_first(self) -> None:
        trend = self.service.monthly_trend(
            [appointment("p1", day=date(2026, 9, 3))],
            [entry("income", "Consultas", 200, day=date(2026, 9, 3)), entry("expense", "Aluguel", 50)],
            TODAY,
            months=3,
        )
        self.assertEqual([(t.year, t.month) for t in trend], [(2026, 8), (2026, 9), (2026, 10)])
        self.assertEqual(trend[1].label, "set/2026")
        self.assertEqual(trend[1].appointments, 1)
        self.assertEqual(trend[1].profit, Decimal("200"))
        self.assertEqual(trend[2].expenses, Decimal("50"))

    def test_patient_history(self) -> None:
        history = ReportService.patient_history(
            [
                appointment("p1", day=date(2026, 8, 1), type="exam", id="old-exam"),
                appointment("p1", day=date(2026, 10, 1), id="latest"),
                appointment("p2", day=date(2026, 10, 5)),
            ],
            "p1",
        )
        self.assertEqual(history.total_appointments, 2)
        self.assertEqual(history.last_appointment.id, "latest")
        self.assertEqual(history.last_exam.id, "old-exam")
        self.assertTrue(ReportService.patient_history([], "p9").is_new)


class FormatterTests(TestCase):
    def setUp(self) -> None:
        self.fmt = FormatterService()

    def test_currency(self) -> None:
        self.assertEqual(self.fmt.format_currency(Decimal("1234.5")), "R$ 1.234,50")
        self.assertEqual(self.fmt.format_currency(Decimal("-3220")), "-R$ 3.220,00")

    def test_dates_and_percentages(self) -> None:
        self.assertEqual(self.fmt.format_date(TODAY), "19/10/2026")
        self.assertEqual(self.fmt.format_percentage(33.4), "33%")
