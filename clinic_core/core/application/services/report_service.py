from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from datetime import date
from decimal import Decimal

from clinic_core.core.application.dtos.report_dto import (
    MonthlyTrendDTO,
    PatientHistoryDTO,
    PeriodReportDTO,
)
from clinic_core.core.application.services.formatter_service import FormatterService
from clinic_core.core.application.services.income_statement_service import build_income_statement
from clinic_core.core.domain.entities.appointment_entity import (
    AppointmentEntity,
    AppointmentStatus,
    AppointmentType,
)
from clinic_core.core.domain.entities.financial_entry_entity import FinancialEntryEntity
from clinic_core.core.domain.entities.patient_entity import PatientEntity
from clinic_core.core.domain.entities.period_entity import PeriodRange
from clinic_core.core.domain.services import period_resolver

UNKNOWN_DOCTOR = "Profissional não informado"


class ReportService:
    """Relatórios por período (visão geral, evolução mensal, histórico do paciente)."""

    def __init__(self, formatter: FormatterService):
        self.formatter = formatter

    # ▶ visão geral do período
    def summarize_period(
        self,
        patients: Sequence[PatientEntity],
        appointments: Iterable[AppointmentEntity],
        financial_entries: Iterable[FinancialEntryEntity],
        period: PeriodRange,
    ) -> PeriodReportDTO:
        window_appointments = period_resolver.filter_by_period(appointments, period, lambda a: a.date)
        window_entries = period_resolver.filter_by_period(financial_entries, period, lambda e: e.date)

        by_status = Counter(a.status for a in window_appointments)
        by_doctor = Counter(a.doctor_name or UNKNOWN_DOCTOR for a in window_appointments)

        return PeriodReportDTO(
            period=period,
            label=self.formatter.format_period(period),
            total_patients=len(patients),
            total_appointments=len(window_appointments),
            completed_appointments=by_status[AppointmentStatus.COMPLETED.value],
            cancelled_appointments=by_status[AppointmentStatus.CANCELLED.value],
            appointments_by_status=dict(by_status),
            appointments_by_doctor=dict(by_doctor),
            income_statement=build_income_statement(window_entries),
        )

    # ▶ evolução mensal (mais antigo primeiro)
    def monthly_trend(
        self,
        appointments: Iterable[AppointmentEntity],
        financial_entries: Iterable[FinancialEntryEntity],
        reference: date,
        months: int = 6,
    ) -> list[MonthlyTrendDTO]:
        appointments = list(appointments)
        financial_entries = list(financial_entries)

        current = period_resolver.period_for("month", reference)
        windows = [current]
        for _ in range(months - 1):
            windows.append(period_resolver.navigate(windows[-1], -1))

        out: list[MonthlyTrendDTO] = []
        for window in reversed(windows):
            entries = period_resolver.filter_by_period(financial_entries, window, lambda e: e.date)
            month_appointments = period_resolver.filter_by_period(appointments, window, lambda a: a.date)
            out.append(
                MonthlyTrendDTO(
                    year=window.start_date.year,
                    month=window.start_date.month,
                    label=self.formatter.format_month(window.start_date.year, window.start_date.month),
                    appointments=len(month_appointments),
                    revenue=sum((e.amount for e in entries if e.is_income), Decimal("0")),
                    expenses=sum((e.amount for e in entries if e.is_expense), Decimal("0")),
                )
            )
        return out

    # ▶ histórico do paciente
    @staticmethod
    def patient_history(appointments: Iterable[AppointmentEntity], patient_id: str) -> PatientHistoryDTO:
        history = sorted(
            (a for a in appointments if a.patient_id == patient_id),
            key=lambda a: a.sort_key,
            reverse=True,
        )
        return PatientHistoryDTO(
            total_appointments=len(history),
            last_appointment=history[0] if history else None,
            last_exam=next((a for a in history if a.type == AppointmentType.EXAM), None),
        )
