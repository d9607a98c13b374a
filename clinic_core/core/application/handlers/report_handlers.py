from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from clinic_core.core.application.cqrs import QueryHandler
from clinic_core.core.application.dtos.report_dto import (
    IncomeStatementDTO,
    MonthlyTrendDTO,
    PatientHistoryDTO,
    PeriodReportDTO,
)
from clinic_core.core.application.queries.report_queries import (
    GetIncomeStatementQuery,
    GetMonthlyTrendQuery,
    GetPatientHistoryQuery,
    GetPeriodReportQuery,
)
from clinic_core.core.application.services.clock import clinic_now
from clinic_core.core.application.services.income_statement_service import build_income_statement
from clinic_core.core.application.services.report_service import ReportService
from clinic_core.core.domain.repositories.appointment_repository import AppointmentRepository
from clinic_core.core.domain.repositories.financial_entry_repository import FinancialEntryRepository
from clinic_core.core.domain.repositories.patient_repository import PatientRepository
from clinic_core.core.domain.services import period_resolver


class GetIncomeStatementHandler(QueryHandler[GetIncomeStatementQuery, IncomeStatementDTO]):
    def __init__(self, entry_repo: FinancialEntryRepository):
        self.entry_repo = entry_repo

    def handle(self, q: GetIncomeStatementQuery) -> IncomeStatementDTO:
        if q.period is None:
            return build_income_statement(self.entry_repo.list_all())
        return build_income_statement(self.entry_repo.list_between(*period_resolver.resolve(q.period)))


class GetPeriodReportHandler(QueryHandler[GetPeriodReportQuery, PeriodReportDTO]):
    def __init__(
        self,
        patient_repo: PatientRepository,
        appointment_repo: AppointmentRepository,
        entry_repo: FinancialEntryRepository,
        report_service: ReportService,
    ):
        self.patient_repo = patient_repo
        self.appointment_repo = appointment_repo
        self.entry_repo = entry_repo
        self.service = report_service

    def handle(self, q: GetPeriodReportQuery) -> PeriodReportDTO:
        start, end = period_resolver.resolve(q.period)
        return self.service.summarize_period(
            self.patient_repo.list_all(),
            self.appointment_repo.list_between(start, end),
            self.entry_repo.list_between(start, end),
            q.period,
        )


class GetMonthlyTrendHandler(QueryHandler[GetMonthlyTrendQuery, list[MonthlyTrendDTO]]):
    def __init__(
        self,
        appointment_repo: AppointmentRepository,
        entry_repo: FinancialEntryRepository,
        report_service: ReportService,
        clock: Callable[[], datetime] = clinic_now,
    ):
        self.appointment_repo = appointment_repo
        self.entry_repo = entry_repo
        self.service = report_service
        self.clock = clock

    def handle(self, q: GetMonthlyTrendQuery) -> list[MonthlyTrendDTO]:
        return self.service.monthly_trend(
            self.appointment_repo.list_all(),
            self.entry_repo.list_all(),
            q.reference or self.clock().date(),
            q.months,
        )


class GetPatientHistoryHandler(QueryHandler[GetPatientHistoryQuery, PatientHistoryDTO]):
    def __init__(self, appointment_repo: AppointmentRepository, report_service: ReportService):
        self.appointment_repo = appointment_repo
        self.service = report_service

    def handle(self, q: GetPatientHistoryQuery) -> PatientHistoryDTO:
        return self.service.patient_history(self.appointment_repo.list_all(), q.patient_id)
