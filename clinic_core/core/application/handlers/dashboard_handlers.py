from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from clinic_core.core.application.cqrs import QueryHandler
from clinic_core.core.application.dtos.dashboard_dto import DashboardMetricsDTO, PatientWithStatusDTO
from clinic_core.core.application.queries.dashboard_queries import (
    GetDashboardMetricsQuery,
    GetTodayPatientStatusQuery,
)
from clinic_core.core.application.services.clock import clinic_now
from clinic_core.core.application.services.metrics_service import compute_metrics
from clinic_core.core.application.services.status_projection_service import project_today
from clinic_core.core.domain.repositories.appointment_repository import AppointmentRepository
from clinic_core.core.domain.repositories.company_config_repository import CompanyConfigRepository
from clinic_core.core.domain.repositories.financial_entry_repository import FinancialEntryRepository
from clinic_core.core.domain.repositories.patient_repository import PatientRepository


class GetTodayPatientStatusHandler(QueryHandler[GetTodayPatientStatusQuery, list[PatientWithStatusDTO]]):
    def __init__(
        self,
        patient_repo: PatientRepository,
        appointment_repo: AppointmentRepository,
        clock: Callable[[], datetime] = clinic_now,
    ):
        self.patient_repo = patient_repo
        self.appointment_repo = appointment_repo
        self.clock = clock

    def handle(self, q: GetTodayPatientStatusQuery) -> list[PatientWithStatusDTO]:
        today = q.today or self.clock().date()
        return project_today(
            self.patient_repo.list_all(),
            self.appointment_repo.list_between(today, today),
            today,
        )


class GetDashboardMetricsHandler(QueryHandler[GetDashboardMetricsQuery, DashboardMetricsDTO]):
    def __init__(
        self,
        appointment_repo: AppointmentRepository,
        entry_repo: FinancialEntryRepository,
        company_repo: CompanyConfigRepository,
        clock: Callable[[], datetime] = clinic_now,
    ):
        self.appointment_repo = appointment_repo
        self.entry_repo = entry_repo
        self.company_repo = company_repo
        self.clock = clock

    def handle(self, q: GetDashboardMetricsQuery) -> DashboardMetricsDTO:
        now = q.now or self.clock()
        return compute_metrics(
            self.appointment_repo.list_all(),
            self.entry_repo.list_all(),
            self.company_repo.get(),
            now,
        )
