from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from clinic_core.core.application.commands.cash_balance_commands import SetCashBalanceCommand
from clinic_core.core.application.commands.category_commands import (
    AddCategoryCommand,
    RemoveCategoryCommand,
    RenameCategoryCommand,
)
from clinic_core.core.application.commands.room_commands import (
    AllocateRoomCommand,
    DeallocateRoomCommand,
)
from clinic_core.core.application.commands.store_sync_commands import SyncStoreSnapshotCommand
from clinic_core.core.application.cqrs import BaseService
from clinic_core.core.application.dtos.cash_flow_dto import CashFlowStatementDTO
from clinic_core.core.application.dtos.dashboard_dto import DashboardMetricsDTO, PatientWithStatusDTO
from clinic_core.core.application.dtos.report_dto import (
    IncomeStatementDTO,
    MonthlyTrendDTO,
    PatientHistoryDTO,
    PeriodReportDTO,
)
from clinic_core.core.application.queries.cash_flow_queries import GetCashFlowStatementQuery
from clinic_core.core.application.queries.dashboard_queries import (
    GetDashboardMetricsQuery,
    GetTodayPatientStatusQuery,
)
from clinic_core.core.application.queries.report_queries import (
    GetIncomeStatementQuery,
    GetMonthlyTrendQuery,
    GetPatientHistoryQuery,
    GetPeriodReportQuery,
)
from clinic_core.core.domain.entities.period_entity import PeriodRange
from clinic_core.core.domain.events.events import StoreSnapshotSyncedEvent
from clinic_core.core.domain.repositories.room_scheduling_gateway import RoomAllocationResult
from clinic_core.core.domain.services.category_registry import CategoryUpdate


class ClinicOpsFacadeService(BaseService):
    """
    Fachada usada pela camada de apresentação.

    Cada chamada passa pelos buses e relê o snapshot atual dos repositórios.
    """

    # ------------------------------------------------ painel
    def today_statuses(self, today: date | None = None) -> list[PatientWithStatusDTO]:
        return self.query(GetTodayPatientStatusQuery(today=today))

    def dashboard_metrics(self, now: datetime | date | None = None) -> DashboardMetricsDTO:
        return self.query(GetDashboardMetricsQuery(now=now))

    # ------------------------------------------------ financeiro
    def cash_flow(self, period: PeriodRange | None = None) -> CashFlowStatementDTO:
        return self.query(GetCashFlowStatementQuery(period=period))

    def income_statement(self, period: PeriodRange | None = None) -> IncomeStatementDTO:
        return self.query(GetIncomeStatementQuery(period=period))

    def set_cash_balance(self, balance: Decimal | int | str) -> None:
        self.execute(SetCashBalanceCommand(balance=Decimal(balance)))

    def add_category(self, entry_type: str, name: str) -> CategoryUpdate:
        return self.execute(AddCategoryCommand(entry_type=entry_type, name=name))

    def rename_category(self, entry_type: str, old_name: str, new_name: str) -> CategoryUpdate:
        return self.execute(RenameCategoryCommand(entry_type=entry_type, old_name=old_name, new_name=new_name))

    def remove_category(self, entry_type: str, name: str) -> CategoryUpdate:
        return self.execute(RemoveCategoryCommand(entry_type=entry_type, name=name))

    # ------------------------------------------------ store
    def sync_store_snapshot(
        self,
        patients: list[dict] | None = None,
        appointments: list[dict] | None = None,
        financial_entries: list[dict] | None = None,
        company: dict | None = None,
    ) -> StoreSnapshotSyncedEvent:
        return self.execute(
            SyncStoreSnapshotCommand(
                patients=tuple(patients) if patients is not None else None,
                appointments=tuple(appointments) if appointments is not None else None,
                financial_entries=tuple(financial_entries) if financial_entries is not None else None,
                company=company,
            )
        )

    # ------------------------------------------------ relatórios
    def period_report(self, period: PeriodRange) -> PeriodReportDTO:
        return self.query(GetPeriodReportQuery(period=period))

    def monthly_trend(self, reference: date | None = None, months: int = 6) -> list[MonthlyTrendDTO]:
        return self.query(GetMonthlyTrendQuery(reference=reference, months=months))

    def patient_history(self, patient_id: str) -> PatientHistoryDTO:
        return self.query(GetPatientHistoryQuery(patient_id=patient_id))

    # ------------------------------------------------ ensalamento
    def allocate_room(self, appointment_id: str, professional_id: str | None = None) -> RoomAllocationResult:
        return self.execute(AllocateRoomCommand(appointment_id=appointment_id, professional_id=professional_id))

    def deallocate_room(self, appointment_id: str) -> bool:
        return self.execute(DeallocateRoomCommand(appointment_id=appointment_id))
