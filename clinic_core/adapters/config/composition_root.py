import structlog
from dependency_injector import containers, errors, providers

from clinic_core.adapters.mappers.store_payload_mapper import StorePayloadMapper
from clinic_core.adapters.repositories.appointment_repo_impl import AppointmentRepoImpl
from clinic_core.adapters.repositories.cash_balance_repo_impl import CashBalanceRepoImpl
from clinic_core.adapters.repositories.category_registry_repo_impl import CategoryRegistryRepoImpl
from clinic_core.adapters.repositories.clinic_state_store import ClinicStateStore
from clinic_core.adapters.repositories.company_config_repo_impl import CompanyConfigRepoImpl
from clinic_core.adapters.repositories.financial_entry_repo_impl import FinancialEntryRepoImpl
from clinic_core.adapters.repositories.patient_repo_impl import PatientRepoImpl

# Commands
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

# CQRS buses
from clinic_core.core.application.cqrs import CommandBus, QueryBus

# Handlers
from clinic_core.core.application.handlers.cash_balance_handlers import SetCashBalanceHandler
from clinic_core.core.application.handlers.cash_flow_handlers import GetCashFlowStatementHandler
from clinic_core.core.application.handlers.category_handlers import (
    AddCategoryHandler,
    RemoveCategoryHandler,
    RenameCategoryHandler,
)
from clinic_core.core.application.handlers.dashboard_handlers import (
    GetDashboardMetricsHandler,
    GetTodayPatientStatusHandler,
)
from clinic_core.core.application.handlers.report_handlers import (
    GetIncomeStatementHandler,
    GetMonthlyTrendHandler,
    GetPatientHistoryHandler,
    GetPeriodReportHandler,
)
from clinic_core.core.application.handlers.room_handlers import (
    AllocateRoomHandler,
    DeallocateRoomHandler,
)
from clinic_core.core.application.handlers.store_sync_handlers import SyncStoreSnapshotHandler

# Queries
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

# Serviços
from clinic_core.core.application.services.clinic_ops_facade import ClinicOpsFacadeService
from clinic_core.core.application.services.clock import clinic_now
from clinic_core.core.application.services.formatter_service import FormatterService
from clinic_core.core.application.services.report_service import ReportService
from clinic_core.core.domain.repositories.room_scheduling_gateway import RoomSchedulingGateway
from clinic_core.core.domain.services.event_dispatcher import EventDispatcher
from config import settings as app_settings
from config.structlog_config import configure_logging

logger = structlog.get_logger(__name__)

container = None


# ─────────────────────────────────────────────────────────
# Construção do container DI
# ─────────────────────────────────────────────────────────
class Container(containers.DeclarativeContainer):
    config = providers.Configuration(default={"clinic": {"timezone": app_settings.CLINIC_TIMEZONE}})

    # Infra
    event_dispatcher = providers.Singleton(EventDispatcher)
    clock            = providers.Object(clinic_now)
    store            = providers.Singleton(ClinicStateStore)
    payload_mapper   = providers.Singleton(StorePayloadMapper)

    # Serviço externo de ensalamento (opcional; sobrescrever no bootstrap)
    room_gateway = providers.Dependency(instance_of=RoomSchedulingGateway)

    # CQRS
    command_bus = providers.Singleton(CommandBus, dispatcher=event_dispatcher)
    query_bus   = providers.Singleton(QueryBus)

    # Implementações de Repositórios
    patient_repo           = providers.Singleton(PatientRepoImpl,           store=store)
    appointment_repo       = providers.Singleton(AppointmentRepoImpl,       store=store)
    financial_entry_repo   = providers.Singleton(FinancialEntryRepoImpl,    store=store)
    company_config_repo    = providers.Singleton(CompanyConfigRepoImpl,     store=store)
    category_registry_repo = providers.Singleton(CategoryRegistryRepoImpl,  store=store)
    cash_balance_repo      = providers.Singleton(CashBalanceRepoImpl,       store=store)

    # Serviços de negócio
    formatter_service = providers.Singleton(FormatterService, currency_symbol="R$")
    report_service    = providers.Singleton(ReportService, formatter=formatter_service)

    # Handlers (comandos)
    add_category_handler = providers.Factory(
        AddCategoryHandler,
        registry_repo=category_registry_repo,
        dispatcher=event_dispatcher,
    )
    rename_category_handler = providers.Factory(
        RenameCategoryHandler,
        registry_repo=category_registry_repo,
        dispatcher=event_dispatcher,
    )
    remove_category_handler = providers.Factory(
        RemoveCategoryHandler,
        registry_repo=category_registry_repo,
        dispatcher=event_dispatcher,
    )
    set_cash_balance_handler = providers.Factory(SetCashBalanceHandler, repo=cash_balance_repo)
    sync_store_snapshot_handler = providers.Factory(
        SyncStoreSnapshotHandler,
        mapper=payload_mapper,
        patient_repo=patient_repo,
        appointment_repo=appointment_repo,
        entry_repo=financial_entry_repo,
        company_repo=company_config_repo,
    )
    allocate_room_handler    = providers.Factory(
        AllocateRoomHandler,
        appointment_repo=appointment_repo,
        gateway=room_gateway,
        dispatcher=event_dispatcher,
        tz_name=config.clinic.timezone,
    )
    deallocate_room_handler  = providers.Factory(
        DeallocateRoomHandler,
        gateway=room_gateway,
        dispatcher=event_dispatcher,
    )

    # Handlers (queries)
    today_status_handler = providers.Factory(
        GetTodayPatientStatusHandler,
        patient_repo=patient_repo,
        appointment_repo=appointment_repo,
        clock=clock,
    )
    dashboard_metrics_handler = providers.Factory(
        GetDashboardMetricsHandler,
        appointment_repo=appointment_repo,
        entry_repo=financial_entry_repo,
        company_repo=company_config_repo,
        clock=clock,
    )
    cash_flow_handler = providers.Factory(
        GetCashFlowStatementHandler,
        entry_repo=financial_entry_repo,
        balance_repo=cash_balance_repo,
    )
    income_statement_handler = providers.Factory(GetIncomeStatementHandler, entry_repo=financial_entry_repo)
    period_report_handler    = providers.Factory(
        GetPeriodReportHandler,
        patient_repo=patient_repo,
        appointment_repo=appointment_repo,
        entry_repo=financial_entry_repo,
        report_service=report_service,
    )
    monthly_trend_handler    = providers.Factory(
        GetMonthlyTrendHandler,
        appointment_repo=appointment_repo,
        entry_repo=financial_entry_repo,
        report_service=report_service,
        clock=clock,
    )
    patient_history_handler  = providers.Factory(
        GetPatientHistoryHandler,
        appointment_repo=appointment_repo,
        report_service=report_service,
    )

    # Fachada
    clinic_ops_service = providers.Singleton(
        ClinicOpsFacadeService,
        command_bus=command_bus,
        query_bus=query_bus,
    )

    def init(self):
        # Bus de comandos
        cmd_bus = self.command_bus()
        cmd_bus.register(AddCategoryCommand,    self.add_category_handler())
        cmd_bus.register(RenameCategoryCommand, self.rename_category_handler())
        cmd_bus.register(RemoveCategoryCommand, self.remove_category_handler())
        cmd_bus.register(SetCashBalanceCommand, self.set_cash_balance_handler())
        cmd_bus.register(SyncStoreSnapshotCommand, self.sync_store_snapshot_handler())

        try:
            self.room_gateway()
        except errors.Error:
            logger.info("di.room_gateway_not_configured")
        else:
            cmd_bus.register(AllocateRoomCommand,   self.allocate_room_handler())
            cmd_bus.register(DeallocateRoomCommand, self.deallocate_room_handler())

        # Bus de queries
        qry_bus = self.query_bus()
        qry_bus.register(GetTodayPatientStatusQuery, self.today_status_handler())
        qry_bus.register(GetDashboardMetricsQuery,   self.dashboard_metrics_handler())
        qry_bus.register(GetCashFlowStatementQuery,  self.cash_flow_handler())
        qry_bus.register(GetIncomeStatementQuery,    self.income_statement_handler())
        qry_bus.register(GetPeriodReportQuery,       self.period_report_handler())
        qry_bus.register(GetMonthlyTrendQuery,       self.monthly_trend_handler())
        qry_bus.register(GetPatientHistoryQuery,     self.patient_history_handler())


def setup_di_container_from_settings(settings, room_gateway: RoomSchedulingGateway | None = None):
    """Inicializa o container uma única vez a partir de `config.settings`."""
    global container  # noqa: PLW0603
    if container is not None:
        logger.debug("DI container já inicializado.")
        return container

    configure_logging(settings.LOG_LEVEL, settings.JSON_LOGS)
    container = Container()
    container.config.clinic.timezone.from_value(settings.CLINIC_TIMEZONE)
    if room_gateway is not None:
        container.room_gateway.override(room_gateway)
    Container.init(container)
    logger.info("di.container_ready", timezone=settings.CLINIC_TIMEZONE)
    return container
