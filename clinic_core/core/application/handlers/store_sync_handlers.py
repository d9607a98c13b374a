import structlog

from clinic_core.adapters.mappers.store_payload_mapper import MappingError, StorePayloadMapper
from clinic_core.core.application.cqrs import CommandHandler
from clinic_core.core.domain.events.events import StoreSnapshotSyncedEvent
from clinic_core.core.domain.repositories.appointment_repository import AppointmentRepository
from clinic_core.core.domain.repositories.company_config_repository import CompanyConfigRepository
from clinic_core.core.domain.repositories.financial_entry_repository import FinancialEntryRepository
from clinic_core.core.domain.repositories.patient_repository import PatientRepository

from ..commands.store_sync_commands import SyncStoreSnapshotCommand

logger = structlog.get_logger(__name__)


class SyncStoreSnapshotHandler(CommandHandler[SyncStoreSnapshotCommand]):
    """
    Carrega um snapshot do store remoto nos repositórios.

    Linhas inválidas são descartadas (e registradas) pelo mapper; as válidas
    substituem a coleção inteira.
    """

    def __init__(  # noqa: PLR0913
        self,
        mapper: StorePayloadMapper,
        patient_repo: PatientRepository,
        appointment_repo: AppointmentRepository,
        entry_repo: FinancialEntryRepository,
        company_repo: CompanyConfigRepository,
    ):
        self.mapper = mapper
        self.patient_repo = patient_repo
        self.appointment_repo = appointment_repo
        self.entry_repo = entry_repo
        self.company_repo = company_repo

    def handle(self, cmd: SyncStoreSnapshotCommand) -> StoreSnapshotSyncedEvent:
        counts = {"patients": 0, "appointments": 0, "financial_entries": 0}
        received = 0

        if cmd.patients is not None:
            patients = self.mapper.map_many(self.mapper.map_patient, cmd.patients)
            self.patient_repo.replace_all(patients)
            counts["patients"] = len(patients)
            received += len(cmd.patients)

        if cmd.appointments is not None:
            appointments = self.mapper.map_many(self.mapper.map_appointment, cmd.appointments)
            self.appointment_repo.replace_all(appointments)
            counts["appointments"] = len(appointments)
            received += len(cmd.appointments)

        if cmd.financial_entries is not None:
            entries = self.mapper.map_many(self.mapper.map_financial_entry, cmd.financial_entries)
            self.entry_repo.replace_all(entries)
            counts["financial_entries"] = len(entries)
            received += len(cmd.financial_entries)

        skipped = received - sum(counts.values())
        if cmd.company is not None:
            try:
                self.company_repo.save(self.mapper.map_company(cmd.company))
            except MappingError:
                skipped += 1
                logger.warning("store_sync.company_skipped", company_id=cmd.company.get("id"))

        logger.info("store_sync.loaded", skipped=skipped, **counts)
        return StoreSnapshotSyncedEvent(skipped_rows=skipped, **counts)
