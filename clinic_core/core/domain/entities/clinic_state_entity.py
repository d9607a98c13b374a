from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from clinic_core.core.domain.entities._base import EntityMixin
from clinic_core.core.domain.entities.appointment_entity import AppointmentEntity
from clinic_core.core.domain.entities.category_registry_entity import CategoryRegistry
from clinic_core.core.domain.entities.company_config_entity import CompanyConfigEntity
from clinic_core.core.domain.entities.financial_entry_entity import FinancialEntryEntity
from clinic_core.core.domain.entities.patient_entity import PatientEntity


@dataclass(frozen=True, slots=True)
class ClinicState(EntityMixin):
    """
    Snapshot completo do estado da clínica.

    Nunca é mutado: reducers devolvem um novo snapshot (ver
    `domain.services.state_reducers`).
    """

    patients: tuple[PatientEntity, ...] = ()
    appointments: tuple[AppointmentEntity, ...] = ()
    financial_entries: tuple[FinancialEntryEntity, ...] = ()
    company: CompanyConfigEntity | None = None
    categories: CategoryRegistry = field(default_factory=CategoryRegistry)
    cash_balance: Decimal = Decimal("0")
