"""
Reducers puros sobre `ClinicState`.

Cada função recebe o snapshot atual e devolve um novo; a persistência
(local ou remota) fica a cargo de quem chama.
"""
from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from clinic_core.core.domain.entities.appointment_entity import AppointmentEntity
from clinic_core.core.domain.entities.clinic_state_entity import ClinicState
from clinic_core.core.domain.entities.company_config_entity import CompanyConfigEntity
from clinic_core.core.domain.entities.financial_entry_entity import EntryType, FinancialEntryEntity
from clinic_core.core.domain.entities.patient_entity import PatientEntity
from clinic_core.core.domain.services import category_registry
from clinic_core.core.domain.services.category_registry import CategoryUpdate


# ───────────────────────── snapshots ──────────────────────────
def load_snapshot(  # noqa: PLR0913
    state: ClinicState,
    *,
    patients: Iterable[PatientEntity] | None = None,
    appointments: Iterable[AppointmentEntity] | None = None,
    financial_entries: Iterable[FinancialEntryEntity] | None = None,
    company: CompanyConfigEntity | None = None,
) -> ClinicState:
    """Substitui as coleções informadas por um snapshot novo do store."""
    return state.evolve(
        patients=tuple(patients) if patients is not None else state.patients,
        appointments=tuple(appointments) if appointments is not None else state.appointments,
        financial_entries=(
            tuple(financial_entries) if financial_entries is not None else state.financial_entries
        ),
        company=company if company is not None else state.company,
    )


def set_cash_balance(state: ClinicState, balance: Decimal) -> ClinicState:
    return state.evolve(cash_balance=Decimal(balance))


# ───────────────────────── categorias ──────────────────────────
def apply_category_update(state: ClinicState, update: CategoryUpdate) -> ClinicState:
    if not update.changed:
        return state
    return state.evolve(
        categories=update.registry,
        financial_entries=category_registry.apply_rewrites(
            state.financial_entries, update.rewritten_entries
        ),
    )


def add_category(state: ClinicState, entry_type: EntryType | str, name: str) -> tuple[ClinicState, CategoryUpdate]:
    update = category_registry.add(state.categories, entry_type, name)
    return apply_category_update(state, update), update


def rename_category(
    state: ClinicState, entry_type: EntryType | str, old_name: str, new_name: str
) -> tuple[ClinicState, CategoryUpdate]:
    update = category_registry.rename(
        state.categories, state.financial_entries, entry_type, old_name, new_name
    )
    return apply_category_update(state, update), update


def remove_category(state: ClinicState, entry_type: EntryType | str, name: str) -> tuple[ClinicState, CategoryUpdate]:
    update = category_registry.remove(state.categories, state.financial_entries, entry_type, name)
    return apply_category_update(state, update), update
