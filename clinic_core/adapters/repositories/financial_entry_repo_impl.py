from collections.abc import Iterable
from datetime import date

from clinic_core.adapters.repositories.clinic_state_store import ClinicStateStore
from clinic_core.core.domain.entities.financial_entry_entity import FinancialEntryEntity
from clinic_core.core.domain.repositories.financial_entry_repository import FinancialEntryRepository
from clinic_core.core.domain.services import state_reducers


class FinancialEntryRepoImpl(FinancialEntryRepository):
    def __init__(self, store: ClinicStateStore) -> None:
        self._store = store

    def list_all(self) -> list[FinancialEntryEntity]:
        return list(self._store.state.financial_entries)

    def list_between(self, start: date, end: date) -> list[FinancialEntryEntity]:
        return [e for e in self._store.state.financial_entries if start <= e.date <= end]

    def replace_all(self, entries: Iterable[FinancialEntryEntity]) -> None:
        self._store.update(lambda s: state_reducers.load_snapshot(s, financial_entries=entries))
