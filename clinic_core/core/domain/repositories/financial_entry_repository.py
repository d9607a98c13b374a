from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import date

from clinic_core.core.domain.entities.financial_entry_entity import FinancialEntryEntity


class FinancialEntryRepository(ABC):
    @abstractmethod
    def list_all(self) -> list[FinancialEntryEntity]:
        """Snapshot completo de lançamentos."""
        ...

    @abstractmethod
    def list_between(self, start: date, end: date) -> list[FinancialEntryEntity]:
        """Lançamentos com `start <= date <= end`."""
        ...

    @abstractmethod
    def replace_all(self, entries: Iterable[FinancialEntryEntity]) -> None:
        ...
