from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

from clinic_core.core.domain.entities._base import EntityMixin


class EntryType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


@dataclass(frozen=True, slots=True)
class FinancialEntryEntity(EntityMixin):
    id: str
    type: str
    category: str
    amount: Decimal
    date: date
    description: str = ""

    @property
    def is_income(self) -> bool:
        return self.type == EntryType.INCOME

    @property
    def is_expense(self) -> bool:
        return self.type == EntryType.EXPENSE
