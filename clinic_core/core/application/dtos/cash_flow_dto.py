from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from clinic_core.core.domain.entities.financial_entry_entity import FinancialEntryEntity


class CashFlowActivity(str, Enum):
    OPERATIONAL = "operational"
    INVESTMENT = "investment"
    FINANCING = "financing"
    UNCLASSIFIED = "unclassified"


@dataclass(frozen=True)
class ActivityBucketDTO:
    activity: CashFlowActivity
    inflows: Decimal = Decimal("0")
    outflows: Decimal = Decimal("0")
    entry_count: int = 0

    @property
    def net_flow(self) -> Decimal:
        return self.inflows - self.outflows


@dataclass(frozen=True)
class CashFlowStatementDTO:
    opening_balance: Decimal
    operational: ActivityBucketDTO
    investment: ActivityBucketDTO
    financing: ActivityBucketDTO
    # Fora das três atividades; não entra no fluxo líquido
    unclassified: ActivityBucketDTO
    unclassified_entries: tuple[FinancialEntryEntity, ...] = field(default=())

    @property
    def classified_buckets(self) -> tuple[ActivityBucketDTO, ...]:
        return (self.operational, self.investment, self.financing)

    @property
    def total_inflows(self) -> Decimal:
        return sum((b.inflows for b in self.classified_buckets), Decimal("0"))

    @property
    def total_outflows(self) -> Decimal:
        return sum((b.outflows for b in self.classified_buckets), Decimal("0"))

    @property
    def net_cash_flow(self) -> Decimal:
        return sum((b.net_flow for b in self.classified_buckets), Decimal("0"))

    @property
    def closing_balance(self) -> Decimal:
        return self.opening_balance + self.net_cash_flow
