"""DRE simplificada: receitas e despesas agrupadas por categoria."""
from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from decimal import Decimal

from clinic_core.core.application.dtos.report_dto import CategoryTotalDTO, IncomeStatementDTO
from clinic_core.core.domain.entities.financial_entry_entity import FinancialEntryEntity


def _share(amount: Decimal, total: Decimal) -> float:
    return round(float(amount / total * 100), 2) if total else 0.0


def _ranked(totals: dict[str, Decimal]) -> tuple[CategoryTotalDTO, ...]:
    grand_total = sum(totals.values(), Decimal("0"))
    ordered = sorted(totals.items(), key=lambda kv: (-kv[1], kv[0]))
    return tuple(
        CategoryTotalDTO(category=category, amount=amount, share=_share(amount, grand_total))
        for category, amount in ordered
    )


def build_income_statement(entries: Iterable[FinancialEntryEntity]) -> IncomeStatementDTO:
    revenue: dict[str, Decimal] = defaultdict(Decimal)
    expenses: dict[str, Decimal] = defaultdict(Decimal)
    for entry in entries:
        if entry.is_income:
            revenue[entry.category] += entry.amount
        elif entry.is_expense:
            expenses[entry.category] += entry.amount

    return IncomeStatementDTO(
        revenue=_ranked(revenue),
        expenses=_ranked(expenses),
        total_revenue=sum(revenue.values(), Decimal("0")),
        total_expenses=sum(expenses.values(), Decimal("0")),
    )
