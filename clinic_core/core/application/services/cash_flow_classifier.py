"""
Demonstração do Fluxo de Caixa (DFC).

Cada lançamento cai em exatamente uma atividade, pela tabela fixa de
categorias abaixo. Categorias fora da tabela vão para `unclassified`: são
reportadas e contadas, mas não entram no fluxo líquido.
"""
from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal
from types import MappingProxyType

import structlog

from clinic_core.adapters.observability.metrics import CASH_FLOW_UNCLASSIFIED_ENTRIES
from clinic_core.core.application.dtos.cash_flow_dto import (
    ActivityBucketDTO,
    CashFlowActivity,
    CashFlowStatementDTO,
)
from clinic_core.core.domain.entities.financial_entry_entity import EntryType, FinancialEntryEntity

logger = structlog.get_logger(__name__)

_ACTIVITY_CATEGORIES: dict[CashFlowActivity, dict[EntryType, frozenset[str]]] = {
    CashFlowActivity.OPERATIONAL: {
        EntryType.INCOME: frozenset({"Consultas", "Procedimentos", "Exames", "Convênios", "Particular"}),
        EntryType.EXPENSE: frozenset({
            "Salários", "Encargos", "Materiais Médicos", "Medicamentos", "Aluguel",
            "Energia Elétrica", "Telefone/Internet", "Contabilidade", "Marketing",
            "Seguros", "Impostos",
        }),
    },
    CashFlowActivity.INVESTMENT: {
        EntryType.INCOME: frozenset({"Venda de Equipamentos", "Venda de Móveis"}),
        EntryType.EXPENSE: frozenset({"Equipamentos Médicos", "Móveis e Utensílios", "Tecnologia", "Reformas"}),
    },
    CashFlowActivity.FINANCING: {
        EntryType.INCOME: frozenset({"Empréstimos", "Aporte de Sócios", "Financiamentos"}),
        EntryType.EXPENSE: frozenset({"Pagamento de Empréstimos", "Dividendos", "Amortização de Financiamentos"}),
    },
}

# (tipo, categoria) → atividade
ACTIVITY_BY_CATEGORY = MappingProxyType({
    (entry_type, category): activity
    for activity, by_type in _ACTIVITY_CATEGORIES.items()
    for entry_type, categories in by_type.items()
    for category in categories
})


def _type_label(entry: FinancialEntryEntity) -> str:
    try:
        return EntryType(entry.type).value
    except ValueError:
        return "unknown"


def activity_for(entry: FinancialEntryEntity) -> CashFlowActivity:
    try:
        entry_type = EntryType(entry.type)
    except ValueError:
        return CashFlowActivity.UNCLASSIFIED
    return ACTIVITY_BY_CATEGORY.get((entry_type, entry.category), CashFlowActivity.UNCLASSIFIED)


def classify(
    entries: Iterable[FinancialEntryEntity],
    opening_balance: Decimal | int | str,
) -> CashFlowStatementDTO:
    """
    Agrupa os lançamentos por atividade e calcula fluxo líquido e saldo final.

    O saldo inicial é um valor externo, editado pelo usuário; nunca é
    recalculado a partir do histórico.
    """
    totals = {
        activity: {"inflows": Decimal("0"), "outflows": Decimal("0"), "count": 0}
        for activity in CashFlowActivity
    }
    unclassified: list[FinancialEntryEntity] = []

    for entry in entries:
        activity = activity_for(entry)
        bucket = totals[activity]
        if entry.is_income:
            bucket["inflows"] += entry.amount
        elif entry.is_expense:
            bucket["outflows"] += entry.amount
        bucket["count"] += 1
        if activity is CashFlowActivity.UNCLASSIFIED:
            unclassified.append(entry)
            CASH_FLOW_UNCLASSIFIED_ENTRIES.labels(entry_type=_type_label(entry)).inc()

    if unclassified:
        logger.warning(
            "cash_flow.unclassified_entries",
            count=len(unclassified),
            categories=sorted({e.category for e in unclassified}),
        )

    buckets = {
        activity: ActivityBucketDTO(
            activity=activity,
            inflows=data["inflows"],
            outflows=data["outflows"],
            entry_count=data["count"],
        )
        for activity, data in totals.items()
    }

    return CashFlowStatementDTO(
        opening_balance=Decimal(opening_balance),
        operational=buckets[CashFlowActivity.OPERATIONAL],
        investment=buckets[CashFlowActivity.INVESTMENT],
        financing=buckets[CashFlowActivity.FINANCING],
        unclassified=buckets[CashFlowActivity.UNCLASSIFIED],
        unclassified_entries=tuple(unclassified),
    )
