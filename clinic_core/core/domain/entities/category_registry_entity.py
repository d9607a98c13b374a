from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from clinic_core.core.domain.entities._base import EntityMixin
from clinic_core.core.domain.entities.financial_entry_entity import EntryType

FALLBACK_CATEGORY = "Outros"

DEFAULT_INCOME_CATEGORIES: tuple[str, ...] = (
    "Consultas",
    "Procedimentos",
    "Exames",
    "Convênios",
    "Particular",
    "Venda de Equipamentos",
    "Venda de Móveis",
    "Empréstimos",
    "Aporte de Sócios",
    "Financiamentos",
    FALLBACK_CATEGORY,
)

DEFAULT_EXPENSE_CATEGORIES: tuple[str, ...] = (
    "Salários",
    "Encargos",
    "Aluguel",
    "Materiais Médicos",
    "Medicamentos",
    "Energia Elétrica",
    "Telefone/Internet",
    "Manutenção",
    "Marketing",
    "Contabilidade",
    "Seguros",
    "Impostos",
    "Equipamentos Médicos",
    "Móveis e Utensílios",
    "Tecnologia",
    "Reformas",
    "Pagamento de Empréstimos",
    "Dividendos",
    "Amortização de Financiamentos",
    FALLBACK_CATEGORY,
)


def _normalize(names: Iterable[str]) -> tuple[str, ...]:
    """Remove vazios e duplicatas (case-insensitive) e garante o fallback."""
    seen: set[str] = set()
    out: list[str] = []
    for raw in names:
        name = (raw or "").strip()
        if not name or name.lower() in seen:
            continue
        seen.add(name.lower())
        out.append(name)
    if FALLBACK_CATEGORY.lower() not in seen:
        out.append(FALLBACK_CATEGORY)
    return tuple(out)


@dataclass(frozen=True, slots=True)
class CategoryRegistry(EntityMixin):
    income: tuple[str, ...] = DEFAULT_INCOME_CATEGORIES
    expense: tuple[str, ...] = DEFAULT_EXPENSE_CATEGORIES

    def __post_init__(self) -> None:
        object.__setattr__(self, "income", _normalize(self.income))
        object.__setattr__(self, "expense", _normalize(self.expense))

    def names(self, entry_type: EntryType | str) -> tuple[str, ...]:
        return self.income if EntryType(entry_type) is EntryType.INCOME else self.expense

    def find(self, entry_type: EntryType | str, name: str) -> str | None:
        """Nome armazenado que colide (case-insensitive) com `name`."""
        wanted = name.strip().lower()
        return next((c for c in self.names(entry_type) if c.lower() == wanted), None)

    def with_names(self, entry_type: EntryType | str, names: Iterable[str]) -> CategoryRegistry:
        if EntryType(entry_type) is EntryType.INCOME:
            return CategoryRegistry(income=tuple(names), expense=self.expense)
        return CategoryRegistry(income=self.income, expense=tuple(names))
