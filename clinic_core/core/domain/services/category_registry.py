"""
Reducers do registro de categorias (receitas / despesas).

Cada operação recebe o registro atual (e, quando aplicável, os lançamentos
financeiros) e devolve um `CategoryUpdate`. Operações rejeitadas nunca
lançam exceção: devolvem o registro intacto com `changed=False` e o motivo,
para que a interface exiba a validação.
"""
from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum

import structlog

from clinic_core.core.domain.entities.category_registry_entity import (
    FALLBACK_CATEGORY,
    CategoryRegistry,
)
from clinic_core.core.domain.entities.financial_entry_entity import (
    EntryType,
    FinancialEntryEntity,
)

logger = structlog.get_logger(__name__)


class RejectionReason(str, Enum):
    EMPTY_NAME = "empty_name"
    DUPLICATE = "duplicate"
    PROTECTED_FALLBACK = "protected_fallback"
    NOT_FOUND = "not_found"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class CategoryUpdate:
    registry: CategoryRegistry
    rewritten_entries: tuple[FinancialEntryEntity, ...] = ()
    changed: bool = False
    reason: RejectionReason | None = None
    previous_name: str | None = None
    name: str | None = None
    entry_type: EntryType | None = field(default=None)


def _reject(
    registry: CategoryRegistry,
    entry_type: EntryType,
    reason: RejectionReason,
    name: str | None,
) -> CategoryUpdate:
    logger.info("category.rejected", entry_type=entry_type.value, name=name, reason=reason.value)
    return CategoryUpdate(registry=registry, reason=reason, name=name, entry_type=entry_type)


def _rewrite(
    entries: Iterable[FinancialEntryEntity],
    entry_type: EntryType,
    old_name: str,
    new_name: str,
) -> tuple[FinancialEntryEntity, ...]:
    return tuple(
        entry.evolve(category=new_name)
        for entry in entries
        if entry.type == entry_type and entry.category == old_name
    )


# ───────────────────────── operações ──────────────────────────
def add(registry: CategoryRegistry, entry_type: EntryType | str, name: str) -> CategoryUpdate:
    entry_type = EntryType(entry_type)
    trimmed = (name or "").strip()
    if not trimmed:
        return _reject(registry, entry_type, RejectionReason.EMPTY_NAME, name)
    if registry.find(entry_type, trimmed) is not None:
        return _reject(registry, entry_type, RejectionReason.DUPLICATE, trimmed)

    updated = registry.with_names(entry_type, (*registry.names(entry_type), trimmed))
    return CategoryUpdate(registry=updated, changed=True, name=trimmed, entry_type=entry_type)


def rename(
    registry: CategoryRegistry,
    entries: Sequence[FinancialEntryEntity],
    entry_type: EntryType | str,
    old_name: str,
    new_name: str,
) -> CategoryUpdate:
    """
    Renomeia `old_name` e reescreve os lançamentos do mesmo tipo que o usam.

    Renomear para o mesmo nome é um no-op (nada é reescrito). Uma mudança
    apenas de caixa ("consultas" → "Consultas") é permitida. Um nome legado,
    presente só nos lançamentos, também é reescrito; o registro fica intacto.
    """
    entry_type = EntryType(entry_type)
    if old_name == FALLBACK_CATEGORY:
        return _reject(registry, entry_type, RejectionReason.PROTECTED_FALLBACK, old_name)

    trimmed = (new_name or "").strip()
    if not trimmed:
        return _reject(registry, entry_type, RejectionReason.EMPTY_NAME, new_name)
    if trimmed == old_name:
        return _reject(registry, entry_type, RejectionReason.UNCHANGED, old_name)

    names = registry.names(entry_type)
    if any(c.lower() == trimmed.lower() and c != old_name for c in names):
        return _reject(registry, entry_type, RejectionReason.DUPLICATE, trimmed)

    rewritten = _rewrite(entries, entry_type, old_name, trimmed)
    if old_name in names:
        registry = registry.with_names(entry_type, (trimmed if c == old_name else c for c in names))
    elif not rewritten:
        return _reject(registry, entry_type, RejectionReason.NOT_FOUND, old_name)

    return CategoryUpdate(
        registry=registry,
        rewritten_entries=rewritten,
        changed=True,
        previous_name=old_name,
        name=trimmed,
        entry_type=entry_type,
    )


def remove(
    registry: CategoryRegistry,
    entries: Sequence[FinancialEntryEntity],
    entry_type: EntryType | str,
    name: str,
) -> CategoryUpdate:
    """Remove `name`; lançamentos que o usavam (mesmo legados) passam para o fallback."""
    entry_type = EntryType(entry_type)
    if name == FALLBACK_CATEGORY:
        return _reject(registry, entry_type, RejectionReason.PROTECTED_FALLBACK, name)

    names = registry.names(entry_type)
    rewritten = _rewrite(entries, entry_type, name, FALLBACK_CATEGORY)
    if name in names:
        remaining = [c for c in names if c != name]
        if not remaining:
            remaining.append(FALLBACK_CATEGORY)
        registry = registry.with_names(entry_type, remaining)
    elif not rewritten:
        return _reject(registry, entry_type, RejectionReason.NOT_FOUND, name)

    return CategoryUpdate(
        registry=registry,
        rewritten_entries=rewritten,
        changed=True,
        previous_name=name,
        name=FALLBACK_CATEGORY,
        entry_type=entry_type,
    )


def apply_rewrites(
    entries: Iterable[FinancialEntryEntity],
    rewritten: Iterable[FinancialEntryEntity],
) -> tuple[FinancialEntryEntity, ...]:
    """Mescla os lançamentos reescritos (por id) na lista completa, preservando a ordem."""
    by_id = {entry.id: entry for entry in rewritten}
    return tuple(by_id.get(entry.id, entry) for entry in entries)
