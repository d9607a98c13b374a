from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal


def _utcnow() -> datetime:
    return datetime.now(UTC)


# ───────────────────────────────────────────────
# Event Base e Domain Events
# ───────────────────────────────────────────────
@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    event_id: uuid.UUID = field(default_factory=uuid.uuid4)
    occurred_at: datetime = field(default_factory=_utcnow)

# ╭──────────────────────────────────────────────╮
# │ 1. Categorias financeiras                    │
# ╰──────────────────────────────────────────────╯
@dataclass(frozen=True)
class CategoryAddedEvent(DomainEvent):
    entry_type: str
    name: str

@dataclass(frozen=True)
class CategoryRenamedEvent(DomainEvent):
    entry_type: str
    old_name: str
    new_name: str
    rewritten_entries: int

@dataclass(frozen=True)
class CategoryRemovedEvent(DomainEvent):
    entry_type: str
    name: str
    reassigned_to: str
    rewritten_entries: int

# ╭──────────────────────────────────────────────╮
# │ 2. Caixa                                     │
# ╰──────────────────────────────────────────────╯
@dataclass(frozen=True)
class CashBalanceChangedEvent(DomainEvent):
    previous_balance: Decimal
    new_balance: Decimal

# ╭──────────────────────────────────────────────╮
# │ 3. Ensalamento                               │
# ╰──────────────────────────────────────────────╯
@dataclass(frozen=True)
class RoomAllocatedEvent(DomainEvent):
    appointment_id: str
    professional_id: str
    room_id: str | None
    start: datetime
    end: datetime

@dataclass(frozen=True)
class RoomDeallocatedEvent(DomainEvent):
    appointment_id: str

# ╭──────────────────────────────────────────────╮
# │ 4. Sincronização com o store                 │
# ╰──────────────────────────────────────────────╯
@dataclass(frozen=True)
class StoreSnapshotSyncedEvent(DomainEvent):
    patients: int
    appointments: int
    financial_entries: int
    skipped_rows: int
