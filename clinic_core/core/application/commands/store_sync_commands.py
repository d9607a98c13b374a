from dataclasses import dataclass
from typing import Any

from clinic_core.core.application.cqrs import CommandDTO

Row = dict[str, Any]


@dataclass(frozen=True, slots=True)
class SyncStoreSnapshotCommand(CommandDTO):
    """Linhas cruas do store; coleções None não são tocadas."""

    patients: tuple[Row, ...] | None = None
    appointments: tuple[Row, ...] | None = None
    financial_entries: tuple[Row, ...] | None = None
    company: Row | None = None
