from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from clinic_core.core.domain.entities._base import EntityMixin


@dataclass(frozen=True, slots=True)
class PatientEntity(EntityMixin):
    id: str
    name: str
    email: str | None = None
    phone: str | None = None
    cpf: str | None = None
    birth_date: date | None = None
    gender: str | None = None
    created_at: datetime | None = None
