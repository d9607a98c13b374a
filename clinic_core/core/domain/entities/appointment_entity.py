from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

from clinic_core.core.domain.entities._base import EntityMixin


class AppointmentStatus(str, Enum):
    SCHEDULED = "scheduled"
    CONFIRMED = "confirmed"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    NO_SHOW = "no-show"

    @classmethod
    def parse(cls, raw: str | None) -> AppointmentStatus | None:
        """Status reconhecido ou None (registros legados/corrompidos)."""
        try:
            return cls(raw)
        except ValueError:
            return None


class AppointmentType(str, Enum):
    CONSULTATION = "consultation"
    EXAM = "exam"
    PROCEDURE = "procedure"
    RETURN = "return"


@dataclass(frozen=True, slots=True)
class AppointmentEntity(EntityMixin):
    id: str
    patient_id: str
    date: date
    time: str  # "HH:MM", horário local da clínica
    status: str
    price: Decimal = Decimal("0")
    paid: bool = False
    doctor_id: str | None = None
    doctor_name: str | None = None
    duration: int = 30
    type: str = AppointmentType.CONSULTATION.value

    @property
    def known_status(self) -> AppointmentStatus | None:
        return AppointmentStatus.parse(self.status)

    @property
    def sort_key(self) -> str:
        return f"{self.date.isoformat()} {self.time or ''}"
