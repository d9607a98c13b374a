from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from clinic_core.core.domain.entities._base import EntityMixin

WEEKDAYS: tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)


@dataclass(frozen=True, slots=True)
class DayHours(EntityMixin):
    open: str = "08:00"
    close: str = "18:00"
    is_open: bool = True

    @staticmethod
    def _hour(value: str) -> int:
        return int(value.split(":", 1)[0])

    @property
    def working_hours(self) -> int:
        """Horas cheias entre abertura e fechamento (minutos descartados)."""
        return self._hour(self.close) - self._hour(self.open)


def _closed() -> DayHours:
    return DayHours(is_open=False)


@dataclass(frozen=True, slots=True)
class BusinessHours(EntityMixin):
    monday: DayHours = field(default_factory=DayHours)
    tuesday: DayHours = field(default_factory=DayHours)
    wednesday: DayHours = field(default_factory=DayHours)
    thursday: DayHours = field(default_factory=DayHours)
    friday: DayHours = field(default_factory=DayHours)
    saturday: DayHours = field(default_factory=_closed)
    sunday: DayHours = field(default_factory=_closed)

    def for_date(self, day: date) -> DayHours:
        # date.weekday(): 0 = segunda ... 6 = domingo
        return getattr(self, WEEKDAYS[day.weekday()])


@dataclass(frozen=True, slots=True)
class CompanyConfigEntity(EntityMixin):
    id: str
    name: str
    business_hours: BusinessHours = field(default_factory=BusinessHours)
    cnpj: str | None = None
