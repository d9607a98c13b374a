from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


class PeriodType(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    CUSTOM = "custom"


@dataclass(frozen=True, slots=True)
class PeriodRange:
    """Janela de datas inclusiva. Construa via `period_resolver` para garantir start <= end."""

    type: PeriodType
    start_date: date
    end_date: date

    @property
    def width_days(self) -> int:
        return (self.end_date - self.start_date).days + 1

    def to_dict(self) -> dict[str, str]:
        return {
            "type": self.type.value,
            "startDate": self.start_date.isoformat(),
            "endDate": self.end_date.isoformat(),
        }
