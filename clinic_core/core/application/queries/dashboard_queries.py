from dataclasses import dataclass
from datetime import date, datetime

from clinic_core.core.application.cqrs import QueryDTO


@dataclass(frozen=True, slots=True)
class GetTodayPatientStatusQuery(QueryDTO):
    today: date | None = None


@dataclass(frozen=True, slots=True)
class GetDashboardMetricsQuery(QueryDTO):
    now: datetime | date | None = None
