from dataclasses import dataclass
from datetime import date

from clinic_core.core.application.cqrs import QueryDTO
from clinic_core.core.domain.entities.period_entity import PeriodRange


@dataclass(frozen=True, slots=True)
class GetIncomeStatementQuery(QueryDTO):
    period: PeriodRange | None = None


@dataclass(frozen=True, slots=True)
class GetPeriodReportQuery(QueryDTO):
    period: PeriodRange


@dataclass(frozen=True, slots=True)
class GetMonthlyTrendQuery(QueryDTO):
    reference: date | None = None
    months: int = 6


@dataclass(frozen=True, slots=True)
class GetPatientHistoryQuery(QueryDTO):
    patient_id: str
