from dataclasses import dataclass

from clinic_core.core.application.cqrs import QueryDTO
from clinic_core.core.domain.entities.period_entity import PeriodRange


@dataclass(frozen=True, slots=True)
class GetCashFlowStatementQuery(QueryDTO):
    # None = todos os lançamentos
    period: PeriodRange | None = None
