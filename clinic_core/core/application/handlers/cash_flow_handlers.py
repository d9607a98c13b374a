from clinic_core.core.application.cqrs import QueryHandler
from clinic_core.core.application.dtos.cash_flow_dto import CashFlowStatementDTO
from clinic_core.core.application.queries.cash_flow_queries import GetCashFlowStatementQuery
from clinic_core.core.application.services.cash_flow_classifier import classify
from clinic_core.core.domain.repositories.cash_balance_repository import CashBalanceRepository
from clinic_core.core.domain.repositories.financial_entry_repository import FinancialEntryRepository
from clinic_core.core.domain.services import period_resolver


class GetCashFlowStatementHandler(QueryHandler[GetCashFlowStatementQuery, CashFlowStatementDTO]):
    """Saldo e lançamentos são relidos a cada chamada: renomeações/exclusões valem na hora."""

    def __init__(self, entry_repo: FinancialEntryRepository, balance_repo: CashBalanceRepository):
        self.entry_repo = entry_repo
        self.balance_repo = balance_repo

    def handle(self, q: GetCashFlowStatementQuery) -> CashFlowStatementDTO:
        if q.period is None:
            entries = self.entry_repo.list_all()
        else:
            entries = self.entry_repo.list_between(*period_resolver.resolve(q.period))
        return classify(entries, self.balance_repo.get())
