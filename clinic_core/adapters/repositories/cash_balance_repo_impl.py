from decimal import Decimal

from clinic_core.adapters.repositories.clinic_state_store import ClinicStateStore
from clinic_core.core.domain.repositories.cash_balance_repository import CashBalanceRepository
from clinic_core.core.domain.services import state_reducers


class CashBalanceRepoImpl(CashBalanceRepository):
    def __init__(self, store: ClinicStateStore) -> None:
        self._store = store

    def get(self) -> Decimal:
        return self._store.state.cash_balance

    def save(self, balance: Decimal) -> Decimal:
        state = self._store.update(lambda s: state_reducers.set_cash_balance(s, balance))
        return state.cash_balance
