from abc import ABC, abstractmethod
from decimal import Decimal


class CashBalanceRepository(ABC):
    @abstractmethod
    def get(self) -> Decimal:
        """Saldo inicial de caixa editável pelo usuário."""
        ...

    @abstractmethod
    def save(self, balance: Decimal) -> Decimal:
        ...
