from decimal import Decimal

import structlog

from clinic_core.core.application.cqrs import CommandHandler
from clinic_core.core.domain.events.events import CashBalanceChangedEvent
from clinic_core.core.domain.repositories.cash_balance_repository import CashBalanceRepository

from ..commands.cash_balance_commands import SetCashBalanceCommand

logger = structlog.get_logger(__name__)


class SetCashBalanceHandler(CommandHandler[SetCashBalanceCommand]):
    def __init__(self, repo: CashBalanceRepository):
        self.repo = repo

    def handle(self, cmd: SetCashBalanceCommand) -> CashBalanceChangedEvent:
        previous = self.repo.get()
        new_balance = self.repo.save(Decimal(cmd.balance))
        logger.info("cash_balance.updated", previous=str(previous), new=str(new_balance))
        return CashBalanceChangedEvent(previous_balance=previous, new_balance=new_balance)
