from dataclasses import dataclass
from decimal import Decimal

from clinic_core.core.application.cqrs import CommandDTO


@dataclass(frozen=True, slots=True)
class SetCashBalanceCommand(CommandDTO):
    balance: Decimal
