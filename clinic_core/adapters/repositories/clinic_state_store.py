from __future__ import annotations

import threading
from collections.abc import Callable
from decimal import Decimal
from typing import TypeVar

import structlog

from clinic_core.core.domain.entities.clinic_state_entity import ClinicState
from config import settings

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class ClinicStateStore:
    """
    Store em memória que guarda o `ClinicState` corrente.

    Substitui o store remoto em testes e execuções locais. Toda alteração é
    feita por um reducer puro (`update`), trocando o snapshot inteiro.
    """

    def __init__(self, initial: ClinicState | None = None) -> None:
        self._state = initial or ClinicState(cash_balance=Decimal(settings.DEFAULT_CASH_BALANCE))
        self._lock = threading.Lock()

    @property
    def state(self) -> ClinicState:
        return self._state

    def update(self, reducer: Callable[[ClinicState], ClinicState]) -> ClinicState:
        def with_state(state: ClinicState) -> tuple[ClinicState, ClinicState]:
            updated = reducer(state)
            return updated, updated

        return self.update_returning(with_state)

    def update_returning(self, reducer: Callable[[ClinicState], tuple[ClinicState, T]]) -> T:
        """Aplica `reducer` sob o lock (leitura e escrita atômicas) e devolve o resultado extra."""
        with self._lock:
            self._state, result = reducer(self._state)
            logger.debug(
                "store.updated",
                patients=len(self._state.patients),
                appointments=len(self._state.appointments),
                financial_entries=len(self._state.financial_entries),
            )
            return result
