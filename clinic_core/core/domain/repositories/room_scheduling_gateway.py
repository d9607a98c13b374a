from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime


class RoomSchedulingError(Exception):
    """Falha reportada pelo serviço externo de ensalamento."""


@dataclass(frozen=True, slots=True)
class RoomAllocationResult:
    appointment_id: str
    success: bool
    room_id: str | None = None
    message: str | None = None


class RoomSchedulingGateway(ABC):
    """
    Contrato mínimo do serviço de ensalamento.

    A resolução de conflitos acontece do lado do serviço; aqui só existe a
    chamada e a resposta.
    """

    @abstractmethod
    def allocate(
        self,
        appointment_id: str,
        professional_id: str,
        start: datetime,
        end: datetime,
    ) -> RoomAllocationResult:
        ...

    @abstractmethod
    def deallocate(self, appointment_id: str) -> bool:
        ...
