from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import date

from clinic_core.core.domain.entities.appointment_entity import AppointmentEntity


class AppointmentRepository(ABC):
    @abstractmethod
    def find_by_id(self, appointment_id: str) -> AppointmentEntity | None:
        """Retorna uma consulta pelo ID."""
        ...

    @abstractmethod
    def list_all(self) -> list[AppointmentEntity]:
        """Snapshot completo de consultas."""
        ...

    @abstractmethod
    def list_between(self, start: date, end: date) -> list[AppointmentEntity]:
        """Consultas com `start <= date <= end`."""
        ...

    @abstractmethod
    def replace_all(self, appointments: Iterable[AppointmentEntity]) -> None:
        ...
