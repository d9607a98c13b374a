from abc import ABC, abstractmethod
from collections.abc import Iterable

from clinic_core.core.domain.entities.patient_entity import PatientEntity


class PatientRepository(ABC):
    @abstractmethod
    def find_by_id(self, patient_id: str) -> PatientEntity | None:
        """Retorna um paciente pelo ID."""
        ...

    @abstractmethod
    def list_all(self) -> list[PatientEntity]:
        """Snapshot completo de pacientes."""
        ...

    @abstractmethod
    def replace_all(self, patients: Iterable[PatientEntity]) -> None:
        """Substitui todos os pacientes por um snapshot novo do store."""
        ...
