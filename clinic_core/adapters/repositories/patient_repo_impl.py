from collections.abc import Iterable

from clinic_core.adapters.repositories.clinic_state_store import ClinicStateStore
from clinic_core.core.domain.entities.patient_entity import PatientEntity
from clinic_core.core.domain.repositories.patient_repository import PatientRepository
from clinic_core.core.domain.services import state_reducers


class PatientRepoImpl(PatientRepository):
    """Pacientes lidos do snapshot em memória."""

    def __init__(self, store: ClinicStateStore) -> None:
        self._store = store

    def find_by_id(self, patient_id: str) -> PatientEntity | None:
        return next((p for p in self._store.state.patients if p.id == patient_id), None)

    def list_all(self) -> list[PatientEntity]:
        return list(self._store.state.patients)

    def replace_all(self, patients: Iterable[PatientEntity]) -> None:
        self._store.update(lambda s: state_reducers.load_snapshot(s, patients=patients))
