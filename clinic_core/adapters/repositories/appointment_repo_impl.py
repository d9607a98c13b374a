from collections.abc import Iterable
from datetime import date

from clinic_core.adapters.repositories.clinic_state_store import ClinicStateStore
from clinic_core.core.domain.entities.appointment_entity import AppointmentEntity
from clinic_core.core.domain.repositories.appointment_repository import AppointmentRepository
from clinic_core.core.domain.services import state_reducers


class AppointmentRepoImpl(AppointmentRepository):
    def __init__(self, store: ClinicStateStore) -> None:
        self._store = store

    def find_by_id(self, appointment_id: str) -> AppointmentEntity | None:
        return next((a for a in self._store.state.appointments if a.id == appointment_id), None)

    def list_all(self) -> list[AppointmentEntity]:
        return list(self._store.state.appointments)

    def list_between(self, start: date, end: date) -> list[AppointmentEntity]:
        return [a for a in self._store.state.appointments if start <= a.date <= end]

    def replace_all(self, appointments: Iterable[AppointmentEntity]) -> None:
        self._store.update(lambda s: state_reducers.load_snapshot(s, appointments=appointments))
