from clinic_core.adapters.repositories.clinic_state_store import ClinicStateStore
from clinic_core.core.domain.entities.company_config_entity import CompanyConfigEntity
from clinic_core.core.domain.repositories.company_config_repository import CompanyConfigRepository
from clinic_core.core.domain.services import state_reducers


class CompanyConfigRepoImpl(CompanyConfigRepository):
    def __init__(self, store: ClinicStateStore) -> None:
        self._store = store

    def get(self) -> CompanyConfigEntity | None:
        return self._store.state.company

    def save(self, company: CompanyConfigEntity) -> CompanyConfigEntity:
        self._store.update(lambda s: state_reducers.load_snapshot(s, company=company))
        return company
