from clinic_core.adapters.repositories.clinic_state_store import ClinicStateStore
from clinic_core.core.domain.entities.category_registry_entity import CategoryRegistry
from clinic_core.core.domain.repositories.category_registry_repository import (
    CategoryReducer,
    CategoryRegistryRepository,
)
from clinic_core.core.domain.services.category_registry import CategoryUpdate


class CategoryRegistryRepoImpl(CategoryRegistryRepository):
    def __init__(self, store: ClinicStateStore) -> None:
        self._store = store

    def get(self) -> CategoryRegistry:
        return self._store.state.categories

    def apply(self, reducer: CategoryReducer) -> CategoryUpdate:
        return self._store.update_returning(reducer)
