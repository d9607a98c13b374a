from abc import ABC, abstractmethod
from collections.abc import Callable

from clinic_core.core.domain.entities.category_registry_entity import CategoryRegistry
from clinic_core.core.domain.entities.clinic_state_entity import ClinicState
from clinic_core.core.domain.services.category_registry import CategoryUpdate

CategoryReducer = Callable[[ClinicState], tuple[ClinicState, CategoryUpdate]]


class CategoryRegistryRepository(ABC):
    @abstractmethod
    def get(self) -> CategoryRegistry:
        """Registro atual. Deve ser relido a cada operação (sem cache)."""
        ...

    @abstractmethod
    def apply(self, reducer: CategoryReducer) -> CategoryUpdate:
        """
        Executa `reducer` atomicamente sobre o estado corrente.

        Registro e lançamentos reescritos são gravados juntos; nenhum outro
        comando intercala entre a leitura e a escrita.
        """
        ...
