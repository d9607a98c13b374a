from abc import ABC, abstractmethod

from clinic_core.core.domain.entities.company_config_entity import CompanyConfigEntity


class CompanyConfigRepository(ABC):
    @abstractmethod
    def get(self) -> CompanyConfigEntity | None:
        """Configuração da clínica; None quando ainda não cadastrada."""
        ...

    @abstractmethod
    def save(self, company: CompanyConfigEntity) -> CompanyConfigEntity:
        ...
