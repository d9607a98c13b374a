from dataclasses import dataclass

from clinic_core.core.application.cqrs import CommandDTO


@dataclass(frozen=True, slots=True)
class AddCategoryCommand(CommandDTO):
    entry_type: str
    name: str


@dataclass(frozen=True, slots=True)
class RenameCategoryCommand(CommandDTO):
    entry_type: str
    old_name: str
    new_name: str


@dataclass(frozen=True, slots=True)
class RemoveCategoryCommand(CommandDTO):
    entry_type: str
    name: str
