from __future__ import annotations

import structlog

from clinic_core.adapters.observability.metrics import CATEGORY_COMMANDS
from clinic_core.core.application.cqrs import CommandHandler
from clinic_core.core.domain.events.events import (
    CategoryAddedEvent,
    CategoryRemovedEvent,
    CategoryRenamedEvent,
)
from clinic_core.core.domain.repositories.category_registry_repository import (
    CategoryReducer,
    CategoryRegistryRepository,
)
from clinic_core.core.domain.services import state_reducers
from clinic_core.core.domain.services.category_registry import CategoryUpdate
from clinic_core.core.domain.services.event_dispatcher import EventDispatcher

from ..commands.category_commands import (
    AddCategoryCommand,
    RemoveCategoryCommand,
    RenameCategoryCommand,
)

logger = structlog.get_logger(__name__)


class _CategoryHandlerBase:
    operation = "category"

    def __init__(self, registry_repo: CategoryRegistryRepository, dispatcher: EventDispatcher):
        self.registry_repo = registry_repo
        self.dispatcher = dispatcher

    def _apply(self, reducer: CategoryReducer) -> CategoryUpdate:
        """Registro + lançamentos reescritos num único passo; rejeições não tocam o store."""
        update = self.registry_repo.apply(reducer)
        outcome = "applied" if update.changed else "rejected"
        CATEGORY_COMMANDS.labels(operation=self.operation, outcome=outcome).inc()
        if update.changed:
            logger.info(
                "category.applied",
                operation=self.operation,
                entry_type=update.entry_type.value if update.entry_type else None,
                name=update.name,
                previous_name=update.previous_name,
                rewritten=len(update.rewritten_entries),
            )
        return update


class AddCategoryHandler(_CategoryHandlerBase, CommandHandler[AddCategoryCommand]):
    operation = "add"

    def handle(self, cmd: AddCategoryCommand) -> CategoryUpdate:
        update = self._apply(lambda s: state_reducers.add_category(s, cmd.entry_type, cmd.name))
        if update.changed:
            self.dispatcher.dispatch(CategoryAddedEvent(entry_type=update.entry_type.value, name=update.name))
        return update


class RenameCategoryHandler(_CategoryHandlerBase, CommandHandler[RenameCategoryCommand]):
    operation = "rename"

    def handle(self, cmd: RenameCategoryCommand) -> CategoryUpdate:
        update = self._apply(
            lambda s: state_reducers.rename_category(s, cmd.entry_type, cmd.old_name, cmd.new_name)
        )
        if update.changed:
            self.dispatcher.dispatch(
                CategoryRenamedEvent(
                    entry_type=update.entry_type.value,
                    old_name=update.previous_name,
                    new_name=update.name,
                    rewritten_entries=len(update.rewritten_entries),
                )
            )
        return update


class RemoveCategoryHandler(_CategoryHandlerBase, CommandHandler[RemoveCategoryCommand]):
    operation = "remove"

    def handle(self, cmd: RemoveCategoryCommand) -> CategoryUpdate:
        update = self._apply(lambda s: state_reducers.remove_category(s, cmd.entry_type, cmd.name))
        if update.changed:
            self.dispatcher.dispatch(
                CategoryRemovedEvent(
                    entry_type=update.entry_type.value,
                    name=update.previous_name,
                    reassigned_to=update.name,
                    rewritten_entries=len(update.rewritten_entries),
                )
            )
        return update
