from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar

import structlog

from clinic_core.core.domain.events.events import DomainEvent
from clinic_core.core.domain.services.event_dispatcher import EventDispatcher

# ───────────────────────────────────────────────
# CQRS síncrono com log de performance
# ───────────────────────────────────────────────

C = TypeVar('C', contravariant=True)  # Command type
Q = TypeVar('Q', contravariant=True)  # Query type
R = TypeVar('R', covariant=True)      # Query result type

logger = structlog.get_logger(__name__)

# ───────────────────────────────────────────────
# DTOs
# ───────────────────────────────────────────────
@dataclass(frozen=True)
class CommandDTO:
    """Base para todos comandos de escrita."""

@dataclass(frozen=True)
class QueryDTO:
    """Base para consultas de leitura (sempre sobre o snapshot mais recente)."""

# ───────────────────────────────────────────────
# Handlers Protocols
# ───────────────────────────────────────────────
class CommandHandler(Protocol, Generic[C]):
    def handle(self, command: C) -> Any:
        """Processa um comando e aplica mudanças de estado."""
        ...

class QueryHandler(Protocol, Generic[Q, R]):
    def handle(self, query: Q) -> R:
        """Processa uma consulta e retorna um resultado."""
        ...

# ───────────────────────────────────────────────
# Buses
# ───────────────────────────────────────────────
class _Bus:
    kind = "bus"

    def __init__(self) -> None:
        self._handlers: dict[type, Any] = {}

    def register(self, message_type: type, handler: Any) -> None:
        self._handlers[message_type] = handler
        logger.debug(f"{self.kind}.handler_registered", message=message_type.__name__)

    def _run(self, message: Any) -> Any:
        name = type(message).__name__
        handler = self._handlers.get(type(message))
        if not handler:
            raise ValueError(f"Nenhum handler para {self.kind}: {name}")
        start = time.perf_counter()
        result = handler.handle(message)
        logger.info(
            f"{self.kind}.executed",
            message=name,
            duration=f"{time.perf_counter() - start:.4f}s",
        )
        return result


class CommandBus(_Bus):
    """Dispatcher de comandos; eventos devolvidos pelo handler seguem para o EventDispatcher."""
    kind = "command"

    def __init__(self, dispatcher: EventDispatcher | None = None) -> None:
        super().__init__()
        self.dispatcher = dispatcher

    def dispatch(self, command: CommandDTO) -> Any:
        result = self._run(command)
        if self.dispatcher is not None:
            if isinstance(result, DomainEvent):
                self.dispatcher.dispatch(result)
            elif isinstance(result, list | tuple) and all(isinstance(e, DomainEvent) for e in result):
                self.dispatcher.dispatch_all(result)
        return result


class QueryBus(_Bus):
    kind = "query"

    def dispatch(self, query: QueryDTO) -> Any:
        return self._run(query)

# ───────────────────────────────────────────────
# Service de Alto Nível
# ───────────────────────────────────────────────
class BaseService:
    """Orquestra execução de comandos e queries via buses."""
    def __init__(self, command_bus: CommandBus, query_bus: QueryBus) -> None:
        self.commands = command_bus
        self.queries = query_bus

    def execute(self, command: CommandDTO) -> Any:
        return self.commands.dispatch(command)

    def query(self, query: QueryDTO) -> Any:
        return self.queries.dispatch(query)
