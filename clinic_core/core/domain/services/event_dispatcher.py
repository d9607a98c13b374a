from collections.abc import Callable, Iterable

import structlog

from clinic_core.core.domain.events.events import DomainEvent

logger = structlog.get_logger(__name__)

EventHandler = Callable[[DomainEvent], None]


class EventDispatcher:
    """
    Dispatcher síncrono de eventos de domínio.

    Assinantes de uma classe base (ex.: `DomainEvent`) recebem também os
    eventos das subclasses. Falhas de um handler são registradas e não
    interrompem os demais.
    """
    def __init__(self) -> None:
        self._subs: dict[type[DomainEvent], list[EventHandler]] = {}

    def subscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        self._subs.setdefault(event_type, []).append(handler)
        logger.debug(
            "event.subscribed",
            event_type=event_type.__name__,
            handler_name=getattr(handler, "__name__", handler.__class__.__name__),
        )

    def _handlers_for(self, event: DomainEvent) -> list[EventHandler]:
        handlers: list[EventHandler] = []
        for klass in type(event).__mro__:
            handlers.extend(self._subs.get(klass, []))
        return handlers

    def dispatch(self, event: DomainEvent) -> None:
        handlers = self._handlers_for(event)
        logger.info(
            "event.dispatch",
            event_name=type(event).__name__,
            listeners=len(handlers),
        )
        for h in handlers:
            try:
                h(event)
            except Exception as e:
                logger.error(
                    "event.handler_error",
                    event_name=type(event).__name__,
                    handler_name=getattr(h, "__name__", h.__class__.__name__),
                    error=str(e),
                    exc_info=True,
                )

    def dispatch_all(self, events: Iterable[DomainEvent]) -> None:
        for event in events:
            self.dispatch(event)
