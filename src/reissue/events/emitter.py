"""In-process event emitter supporting sync and async handlers."""

import inspect
import typing as t
from collections import defaultdict

from ..infrastructure.logging import get_logger
from .base import BaseEmitter
from .subscription import Subscription

if t.TYPE_CHECKING:
    import loguru


class EventEmitter(BaseEmitter):
    """Dispatches events to subscribed handlers in subscription order.

    A failing handler is logged and skipped; it never interrupts the
    remaining handlers or the code that emitted the event.
    """

    def __init__(self, logger: "loguru.Logger" = get_logger(__name__)) -> None:
        self.logger = logger
        self._handlers: dict[str, list[t.Callable]] = defaultdict(list)

    def on(self, event_type: str, handler: t.Callable) -> Subscription:
        self._handlers[event_type].append(handler)
        return Subscription(self, event_type, handler)

    def off(self, event_type: str, handler: t.Callable) -> None:
        handlers = self._handlers.get(event_type)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def has_listeners(self, event_type: str) -> bool:
        return bool(self._handlers.get(event_type))

    async def emit(self, event_type: str, event_data: t.Any) -> None:
        # Copy so handlers may unsubscribe while being dispatched
        for handler in list(self._handlers.get(event_type, ())):
            try:
                result = handler(event_data)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                self.logger.error(f"Event handler for '{event_type}' failed: {e}")
