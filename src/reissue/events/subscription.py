"""Handle returned by emitter subscriptions."""

import typing as t

if t.TYPE_CHECKING:
    from .base import BaseEmitter


class Subscription:
    """Unsubscribe handle for a single (event_type, handler) registration."""

    def __init__(
        self, emitter: "BaseEmitter", event_type: str, handler: t.Callable
    ) -> None:
        self._emitter = emitter
        self._event_type = event_type
        self._handler = handler
        self._active = True

    @property
    def is_active(self) -> bool:
        return self._active

    def unsubscribe(self) -> None:
        """Remove the handler. Safe to call more than once."""
        if not self._active:
            return
        self._emitter.off(self._event_type, self._handler)
        self._active = False
