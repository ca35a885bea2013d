"""Ordered registry of response interceptors."""

import typing as t
from dataclasses import dataclass

# Handlers may return a value or an awaitable resolving to one
Handler = t.Callable[[t.Any], t.Any]


@dataclass(frozen=True)
class InterceptorHandler:
    """A (success, failure) handler pair registered on the pipeline."""

    on_fulfilled: Handler | None = None
    on_rejected: Handler | None = None


class InterceptorManager:
    """Keeps interceptors in registration order.

    Every call to use() adds an independent entry, registering the same
    callables twice runs them twice.
    """

    def __init__(self) -> None:
        self._handlers: dict[int, InterceptorHandler] = {}
        self._next_id = 0

    def use(
        self,
        on_fulfilled: Handler | None = None,
        on_rejected: Handler | None = None,
    ) -> int:
        """Register a handler pair and return its id for eject()."""
        handler_id = self._next_id
        self._next_id += 1
        self._handlers[handler_id] = InterceptorHandler(on_fulfilled, on_rejected)
        return handler_id

    def eject(self, handler_id: int) -> None:
        """Remove a handler pair. Unknown ids are ignored."""
        self._handlers.pop(handler_id, None)

    def clear(self) -> None:
        self._handlers.clear()

    def __iter__(self) -> t.Iterator[InterceptorHandler]:
        return iter(list(self._handlers.values()))

    def __len__(self) -> int:
        return len(self._handlers)
