"""Synchronous in-process notification channels."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

Payload = TypeVar("Payload")


class ChangeChannel(Generic[Payload]):
    """Ordered listener list; ``emit`` calls every listener inline on the caller's thread.

    Listener exceptions propagate to whoever triggered the change.
    """

    def __init__(self) -> None:
        self._listeners: list[Callable[[Payload], None]] = []

    def subscribe(self, listener: Callable[[Payload], None]) -> Callable[[], None]:
        """Register ``listener`` and return a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            try:
                self._listeners.remove(listener)
            except ValueError:
                pass

        return unsubscribe

    def emit(self, payload: Payload) -> None:
        for listener in tuple(self._listeners):
            listener(payload)


__all__ = ["ChangeChannel"]
