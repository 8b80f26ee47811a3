"""Minimal async publish/subscribe signal."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

Listener = Callable[[], Awaitable[None]]


@dataclass
class Signal:
    """Notifies subscribed listeners that something changed.

    Listeners are awaited in subscription order. A listener that raises
    stops the emit and the error propagates to the emitter.
    """

    _listeners: list[Listener] = field(default_factory=list)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener and return a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def emit(self) -> None:
        """Await every subscribed listener."""
        for listener in list(self._listeners):
            await listener()

    @property
    def listener_count(self) -> int:
        """Return the number of subscribed listeners."""
        return len(self._listeners)
