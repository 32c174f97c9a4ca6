"""Deferred execution on the next turn of the host event loop."""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, Protocol

Callback = Callable[[], None]


class Scheduler(Protocol):
    """Runs callbacks after the current event returns, in scheduling order."""

    def call_soon(self, callback: Callback) -> None:  # pragma: no cover - protocol
        ...


class DeferredQueue:
    """FIFO task queue drained explicitly by the host.

    Suitable for hosts without an event loop of their own and for tests:
    callbacks queued while the queue is being drained run in the same pass,
    after everything queued before them.
    """

    def __init__(self) -> None:
        self._tasks: Deque[Callback] = deque()

    def call_soon(self, callback: Callback) -> None:
        self._tasks.append(callback)

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def run_pending(self) -> int:
        """Run queued callbacks until the queue is empty; return how many ran."""
        count = 0
        while self._tasks:
            callback = self._tasks.popleft()
            callback()
            count += 1
        return count

    def clear(self) -> None:
        self._tasks.clear()


__all__ = ["Callback", "Scheduler", "DeferredQueue"]
