"""ResizeFeed - queued dimension-change notifications with per-frame flush."""
from __future__ import annotations

from typing import Callable

ResizeHandler = Callable[[int, int], None]


class Subscription:
    """Token returned by ResizeFeed.subscribe; pass it back to unsubscribe."""

    __slots__ = ("handler",)

    def __init__(self, handler: ResizeHandler) -> None:
        self.handler = handler


class ResizeFeed:
    """Publish container sizes from the host; flush before the next frame.

    Handlers run to completion inside ``flush``, so a frame never observes
    a half-applied resize.
    """

    def __init__(self) -> None:
        self._subscriptions: list[Subscription] = []
        self._queue: list[tuple[int, int]] = []

    def subscribe(self, handler: ResizeHandler) -> Subscription:
        token = Subscription(handler)
        self._subscriptions.append(token)
        return token

    def unsubscribe(self, token: Subscription) -> None:
        try:
            self._subscriptions.remove(token)
        except ValueError:
            pass

    def publish(self, width: int, height: int) -> None:
        self._queue.append((width, height))

    def flush(self) -> None:
        snapshot = self._queue
        self._queue = []
        for width, height in snapshot:
            # Copy: a handler may unsubscribe while we iterate.
            for token in list(self._subscriptions):
                if token in self._subscriptions:
                    token.handler(width, height)

    def clear(self) -> None:
        self._queue.clear()

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)
