"""Surface lifecycle - sizing, deferred retry, resize re-seeding, teardown."""
from __future__ import annotations

import enum
import logging
import time
from typing import Callable

from crawl.signals import Subscription
from crawl.types import Canvas, Container

logger = logging.getLogger(__name__)

RETRY_DELAY = 0.05
MAX_RETRIES = 100

ReseedCallback = Callable[[int, int], None]


class SurfaceState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    PENDING = "pending"
    READY = "ready"
    FAILED = "failed"
    CLOSED = "closed"


class SurfaceManager:
    """Owns the canvas size and the container's dimension-change subscription.

    ``UNINITIALIZED -> PENDING(retries) -> READY``. A container that has not
    laid out yet (zero width or height) is retried every ``retry_delay``
    seconds when the host calls :meth:`poll`; after ``max_retries`` the
    manager gives up and moves to ``FAILED``. ``teardown`` moves to
    ``CLOSED`` from any state and nothing fires afterwards.
    """

    def __init__(
        self,
        canvas: Canvas,
        container: Container,
        on_reseed: ReseedCallback,
        retry_delay: float = RETRY_DELAY,
        max_retries: int = MAX_RETRIES,
        now: Callable[[], float] = time.monotonic,
    ) -> None:
        self._canvas = canvas
        self._container = container
        self._on_reseed = on_reseed
        self._retry_delay = retry_delay
        self._max_retries = max_retries
        self._now = now
        self._state = SurfaceState.UNINITIALIZED
        self._retries = 0
        self._retry_at: float | None = None
        self._subscription: Subscription | None = None
        self._size = (0, 0)

    @property
    def state(self) -> SurfaceState:
        return self._state

    @property
    def retries(self) -> int:
        return self._retries

    @property
    def size(self) -> tuple[int, int]:
        return self._size

    @property
    def ready(self) -> bool:
        return self._state is SurfaceState.READY

    def initialize(self) -> SurfaceState:
        if self._state not in (SurfaceState.UNINITIALIZED, SurfaceState.PENDING):
            return self._state

        width, height = self._container.size()
        if width <= 0 or height <= 0:
            if self._state is SurfaceState.PENDING:
                self._retries += 1
            if self._retries >= self._max_retries:
                self._state = SurfaceState.FAILED
                self._retry_at = None
                logger.error(
                    "Container never reported a usable size after %d retries",
                    self._retries,
                )
            else:
                self._state = SurfaceState.PENDING
                self._retry_at = self._now() + self._retry_delay
            return self._state

        self._canvas.create(width, height)
        self._size = (width, height)
        self._state = SurfaceState.READY
        self._retry_at = None
        self._subscription = self._container.feed.subscribe(self._on_resize)
        logger.debug("Surface ready at %dx%d after %d retries", width, height, self._retries)
        self._on_reseed(width, height)
        return self._state

    def poll(self) -> SurfaceState:
        """Run a due retry. Cheap to call every frame."""
        if (
            self._state is SurfaceState.PENDING
            and self._retry_at is not None
            and self._now() >= self._retry_at
        ):
            return self.initialize()
        return self._state

    def teardown(self) -> None:
        if self._subscription is not None:
            self._container.feed.unsubscribe(self._subscription)
            self._subscription = None
        self._retry_at = None
        self._state = SurfaceState.CLOSED

    def _on_resize(self, width: int, height: int) -> None:
        if self._state is not SurfaceState.READY:
            return
        if width <= 0 or height <= 0:
            return
        self._canvas.resize(width, height)
        self._size = (width, height)
        logger.debug("Surface resized to %dx%d, re-seeding", width, height)
        self._on_reseed(width, height)
