"""CentipedeSketch - one animation session wired to a canvas and container."""
from __future__ import annotations

import logging
import time
from typing import Callable, Protocol

from crawl.config import (
    SPLINE_FLOORS,
    SPLINE_KEY_BINDINGS,
    SplineSettings,
    Tunables,
    Variant,
    adjust,
)
from crawl.legs import GaitProfile, JitterProfile
from crawl.path import SplinePath
from crawl.surface import SurfaceManager, SurfaceState
from crawl.trail import BodyTrail, LissajousWander, PointerSteering
from crawl.types import Canvas, ConfigurationError, Container

logger = logging.getLogger(__name__)

BACKGROUND = 0
SETUP_DELAY = 0.1


class Motion(Protocol):
    @property
    def ready(self) -> bool: ...

    def reseed(self, width: int, height: int) -> None: ...

    def advance(self) -> object: ...

    def render(self, canvas: Canvas) -> None: ...


def make_motion(
    variant: Variant,
    tunables: Tunables,
    spline_settings: SplineSettings | None = None,
) -> Motion:
    """Pick direction source, oscillator set and leg profile for ``variant``."""
    if variant is Variant.POINTER:
        return BodyTrail(
            tunables,
            source=PointerSteering(tunables.smoothing),
            profile=JitterProfile(),
            anchor=(0.0, 1.0),
        )
    if variant is Variant.WANDER:
        return BodyTrail(
            tunables,
            source=LissajousWander(),
            profile=JitterProfile(),
            anchor=(0.5, 0.5),
        )
    return SplinePath(spline_settings, GaitProfile())


class CentipedeSketch:
    """Entry points a hosting loop calls: setup once, draw every frame.

    ``draw`` is safe before the surface is sized; it polls the pending
    retry and otherwise does nothing until state has been seeded.
    """

    def __init__(
        self,
        canvas: Canvas,
        container: Container,
        variant: Variant = Variant.POINTER,
        tunables: Tunables | None = None,
        spline_settings: SplineSettings | None = None,
        setup_delay: float = SETUP_DELAY,
        now: Callable[[], float] = time.monotonic,
    ) -> None:
        self._canvas = canvas
        self._variant = variant
        self._tunables = tunables or Tunables()
        self._motion = make_motion(variant, self._tunables, spline_settings)
        self._surface = SurfaceManager(canvas, container, self._reseed, now=now)
        self._setup_delay = setup_delay
        self._now = now
        self._setup_at: float | None = None
        self._reseeds = 0

    @property
    def variant(self) -> Variant:
        return self._variant

    @property
    def tunables(self) -> Tunables:
        return self._tunables

    @property
    def spline_settings(self) -> SplineSettings | None:
        """Settings in effect for the spline variant, None for the trail variants."""
        if isinstance(self._motion, SplinePath):
            return self._motion.settings
        return None

    @property
    def motion(self) -> Motion:
        return self._motion

    @property
    def surface(self) -> SurfaceManager:
        return self._surface

    @property
    def reseeds(self) -> int:
        return self._reseeds

    def setup(self) -> None:
        if self._setup_at is not None or self._surface.state is SurfaceState.CLOSED:
            return
        logger.debug("Setting up %s sketch, sizing in %.2fs", self._variant.name, self._setup_delay)
        self._setup_at = self._now() + self._setup_delay
        if self._setup_delay <= 0:
            self._surface.initialize()

    def draw(self) -> None:
        if not self._pump():
            return
        if not self._motion.ready:
            return
        self._canvas.background(BACKGROUND)
        self._motion.advance()
        self._motion.render(self._canvas)

    def pointer_pressed(self, x: float, y: float) -> None:
        if isinstance(self._motion, BodyTrail) and self._motion.ready:
            self._motion.point_toward(x, y)

    def key_pressed(self, key: str) -> None:
        if isinstance(self._motion, SplinePath):
            self._adjust_spline(self._motion, key)
            return
        tunables = adjust(self._tunables, key)
        if tunables is None:
            return
        self._tunables = tunables
        if isinstance(self._motion, BodyTrail):
            self._motion.set_tunables(tunables)

    def remove(self) -> None:
        self._surface.teardown()
        logger.debug("%s sketch removed after %d re-seeds", self._variant.name, self._reseeds)

    def _adjust_spline(self, path: SplinePath, key: str) -> None:
        settings = adjust(path.settings, key, SPLINE_KEY_BINDINGS, SPLINE_FLOORS)
        if settings is None:
            return
        try:
            path.set_settings(settings)
        except ConfigurationError as exc:
            logger.warning("Ignoring key %r: %s", key, exc)

    def _pump(self) -> bool:
        """Advance the setup/sizing state machine; True once the surface is ready."""
        state = self._surface.state
        if state is SurfaceState.READY:
            return True
        if self._setup_at is None or state in (SurfaceState.CLOSED, SurfaceState.FAILED):
            return False
        if state is SurfaceState.UNINITIALIZED:
            if self._now() < self._setup_at:
                return False
            return self._surface.initialize() is SurfaceState.READY
        return self._surface.poll() is SurfaceState.READY

    def _reseed(self, width: int, height: int) -> None:
        self._motion.reseed(width, height)
        self._reseeds += 1
