"""Pointer-following doodles: translucent trails that chase the pointer."""
from __future__ import annotations

import enum
import math
import random
import time
from typing import Callable

from crawl.surface import SurfaceManager, SurfaceState
from crawl.types import Canvas, Container

PRESS_MULTIPLIER = 5
RAY_SPACING = 3


class Shape(enum.Enum):
    RING = "ring"
    BOX = "box"
    RAYS = "rays"
    FILL = "fill"


class Doodle:
    """A tinted surface that slowly fades while a shape tracks the pointer.

    Holding the pointer down scales the shape (or ray spacing) by
    ``PRESS_MULTIPLIER``. Same entry points as ``CentipedeSketch``.
    """

    def __init__(
        self,
        canvas: Canvas,
        container: Container,
        shape: Shape = Shape.RING,
        rng: random.Random | None = None,
        now: Callable[[], float] = time.monotonic,
    ) -> None:
        self._canvas = canvas
        self._shape = shape
        self._rng = rng or random.Random()
        self._surface = SurfaceManager(canvas, container, self._reseed, now=now)
        self._tint = (0, 0, 0)
        self._pointer = (0.0, 0.0)
        self._multiplier = 1

    @property
    def shape(self) -> Shape:
        return self._shape

    @property
    def tint(self) -> tuple[int, int, int]:
        return self._tint

    @property
    def multiplier(self) -> int:
        return self._multiplier

    @property
    def surface(self) -> SurfaceManager:
        return self._surface

    def setup(self) -> None:
        if self._surface.state is SurfaceState.UNINITIALIZED:
            self._surface.initialize()

    def update_pointer(self, x: float, y: float, pressed: bool) -> None:
        self._pointer = (x, y)
        self._multiplier = PRESS_MULTIPLIER if pressed else 1

    def pointer_pressed(self, x: float, y: float) -> None:
        self.update_pointer(x, y, True)

    def key_pressed(self, key: str) -> None:
        """Doodles have no tunables; keys are accepted and ignored."""

    def remove(self) -> None:
        self._surface.teardown()

    def draw(self) -> None:
        if self._surface.poll() is not SurfaceState.READY:
            return
        width, height = self._surface.size
        r, g, b = self._tint
        c = self._canvas
        rng = self._rng
        m = self._multiplier

        if self._shape is Shape.FILL:
            c.fill(self._tint)
            c.no_stroke()
            c.rect(0, 0, width, height)
            return

        fade = 1 if self._shape is Shape.RAYS else 5
        c.fill((r, g, b, int(rng.uniform(0, fade))))
        c.no_stroke()
        c.rect(0, 0, width, height)

        px, py = self._pointer
        if self._shape is Shape.RING:
            c.stroke((255, 255, 255, min(255, int(rng.uniform(0, 50) * m))))
            c.circle(self._pointer, rng.uniform(0, 100) * m)
        elif self._shape is Shape.BOX:
            c.stroke((255, 255, 255, int(rng.uniform(0, 50))))
            side = rng.uniform(0, 100) * m
            c.rect(px - side / 2, py - side / 2, side, side)
        else:
            c.stroke((b, r, r, int(rng.uniform(0, 5))))
            c.stroke_weight(rng.uniform(1, m) if m > 1 else 1)
            gap = RAY_SPACING * m
            for i in range(math.ceil(height / gap)):
                c.line((0, i * gap), self._pointer)
                c.line((width, i * gap), self._pointer)

    def _reseed(self, width: int, height: int) -> None:
        self._tint = (
            self._rng.randrange(256),
            self._rng.randrange(256),
            self._rng.randrange(256),
        )
