"""pygame implementation of the Canvas drawing capability."""
from __future__ import annotations

from typing import Callable, Sequence

import pygame

from crawl.spline import catmull_rom
from crawl.types import Color
from crawl.vec import Vec2

CURVE_DETAIL = 4
MAX_CURVE_POINTS = 512

SurfaceFactory = Callable[[tuple[int, int]], pygame.Surface]


def to_rgba(color: Color) -> tuple[int, int, int, int]:
    if isinstance(color, int):
        return (color, color, color, 255)
    if len(color) == 3:
        r, g, b = color
        return (r, g, b, 255)
    r, g, b, a = color
    return (r, g, b, a)


def _display_factory(size: tuple[int, int]) -> pygame.Surface:
    return pygame.display.set_mode(size, pygame.RESIZABLE)


class PygameCanvas:
    """Stroke/fill state machine over a pygame surface.

    Opaque primitives go straight to the target. Translucent ones are
    collected on an SRCALPHA overlay that :meth:`present` composites, since
    ``pygame.draw`` writes alpha through instead of blending.
    """

    def __init__(
        self,
        surface_factory: SurfaceFactory = _display_factory,
        curve_detail: int = CURVE_DETAIL,
    ) -> None:
        self._factory = surface_factory
        self._curve_detail = curve_detail
        self._surface: pygame.Surface | None = None
        self._overlay: pygame.Surface | None = None
        self._dirty = False
        self._stroke: tuple[int, int, int, int] | None = (255, 255, 255, 255)
        self._fill: tuple[int, int, int, int] | None = (255, 255, 255, 255)
        self._weight = 1

    @property
    def surface(self) -> pygame.Surface | None:
        return self._surface

    @property
    def width(self) -> int:
        return self._surface.get_width() if self._surface is not None else 0

    @property
    def height(self) -> int:
        return self._surface.get_height() if self._surface is not None else 0

    def create(self, width: int, height: int) -> None:
        self._surface = self._factory((width, height))
        self._overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        self._dirty = False

    def resize(self, width: int, height: int) -> None:
        self.create(width, height)

    # -- State --

    def stroke(self, color: Color) -> None:
        self._stroke = to_rgba(color)

    def no_stroke(self) -> None:
        self._stroke = None

    def stroke_weight(self, weight: float) -> None:
        self._weight = max(1, round(weight))

    def fill(self, color: Color) -> None:
        self._fill = to_rgba(color)

    def no_fill(self) -> None:
        self._fill = None

    # -- Primitives --

    def background(self, color: Color) -> None:
        if self._surface is None:
            return
        self._surface.fill(to_rgba(color)[:3])
        if self._overlay is not None:
            self._overlay.fill((0, 0, 0, 0))
        self._dirty = False

    def line(self, a: Vec2, b: Vec2) -> None:
        if self._stroke is None:
            return
        target = self._target(self._stroke)
        if target is not None:
            pygame.draw.line(target, self._stroke, a, b, self._weight)

    def circle(self, center: Vec2, diameter: float) -> None:
        radius = diameter / 2
        if radius <= 0:
            return
        if self._fill is not None:
            target = self._target(self._fill)
            if target is not None:
                pygame.draw.circle(target, self._fill, center, radius)
        if self._stroke is not None:
            target = self._target(self._stroke)
            if target is not None:
                pygame.draw.circle(target, self._stroke, center, radius, self._weight)

    def rect(self, x: float, y: float, w: float, h: float) -> None:
        r = pygame.Rect(round(x), round(y), round(w), round(h))
        if self._fill is not None:
            target = self._target(self._fill)
            if target is not None:
                pygame.draw.rect(target, self._fill, r)
        if self._stroke is not None:
            target = self._target(self._stroke)
            if target is not None:
                pygame.draw.rect(target, self._stroke, r, self._weight)

    def curve(self, points: Sequence[Vec2]) -> None:
        if self._stroke is None or len(points) < 2:
            return
        if len(points) <= MAX_CURVE_POINTS:
            points = catmull_rom(points, self._curve_detail)
        target = self._target(self._stroke)
        if target is not None:
            pygame.draw.lines(target, self._stroke, False, points, self._weight)

    def present(self) -> None:
        """Composite pending translucent primitives onto the surface."""
        if self._surface is None or self._overlay is None or not self._dirty:
            return
        self._surface.blit(self._overlay, (0, 0))
        self._overlay.fill((0, 0, 0, 0))
        self._dirty = False

    def _target(self, color: tuple[int, int, int, int]) -> pygame.Surface | None:
        if color[3] >= 255:
            return self._surface
        if color[3] <= 0:
            return None
        self._dirty = True
        return self._overlay
