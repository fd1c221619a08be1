"""Shared types, collaborator protocols and errors."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, Sequence, Union

from crawl.vec import Vec2

if TYPE_CHECKING:
    from crawl.signals import ResizeFeed

# Gray level, RGB or RGBA.
Color = Union[int, tuple[int, int, int], tuple[int, int, int, int]]


class ConfigurationError(ValueError):
    """Raised when tunables or spline settings describe a degenerate figure."""


@dataclass(frozen=True, slots=True)
class LegPose:
    root: Vec2
    joint: Vec2
    tip: Vec2


class Canvas(Protocol):
    """Drawing capability the animation core emits primitives to."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def create(self, width: int, height: int) -> None: ...

    def resize(self, width: int, height: int) -> None: ...

    def background(self, color: Color) -> None: ...

    def stroke(self, color: Color) -> None: ...

    def no_stroke(self) -> None: ...

    def stroke_weight(self, weight: float) -> None: ...

    def fill(self, color: Color) -> None: ...

    def no_fill(self) -> None: ...

    def line(self, a: Vec2, b: Vec2) -> None: ...

    def circle(self, center: Vec2, diameter: float) -> None: ...

    def rect(self, x: float, y: float, w: float, h: float) -> None: ...

    def curve(self, points: Sequence[Vec2]) -> None: ...


class Container(Protocol):
    """Hosting element the surface is sized to."""

    @property
    def feed(self) -> ResizeFeed: ...

    def size(self) -> tuple[int, int]: ...
