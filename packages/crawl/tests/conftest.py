"""Shared fakes: a canvas that records primitives, a container, a manual clock."""
from __future__ import annotations

from typing import Any, Sequence

import pytest

from crawl.signals import ResizeFeed


class RecordingCanvas:
    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.width = 0
        self.height = 0
        self.created = 0
        self.resized = 0

    def create(self, width: int, height: int) -> None:
        self.width, self.height = width, height
        self.created += 1

    def resize(self, width: int, height: int) -> None:
        self.width, self.height = width, height
        self.resized += 1

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))

    def background(self, color: Any) -> None:
        self._record("background", color)

    def stroke(self, color: Any) -> None:
        self._record("stroke", color)

    def no_stroke(self) -> None:
        self._record("no_stroke")

    def stroke_weight(self, weight: float) -> None:
        self._record("stroke_weight", weight)

    def fill(self, color: Any) -> None:
        self._record("fill", color)

    def no_fill(self) -> None:
        self._record("no_fill")

    def line(self, a: Any, b: Any) -> None:
        self._record("line", a, b)

    def circle(self, center: Any, diameter: float) -> None:
        self._record("circle", center, diameter)

    def rect(self, x: float, y: float, w: float, h: float) -> None:
        self._record("rect", x, y, w, h)

    def curve(self, points: Sequence[Any]) -> None:
        self._record("curve", list(points))

    def named(self, name: str) -> list[tuple[Any, ...]]:
        return [args for n, args in self.calls if n == name]

    def clear(self) -> None:
        self.calls.clear()


class FakeContainer:
    def __init__(self, width: int = 400, height: int = 300) -> None:
        self.width = width
        self.height = height
        self.feed = ResizeFeed()

    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def resize(self, width: int, height: int) -> None:
        self.width, self.height = width, height
        self.feed.publish(width, height)
        self.feed.flush()


class ManualClock:
    def __init__(self) -> None:
        self.t = 0.0

    def __call__(self) -> float:
        return self.t

    def tick(self, seconds: float) -> None:
        self.t += seconds


@pytest.fixture
def canvas() -> RecordingCanvas:
    return RecordingCanvas()


@pytest.fixture
def container() -> FakeContainer:
    return FakeContainer()


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()
