"""Body trail model - fixed-length spine history steered one frame at a time."""
from __future__ import annotations

import logging
import math
from collections import deque
from dataclasses import dataclass
from typing import Protocol

from crawl import vec
from crawl.clock import TimeCursor
from crawl.config import Tunables
from crawl.legs import JitterProfile, LegPhase, LegProfile, draw_leg, leg_pose
from crawl.types import Canvas, ConfigurationError
from crawl.vec import Vec2

logger = logging.getLogger(__name__)

BODY_COLOR = 255
BODY_WEIGHT = 2
LEG_TIME_SCALE = 0.01


class DirectionSource(Protocol):
    def steer(self, trail: BodyTrail) -> Vec2:
        """Return the next unit heading for ``trail``."""
        ...

    def reset(self) -> None: ...


@dataclass
class PointerSteering:
    """Ease the heading toward the last pointer target."""

    smoothing: float = 0.1

    def steer(self, trail: BodyTrail) -> Vec2:
        return vec.normalize(vec.lerp(trail.direction, trail.target, self.smoothing))

    def reset(self) -> None:
        pass


@dataclass
class LissajousWander:
    """Ignore the pointer; wobble the heading with two sinusoids.

    Near an edge (within ``margin``) the heading component pointing into
    that edge is turned around, so the body curls back instead of
    bouncing.
    """

    rate_x: float = 0.013
    rate_y: float = 0.021
    wobble: float = 0.05
    margin: float = 60.0
    phase_x: float = 0.0
    phase_y: float = 0.0

    def __post_init__(self) -> None:
        if not 0.0 <= self.wobble < 0.5:
            raise ConfigurationError(f"wobble must be in [0, 0.5), got {self.wobble}")

    def steer(self, trail: BodyTrail) -> Vec2:
        self.phase_x += self.rate_x
        self.phase_y += self.rate_y
        dx, dy = vec.normalize(vec.add(
            trail.direction,
            (self.wobble * math.cos(self.phase_x), self.wobble * math.sin(self.phase_y)),
        ))

        x, y = trail.head
        width, height = trail.bounds
        if x < self.margin:
            dx = abs(dx)
        elif x > width - self.margin:
            dx = -abs(dx)
        if y < self.margin:
            dy = abs(dy)
        elif y > height - self.margin:
            dy = -abs(dy)
        return vec.normalize((dx, dy))

    def reset(self) -> None:
        self.phase_x = 0.0
        self.phase_y = 0.0


class BodyTrail:
    """Ordered spine positions, most recent first.

    Holds at most ``num_segments`` points: ``advance`` prepends a new head
    and evicts the oldest tail point once full.
    """

    def __init__(
        self,
        tunables: Tunables,
        source: DirectionSource | None = None,
        profile: LegProfile | None = None,
        anchor: Vec2 = (0.0, 1.0),
    ) -> None:
        self._tunables = tunables
        self._source: DirectionSource = source or PointerSteering(tunables.smoothing)
        self._profile: LegProfile = profile or JitterProfile()
        self._anchor = anchor
        self._points: deque[Vec2] = deque(maxlen=tunables.num_segments)
        self._direction: Vec2 = (1.0, 0.0)
        self._target: Vec2 = (1.0, 0.0)
        self._frame = TimeCursor()
        self._bounds: tuple[float, float] = (0.0, 0.0)

    @property
    def tunables(self) -> Tunables:
        return self._tunables

    @property
    def points(self) -> tuple[Vec2, ...]:
        return tuple(self._points)

    @property
    def head(self) -> Vec2:
        return self._points[0]

    @property
    def direction(self) -> Vec2:
        return self._direction

    @property
    def target(self) -> Vec2:
        return self._target

    @property
    def frame(self) -> int:
        return self._frame.value

    @property
    def bounds(self) -> tuple[float, float]:
        return self._bounds

    @property
    def ready(self) -> bool:
        return len(self._points) >= self._tunables.num_segments

    def __len__(self) -> int:
        return len(self._points)

    def seed(
        self,
        start: Vec2,
        bounds: tuple[float, float],
        direction: Vec2 = (1.0, 0.0),
    ) -> None:
        """Discard all history and stack every segment on ``start``."""
        n = self._tunables.num_segments
        self._points = deque([start] * n, maxlen=n)
        self._direction = vec.normalize(direction)
        self._target = self._direction
        self._frame.reset()
        self._source.reset()
        self._bounds = bounds

    def reseed(self, width: int, height: int) -> None:
        start = (self._anchor[0] * width, self._anchor[1] * height)
        self.seed(start, (float(width), float(height)))
        logger.debug("Trail re-seeded at %s for %dx%d", start, width, height)

    def point_toward(self, x: float, y: float) -> None:
        """Set the target heading; the current heading catches up gradually."""
        if not self._points:
            return
        self._target = vec.normalize(vec.sub((x, y), self.head))

    def advance(self) -> Vec2 | None:
        if not self._points:
            return None
        t = self._tunables
        self._direction = self._source.steer(self)
        d = self._direction

        angle = self._frame.advance() * t.frequency
        wave = t.amplitude * math.sin(angle)
        offset = (wave * d[1], -wave * d[0])

        head = self.head
        new_head = (
            head[0] + d[0] * t.speed + offset[0],
            head[1] + d[1] * t.speed + offset[1],
        )
        self._points.appendleft(new_head)
        return new_head

    def set_tunables(self, tunables: Tunables) -> None:
        if tunables.num_segments != self._tunables.num_segments:
            self.resize(tunables.num_segments)
        if isinstance(self._source, PointerSteering):
            self._source.smoothing = tunables.smoothing
        self._tunables = tunables

    def resize(self, num_segments: int) -> None:
        """Truncate the tail, or pad it with copies of the tail point."""
        pts = list(self._points)
        if pts and num_segments > len(pts):
            pts.extend([pts[-1]] * (num_segments - len(pts)))
        self._points = deque(pts[:num_segments], maxlen=num_segments)

    def render(self, canvas: Canvas) -> None:
        if not self.ready:
            return
        pts = list(self._points)
        canvas.stroke(BODY_COLOR)
        canvas.stroke_weight(BODY_WEIGHT)
        canvas.no_fill()
        canvas.curve(pts)

        t = self._tunables
        phase = LegPhase(time=self._frame.value * LEG_TIME_SCALE)
        for i in range(t.leg_offset, len(pts), t.leg_spacing):
            center = pts[i]
            for pose in leg_pose(center, pts[i - 1], i, phase, self._profile, t.segment_length):
                draw_leg(canvas, center, pose)
