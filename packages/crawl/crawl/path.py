"""Spline-path kinematics - a body window sliding along a sampled B-spline."""
from __future__ import annotations

import logging
import math

from crawl import spline
from crawl.clock import TimeCursor
from crawl.config import SplineSettings
from crawl.legs import GaitProfile, LegPhase, draw_leg, leg_pose
from crawl.types import Canvas, ConfigurationError
from crawl.vec import Vec2

logger = logging.getLogger(__name__)

BODY_COLOR = 255
BODY_WEIGHT = 3


def body_falloff(index: int, segments: int) -> float:
    """Parabolic-ish leg weight: 0 at both ends of the body, 3 at the middle."""
    half = segments / 2
    u = (index - half) / half
    return 3.0 * math.sqrt(max(0.0, 1.0 - u * u))


def scale_path(
    control_path: tuple[Vec2, ...], width: int, height: int, margin: float = 0.0
) -> tuple[Vec2, ...]:
    """Map unit-square control points onto the surface, inset by ``margin``."""
    span = 1.0 - 2.0 * margin
    return tuple(
        ((margin + x * span) * width, (margin + y * span) * height)
        for x, y in control_path
    )


class SplinePath:
    """Precomputed sample buffer plus a wrapped time cursor.

    Each frame the body occupies samples ``cursor + 1 .. cursor + segments - 2``.
    """

    def __init__(
        self,
        settings: SplineSettings | None = None,
        profile: GaitProfile | None = None,
    ) -> None:
        self._settings = settings or SplineSettings()
        self._profile = profile or GaitProfile()
        self._check(self._settings)
        self._samples: tuple[Vec2, ...] = ()
        self._size: tuple[int, int] | None = None
        self._cursor = TimeCursor(self._settings.total_time_steps)

    @staticmethod
    def _check(settings: SplineSettings) -> None:
        if settings.segments < 4:
            raise ConfigurationError(
                f"spline body needs at least 4 segments, got {settings.segments}"
            )
        if len(settings.control_path) < spline.DEGREE + 1:
            raise ConfigurationError(
                f"control path needs at least {spline.DEGREE + 1} points, "
                f"got {len(settings.control_path)}"
            )
        if settings.total_time_steps <= 0:
            raise ConfigurationError(
                f"factor1={settings.factor1} with segments={settings.segments} gives "
                f"{settings.total_time_steps} time steps; factor1 * segments must "
                f"exceed segments + 1"
            )

    @property
    def settings(self) -> SplineSettings:
        return self._settings

    @property
    def samples(self) -> tuple[Vec2, ...]:
        return self._samples

    @property
    def cursor(self) -> int:
        return self._cursor.value

    @property
    def total_time_steps(self) -> int:
        return self._settings.total_time_steps

    @property
    def ready(self) -> bool:
        return bool(self._samples)

    def reseed(self, width: int, height: int) -> None:
        s = self._settings
        self._size = (width, height)
        controls = scale_path(s.control_path, width, height, s.margin)
        self._samples = spline.sample(controls, s.total_points)
        self._cursor.reset()
        logger.debug(
            "Spline path sampled: %d points, %d time steps, %dx%d",
            len(self._samples), s.total_time_steps, width, height,
        )

    def set_settings(self, settings: SplineSettings) -> None:
        """Swap in new settings and re-sample at the last surface size.

        Raises ``ConfigurationError`` and keeps the current settings when
        ``settings`` is degenerate.
        """
        self._check(settings)
        self._settings = settings
        self._cursor = TimeCursor(settings.total_time_steps)
        if self._size is not None:
            self.reseed(*self._size)

    def advance(self) -> int:
        return self._cursor.advance()

    def window(self) -> list[tuple[int, Vec2, Vec2]]:
        """(segment, center, next) for every segment whose samples exist."""
        out: list[tuple[int, Vec2, Vec2]] = []
        cursor = self._cursor.value
        n = len(self._samples)
        for seg in range(1, self._settings.segments - 2):
            i = cursor + seg
            if i + 1 >= n:
                continue
            out.append((seg, self._samples[i], self._samples[i + 1]))
        return out

    def render(self, canvas: Canvas) -> None:
        if not self.ready:
            return
        segments = self._settings.segments
        cursor = self._cursor.value
        window = self.window()

        canvas.stroke(BODY_COLOR)
        canvas.stroke_weight(BODY_WEIGHT)
        canvas.no_fill()
        canvas.curve([center for _, center, _ in window])

        for seg, center, nxt in window:
            phase = LegPhase(
                time=cursor,
                weight=body_falloff(seg, segments),
                parity=-1 if seg % 2 else 1,
            )
            # The next sample is ahead of the segment, so it stands in for prev
            # with the orientation reversed.
            for pose in leg_pose(center, nxt, seg, phase, self._profile, self._settings.leg_length):
                draw_leg(canvas, center, pose)
