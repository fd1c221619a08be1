"""Tunables, spline-path settings and key bindings."""
from __future__ import annotations

import dataclasses
import enum
import logging
from dataclasses import dataclass
from typing import TypeVar

from crawl.types import ConfigurationError
from crawl.vec import Vec2

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Variant(enum.Enum):
    POINTER = "pointer"  # trail steered toward pointer presses
    WANDER = "wander"    # trail driven by a Lissajous wander, reflected at edges
    SPLINE = "spline"    # body sampled from a precomputed B-spline path


@dataclass(frozen=True)
class Tunables:
    """Body and gait parameters shared by the trail variants."""

    num_segments: int = 3000
    segment_length: float = 40.0
    speed: float = 0.5
    amplitude: float = 0.8
    frequency: float = 0.01
    smoothing: float = 0.1
    leg_spacing: int = 15
    leg_offset: int = 40

    def __post_init__(self) -> None:
        if self.num_segments < 2:
            raise ConfigurationError(
                f"num_segments must be at least 2, got {self.num_segments}"
            )
        if self.segment_length <= 0 or self.speed <= 0:
            raise ConfigurationError("segment_length and speed must be positive")
        if self.amplitude < 0 or self.frequency < 0:
            raise ConfigurationError("amplitude and frequency must not be negative")
        if not 0.0 < self.smoothing <= 1.0:
            raise ConfigurationError(
                f"smoothing must be in (0, 1], got {self.smoothing}"
            )
        if self.leg_spacing < 1 or self.leg_offset < 1:
            raise ConfigurationError("leg_spacing and leg_offset must be at least 1")


# field -> lowest value a key press may bring it to
FLOORS: dict[str, float] = {
    "num_segments": 50,
    "segment_length": 5.0,
    "speed": 0.1,
    "amplitude": 0.1,
    "frequency": 0.001,
    "leg_spacing": 1,
}

# key -> (field, delta); lowercase shrinks, uppercase grows
KEY_BINDINGS: dict[str, tuple[str, float]] = {
    "n": ("num_segments", -100),
    "N": ("num_segments", 100),
    "l": ("segment_length", -5.0),
    "L": ("segment_length", 5.0),
    "v": ("speed", -0.1),
    "V": ("speed", 0.1),
    "a": ("amplitude", -0.1),
    "A": ("amplitude", 0.1),
    "f": ("frequency", -0.005),
    "F": ("frequency", 0.005),
    "s": ("leg_spacing", -1),
    "S": ("leg_spacing", 1),
}


# Spline-path counterparts of n/N and l/L; the other keys have no effect there.
SPLINE_FLOORS: dict[str, float] = {
    "segments": 4,
    "leg_length": 2.0,
}

SPLINE_KEY_BINDINGS: dict[str, tuple[str, float]] = {
    "n": ("segments", -5),
    "N": ("segments", 5),
    "l": ("leg_length", -2.0),
    "L": ("leg_length", 2.0),
}


def adjust(
    settings: T,
    key: str,
    bindings: dict[str, tuple[str, float]] = KEY_BINDINGS,
    floors: dict[str, float] = FLOORS,
) -> T | None:
    """Apply the binding for ``key`` to a settings dataclass.

    Returns None for unbound keys. The default tables drive ``Tunables``;
    pass ``SPLINE_KEY_BINDINGS``/``SPLINE_FLOORS`` for ``SplineSettings``.
    """
    binding = bindings.get(key)
    if binding is None:
        return None
    name, delta = binding
    current = getattr(settings, name)
    value = max(current + delta, floors[name])
    if isinstance(current, int):
        value = int(value)
    else:
        value = round(value, 6)
    logger.debug("Tunable %s: %s -> %s", name, current, value)
    return dataclasses.replace(settings, **{name: value})


# Unit-square control points; scaled to the surface on every re-seed.
# Starts and ends at the centre so the wrapped walk closes on itself.
DEFAULT_CONTROL_PATH: tuple[Vec2, ...] = (
    (0.5, 0.5),
    (0.75, 0.15),
    (0.95, 0.45),
    (0.8, 0.85),
    (0.5, 0.5),
    (0.2, 0.15),
    (0.05, 0.55),
    (0.25, 0.85),
    (0.5, 0.5),
)


@dataclass(frozen=True)
class SplineSettings:
    """Sample density and body size for the spline-path variant.

    The sample buffer holds ``factor1 * factor2 * segments + 1`` points and
    the cursor wraps after ``floor(factor1 * segments) - segments - 1``
    frames.
    """

    factor1: float = 20.0
    factor2: int = 1
    segments: int = 40
    leg_length: float = 12.0
    control_path: tuple[Vec2, ...] = DEFAULT_CONTROL_PATH
    margin: float = 0.1

    @property
    def total_points(self) -> int:
        return int(self.factor1 * self.factor2 * self.segments)

    @property
    def total_time_steps(self) -> int:
        return int(self.factor1 * self.segments) - self.segments - 1
