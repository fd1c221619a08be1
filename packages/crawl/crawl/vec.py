"""2D vector math helpers operating on tuple[float, float]."""
from __future__ import annotations

import math

Vec2 = tuple[float, float]


def add(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] + b[0], a[1] + b[1])


def sub(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] - b[0], a[1] - b[1])


def scale(v: Vec2, s: float) -> Vec2:
    return (v[0] * s, v[1] * s)


def hadamard(a: Vec2, b: Vec2) -> Vec2:
    """Componentwise product."""
    return (a[0] * b[0], a[1] * b[1])


def dot(a: Vec2, b: Vec2) -> float:
    return a[0] * b[0] + a[1] * b[1]


def magnitude(v: Vec2) -> float:
    return math.hypot(v[0], v[1])


def normalize(v: Vec2) -> Vec2:
    mag = magnitude(v)
    if mag == 0.0:
        return v
    return (v[0] / mag, v[1] / mag)


def lerp(a: Vec2, b: Vec2, t: float) -> Vec2:
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)


def perpendicular(v: Vec2) -> Vec2:
    """Rotate 90 degrees: (x, y) -> (-y, x)."""
    return (-v[1], v[0])


def distance(a: Vec2, b: Vec2) -> float:
    return magnitude(sub(a, b))
