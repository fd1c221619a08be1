"""Cubic B-spline evaluation (De Boor) and Catmull-Rom curve helpers."""
from __future__ import annotations

from typing import Sequence

from crawl.vec import Vec2

DEGREE = 3


def uniform_knots(count: int, degree: int = DEGREE) -> list[float]:
    """Clamped uniform knot vector for ``count`` control points.

    Holds ``count + degree + 1`` knots: ``degree + 1`` zeros, evenly spaced
    interior knots, ``degree + 1`` ones. Clamping makes the curve start at
    the first control point and end at the last.
    """
    n = count - 1
    interior = n - degree
    knots = [0.0] * (degree + 1)
    knots.extend((i + 1) / (interior + 1) for i in range(interior))
    knots.extend([1.0] * (degree + 1))
    return knots


def _find_span(knots: Sequence[float], x: float, n: int, degree: int) -> int:
    for k in range(degree, n + 1):
        if knots[k] <= x < knots[k + 1]:
            return k
    # x == 1.0 (or anything past the end) uses the last valid span.
    return n


def evaluate(
    points: Sequence[Vec2],
    t: float,
    degree: int = DEGREE,
    knots: Sequence[float] | None = None,
) -> Vec2:
    """Evaluate the B-spline through ``points`` at ``t`` with De Boor's algorithm.

    Preconditions: ``0 <= t <= 1`` and ``len(points) >= degree + 1``.
    Neither is checked; values outside the domain give an unspecified point.
    """
    n = len(points) - 1
    if knots is None:
        knots = uniform_knots(len(points), degree)

    lo = knots[degree]
    hi = knots[n + 1]
    x = lo + t * (hi - lo)
    k = _find_span(knots, x, n, degree)

    d = [points[j + k - degree] for j in range(degree + 1)]
    for r in range(1, degree + 1):
        for j in range(degree, r - 1, -1):
            i = j + k - degree
            alpha = (x - knots[i]) / (knots[i + degree - r + 1] - knots[i])
            prev, cur = d[j - 1], d[j]
            d[j] = (
                (1.0 - alpha) * prev[0] + alpha * cur[0],
                (1.0 - alpha) * prev[1] + alpha * cur[1],
            )
    return d[degree]


def sample(points: Sequence[Vec2], count: int, degree: int = DEGREE) -> tuple[Vec2, ...]:
    """Evaluate at ``count + 1`` uniformly spaced parameters in [0, 1]."""
    if count <= 0:
        return (evaluate(points, 0.0, degree),)
    knots = uniform_knots(len(points), degree)
    return tuple(evaluate(points, i / count, degree, knots) for i in range(count + 1))


def catmull_rom(points: Sequence[Vec2], steps: int) -> list[Vec2]:
    """Subdivide a polyline into a Catmull-Rom curve through every point.

    End points are duplicated as their own neighbours, matching how a
    ``curveVertex`` chain is usually fed.
    """
    if steps <= 1 or len(points) < 3:
        return list(points)

    out: list[Vec2] = []
    last = len(points) - 1
    for i in range(last):
        p0 = points[max(i - 1, 0)]
        p1 = points[i]
        p2 = points[i + 1]
        p3 = points[min(i + 2, last)]
        for s in range(steps):
            out.append(_catmull_rom_point(p0, p1, p2, p3, s / steps))
    out.append(points[last])
    return out


def _catmull_rom_point(p0: Vec2, p1: Vec2, p2: Vec2, p3: Vec2, t: float) -> Vec2:
    t2 = t * t
    t3 = t2 * t
    x = 0.5 * (
        (2 * p1[0])
        + (p2[0] - p0[0]) * t
        + (2 * p0[0] - 5 * p1[0] + 4 * p2[0] - p3[0]) * t2
        + (3 * p1[0] - p0[0] - 3 * p2[0] + p3[0]) * t3
    )
    y = 0.5 * (
        (2 * p1[1])
        + (p2[1] - p0[1]) * t
        + (2 * p0[1] - 5 * p1[1] + 4 * p2[1] - p3[1]) * t2
        + (3 * p1[1] - p0[1] - 3 * p2[1] + p3[1]) * t3
    )
    return x, y
