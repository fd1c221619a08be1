"""Leg articulation - three-point leg chains derived from local body orientation."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol

from crawl import vec
from crawl.types import Canvas, LegPose
from crawl.vec import Vec2

SIDES = (-1, 1)

LEG_COLOR = 200
JOINT_COLOR = 255
JOINT_DIAMETER = 3.0


@dataclass(frozen=True)
class LegPhase:
    """Per-call oscillator inputs.

    ``time`` is the global animation time, ``weight`` scales the leg
    (1.0 in trail mode, the body-falloff lambda in spline mode) and
    ``parity`` flips the swing of alternate segments.
    """

    time: float
    weight: float = 1.0
    parity: int = 1


class LegProfile(Protocol):
    def factors(self, index: int, phase: LegPhase) -> tuple[Vec2, Vec2, Vec2]:
        """Componentwise (root, joint, tip) multipliers applied to the perpendicular."""
        ...


@dataclass(frozen=True)
class JitterProfile:
    """Slow sinusoids of global time giving a small, restless jitter.

    The tip rates differ per axis (``0.0001`` vs ``0.0005``); both are
    kept as fields rather than unified.
    """

    root_reach: float = 2.0
    root_rate: float = 0.25
    joint_rate: float = 0.5
    joint_phase: float = math.pi * 0.25
    tip_reach: float = 2.4
    tip_rate_x: float = 0.0001
    tip_rate_y: float = 0.0005

    def factors(self, index: int, phase: LegPhase) -> tuple[Vec2, Vec2, Vec2]:
        t = phase.time
        r = t * self.root_rate
        root = (self.root_reach * math.sin(r), self.root_reach * math.cos(r))
        j = t * self.joint_rate + self.joint_phase * index
        joint = (math.sin(j), math.cos(j))
        tip = (
            self.tip_reach * math.sin(t * self.tip_rate_x * index),
            self.tip_reach * math.cos(t * self.tip_rate_y * index),
        )
        return root, joint, tip


@dataclass(frozen=True)
class GaitProfile:
    """Walking gait for the spline-path body.

    ``angle1`` drives the root/tip reach, ``angle2`` (lagging by ``lag``)
    bends the joint. Both travel down the body by ``phase_step`` per
    segment and are negated on odd segments through ``phase.parity``.
    """

    swing: float = 0.6
    bend: float = 0.5
    rate: float = 0.15
    phase_step: float = 0.5
    lag: float = math.pi * 0.5
    root_reach: float = 0.35
    joint_reach: float = 4.0
    tip_reach: float = 0.25

    def angles(self, index: int, time: float) -> tuple[float, float]:
        base = time * self.rate + index * self.phase_step
        return (
            self.swing * math.sin(base),
            self.bend * math.sin(base + self.lag),
        )

    def factors(self, index: int, phase: LegPhase) -> tuple[Vec2, Vec2, Vec2]:
        angle1, angle2 = self.angles(index, phase.time)
        angle1 *= phase.parity
        angle2 *= phase.parity
        w = phase.weight
        root = w * self.root_reach * (1.0 + 0.5 * math.sin(angle1))
        joint = w / 3.0 * self.joint_reach * math.sin(angle2)
        tip = w * self.tip_reach * (1.0 + 0.5 * math.cos(angle1))
        return (root, root), (joint, joint), (tip, tip)


def leg_pose(
    center: Vec2,
    prev: Vec2,
    index: int,
    phase: LegPhase,
    profile: LegProfile,
    segment_length: float,
) -> tuple[LegPose, LegPose]:
    """Both legs (side -1, side +1) attached at ``center``.

    Orientation comes from ``center - prev``. Coincident points give a zero
    perpendicular, so the legs fold onto the body instead of failing.
    """
    forward = vec.normalize(vec.sub(center, prev))
    perp = vec.perpendicular(forward)
    root_f, joint_f, tip_f = profile.factors(index, phase)

    left, right = (
        _chain(center, perp, side, root_f, joint_f, tip_f, segment_length)
        for side in SIDES
    )
    return left, right


def _chain(
    center: Vec2,
    perp: Vec2,
    side: int,
    root_f: Vec2,
    joint_f: Vec2,
    tip_f: Vec2,
    segment_length: float,
) -> LegPose:
    reach = side * segment_length
    root = vec.add(center, vec.scale(vec.hadamard(perp, root_f), reach))
    joint = vec.add(root, vec.hadamard(perp, joint_f))
    tip = vec.add(joint, vec.scale(vec.hadamard(perp, tip_f), reach))
    return LegPose(root, joint, tip)


def draw_leg(canvas: Canvas, center: Vec2, pose: LegPose) -> None:
    canvas.stroke(LEG_COLOR)
    canvas.stroke_weight(1)
    canvas.line(center, pose.root)
    canvas.line(pose.root, pose.joint)
    canvas.line(pose.joint, pose.tip)

    canvas.fill(JOINT_COLOR)
    canvas.circle(pose.root, JOINT_DIAMETER)
    canvas.circle(pose.joint, JOINT_DIAMETER)
    canvas.circle(pose.tip, JOINT_DIAMETER)
