"""crawl - Procedural centipede animation on a resizable drawing surface."""
from __future__ import annotations

from crawl import spline, vec
from crawl.clock import TimeCursor
from crawl.config import SplineSettings, Tunables, Variant
from crawl.doodles import Doodle, Shape
from crawl.legs import GaitProfile, JitterProfile, LegPhase, leg_pose
from crawl.path import SplinePath
from crawl.signals import ResizeFeed
from crawl.sketch import CentipedeSketch, make_motion
from crawl.surface import SurfaceManager, SurfaceState
from crawl.trail import BodyTrail, LissajousWander, PointerSteering
from crawl.types import Canvas, ConfigurationError, Container, LegPose

__all__ = [
    "BodyTrail",
    "Canvas",
    "CentipedeSketch",
    "ConfigurationError",
    "Container",
    "Doodle",
    "GaitProfile",
    "JitterProfile",
    "LegPhase",
    "LegPose",
    "LissajousWander",
    "PointerSteering",
    "ResizeFeed",
    "Shape",
    "SplinePath",
    "SplineSettings",
    "SurfaceManager",
    "SurfaceState",
    "TimeCursor",
    "Tunables",
    "Variant",
    "leg_pose",
    "make_motion",
    "spline",
    "vec",
]
