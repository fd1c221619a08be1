"""Tests for the centipede sketch session entry points."""
from __future__ import annotations

import math

import pytest

from crawl.config import SplineSettings, Tunables, Variant
from crawl.path import SplinePath
from crawl.sketch import SETUP_DELAY, CentipedeSketch, make_motion
from crawl.surface import RETRY_DELAY, SurfaceState
from crawl.trail import BodyTrail, LissajousWander, PointerSteering
from crawl.types import ConfigurationError

SMALL = Tunables(num_segments=60, leg_offset=10, leg_spacing=10)


def _sketch(canvas, container, clock, variant=Variant.POINTER, **kwargs):  # type: ignore[no-untyped-def]
    sketch = CentipedeSketch(canvas, container, variant, SMALL, now=clock, **kwargs)
    sketch.setup()
    clock.tick(SETUP_DELAY)
    return sketch


# ── Variants ───────────────────────────────────────────────────


class TestMakeMotion:
    def test_pointer(self) -> None:
        motion = make_motion(Variant.POINTER, SMALL)
        assert isinstance(motion, BodyTrail)
        assert isinstance(motion._source, PointerSteering)

    def test_wander(self) -> None:
        motion = make_motion(Variant.WANDER, SMALL)
        assert isinstance(motion, BodyTrail)
        assert isinstance(motion._source, LissajousWander)

    def test_spline(self) -> None:
        assert isinstance(make_motion(Variant.SPLINE, SMALL), SplinePath)

    def test_degenerate_spline_fails_fast(self, canvas, container, clock) -> None:
        with pytest.raises(ConfigurationError):
            CentipedeSketch(
                canvas, container, Variant.SPLINE,
                spline_settings=SplineSettings(factor1=1.0), now=clock,
            )


# ── Lifecycle ──────────────────────────────────────────────────


class TestLifecycle:
    def test_draw_before_setup_is_noop(self, canvas, container, clock) -> None:
        sketch = CentipedeSketch(canvas, container, tunables=SMALL, now=clock)
        sketch.draw()
        assert canvas.calls == []
        assert canvas.created == 0

    def test_setup_waits_for_delay(self, canvas, container, clock) -> None:
        sketch = CentipedeSketch(canvas, container, tunables=SMALL, now=clock)
        sketch.setup()
        sketch.draw()
        assert canvas.created == 0
        clock.tick(SETUP_DELAY)
        sketch.draw()
        assert canvas.created == 1
        assert sketch.reseeds == 1

    def test_setup_idempotent(self, canvas, container, clock) -> None:
        sketch = _sketch(canvas, container, clock)
        sketch.draw()
        sketch.setup()
        sketch.draw()
        assert canvas.created == 1
        assert sketch.reseeds == 1

    def test_zero_delay_initializes_immediately(self, canvas, container, clock) -> None:
        sketch = CentipedeSketch(canvas, container, tunables=SMALL, setup_delay=0, now=clock)
        sketch.setup()
        assert sketch.surface.ready

    def test_unsized_container_retries(self, canvas, container, clock) -> None:
        container.width = 0
        sketch = _sketch(canvas, container, clock)
        sketch.draw()
        assert sketch.surface.state is SurfaceState.PENDING
        container.width = 400
        clock.tick(RETRY_DELAY)
        sketch.draw()
        assert sketch.surface.ready
        assert canvas.named("background")

    def test_first_frame_draws(self, canvas, container, clock) -> None:
        sketch = _sketch(canvas, container, clock)
        sketch.draw()
        assert canvas.named("background") == [(0,)]
        assert len(canvas.named("curve")) == 1
        assert canvas.named("line")

    def test_trail_warm_after_frames(self, canvas, container, clock) -> None:
        sketch = _sketch(canvas, container, clock)
        for _ in range(100):
            sketch.draw()
            assert len(sketch.motion) == SMALL.num_segments

    def test_remove_stops_resize_delivery(self, canvas, container, clock) -> None:
        sketch = _sketch(canvas, container, clock)
        sketch.draw()
        sketch.remove()
        sketch.remove()
        container.resize(800, 600)
        assert sketch.reseeds == 1
        canvas.clear()
        sketch.draw()
        assert canvas.calls == []

    def test_remove_before_ready_cancels_retry(self, canvas, container, clock) -> None:
        container.width = 0
        sketch = _sketch(canvas, container, clock)
        sketch.draw()
        sketch.remove()
        container.width = 400
        clock.tick(1.0)
        sketch.draw()
        sketch.setup()
        sketch.draw()
        assert canvas.created == 0
        assert sketch.reseeds == 0


# ── Resize ─────────────────────────────────────────────────────


class TestResize:
    def test_resize_reseeds_exactly_once(self, canvas, container, clock) -> None:
        sketch = _sketch(canvas, container, clock)
        for _ in range(50):
            sketch.draw()
        container.resize(800, 600)
        assert sketch.reseeds == 2
        trail = sketch.motion
        assert isinstance(trail, BodyTrail)
        assert len(trail) == SMALL.num_segments
        assert set(trail.points) == {(0.0, 600.0)}

    def test_spline_resize_regenerates_samples(self, canvas, container, clock) -> None:
        sketch = _sketch(canvas, container, clock, variant=Variant.SPLINE)
        sketch.draw()
        path = sketch.motion
        assert isinstance(path, SplinePath)
        before = path.samples
        container.resize(800, 600)
        assert path.samples != before
        assert path.cursor == 0


# ── Input ──────────────────────────────────────────────────────


class TestInput:
    def test_pointer_sets_target(self, canvas, container, clock) -> None:
        sketch = _sketch(canvas, container, clock)
        sketch.draw()
        trail = sketch.motion
        assert isinstance(trail, BodyTrail)
        hx, hy = trail.head
        sketch.pointer_pressed(hx, hy - 100.0)
        assert math.isclose(trail.target[0], 0.0, abs_tol=1e-9)
        assert math.isclose(trail.target[1], -1.0)

    def test_pointer_before_ready_ignored(self, canvas, container, clock) -> None:
        sketch = CentipedeSketch(canvas, container, tunables=SMALL, now=clock)
        sketch.pointer_pressed(10.0, 10.0)  # Should not raise

    def test_pointer_ignored_in_spline_mode(self, canvas, container, clock) -> None:
        sketch = _sketch(canvas, container, clock, variant=Variant.SPLINE)
        sketch.draw()
        sketch.pointer_pressed(10.0, 10.0)  # Should not raise

    def test_key_adjusts_tunables(self, canvas, container, clock) -> None:
        sketch = _sketch(canvas, container, clock)
        sketch.draw()
        sketch.key_pressed("N")
        assert sketch.tunables.num_segments == 160
        assert len(sketch.motion) == 160
        sketch.draw()
        assert len(canvas.named("curve")) == 2

    def test_spline_keys_resize_body(self, canvas, container, clock) -> None:
        sketch = _sketch(canvas, container, clock, variant=Variant.SPLINE)
        sketch.draw()
        path = sketch.motion
        assert isinstance(path, SplinePath)
        assert len(path.window()) == 37
        for key in "NNNLLL":
            sketch.key_pressed(key)
        assert path.settings.segments == 55
        assert path.settings.leg_length == pytest.approx(18.0)
        assert sketch.spline_settings == path.settings
        assert sketch.tunables == SMALL
        sketch.draw()
        assert len(path.window()) == 52

    def test_spline_key_keeps_settings_when_degenerate(self, canvas, container, clock) -> None:
        settings = SplineSettings(factor1=1.25, segments=10)
        sketch = _sketch(
            canvas, container, clock, variant=Variant.SPLINE, spline_settings=settings,
        )
        sketch.draw()
        sketch.key_pressed("n")  # 5 segments leaves no time steps
        assert sketch.spline_settings == settings
        sketch.draw()
        assert len(canvas.named("curve")) == 2

    def test_trail_has_no_spline_settings(self, canvas, container, clock) -> None:
        assert _sketch(canvas, container, clock).spline_settings is None

    def test_unbound_key_ignored(self, canvas, container, clock) -> None:
        sketch = _sketch(canvas, container, clock)
        sketch.key_pressed("?")
        assert sketch.tunables == SMALL
