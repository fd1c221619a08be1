"""Overlay text: current scene and tunables."""
from __future__ import annotations

import pygame

from crawl import CentipedeSketch, Doodle

from ui.constants import HUD_COLOR, HUD_DIM, HUD_LINE_H, HUD_PAD


def draw_hud(
    surface: pygame.Surface,
    font: pygame.font.Font,
    scene: CentipedeSketch | Doodle,
    fps: float,
) -> None:
    if isinstance(scene, CentipedeSketch) and scene.spline_settings is not None:
        s = scene.spline_settings
        lines = [
            f"{scene.variant.value}  [Tab] next scene",
            f"segments {s.segments} [n/N]  leg length {s.leg_length:.0f} [l/L]",
        ]
    elif isinstance(scene, CentipedeSketch):
        t = scene.tunables
        lines = [
            f"{scene.variant.value}  [Tab] next scene",
            f"segments {t.num_segments} [n/N]  length {t.segment_length:.0f} [l/L]",
            f"speed {t.speed:.1f} [v/V]  amplitude {t.amplitude:.1f} [a/A]",
            f"frequency {t.frequency:.3f} [f/F]  leg spacing {t.leg_spacing} [s/S]",
        ]
    else:
        lines = [f"doodle: {scene.shape.value}  [Tab] next scene  hold mouse to grow"]
    lines.append(f"{fps:.0f} fps")

    y = HUD_PAD
    for i, text in enumerate(lines):
        color = HUD_COLOR if i == 0 else HUD_DIM
        surface.blit(font.render(text, True, color), (HUD_PAD, y))
        y += HUD_LINE_H
