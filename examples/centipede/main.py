"""
crawl Centipede
Resizable pygame window hosting the centipede sketches and the doodles.

Controls:
  Click   Steer the centipede toward the cursor (pointer scene)
  Tab     Next scene
  n/N l/L v/V a/A f/F s/S   Shrink/grow tunables
  H       Toggle HUD
  Esc     Quit
"""
from __future__ import annotations

import logging
import sys

import pygame

from crawl import CentipedeSketch, Doodle, ResizeFeed, Shape, Variant
from crawl.render import PygameCanvas

from ui.constants import FPS, HEIGHT, TITLE, WIDTH
from ui.hud import draw_hud

SCENES: list[Variant | Shape] = [
    Variant.POINTER,
    Variant.WANDER,
    Variant.SPLINE,
    Shape.RING,
    Shape.BOX,
    Shape.RAYS,
    Shape.FILL,
]


class WindowContainer:
    """Reports the window size the OS last gave us."""

    def __init__(self, width: int, height: int) -> None:
        self._size = (width, height)
        self._feed = ResizeFeed()

    @property
    def feed(self) -> ResizeFeed:
        return self._feed

    def size(self) -> tuple[int, int]:
        return self._size

    def resized(self, width: int, height: int) -> None:
        self._size = (width, height)
        self._feed.publish(width, height)


def make_scene(
    kind: Variant | Shape, canvas: PygameCanvas, container: WindowContainer
) -> CentipedeSketch | Doodle:
    if isinstance(kind, Variant):
        return CentipedeSketch(canvas, container, kind)
    return Doodle(canvas, container, kind)


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    pygame.init()
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    container = WindowContainer(WIDTH, HEIGHT)
    canvas = PygameCanvas()
    scene_index = 0
    scene = make_scene(SCENES[scene_index], canvas, container)
    scene.setup()

    show_hud = True
    running = True

    while running:
        clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                container.resized(event.w, event.h)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                scene.pointer_pressed(*event.pos)
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_TAB:
                    scene.remove()
                    scene_index = (scene_index + 1) % len(SCENES)
                    scene = make_scene(SCENES[scene_index], canvas, container)
                    scene.setup()
                elif event.key == pygame.K_h:
                    show_hud = not show_hud
                elif event.unicode:
                    scene.key_pressed(event.unicode)

        if isinstance(scene, Doodle):
            mx, my = pygame.mouse.get_pos()
            scene.update_pointer(mx, my, pygame.mouse.get_pressed()[0])

        # Resize handlers run before the frame that depends on them.
        container.feed.flush()
        scene.draw()
        canvas.present()

        if show_hud and canvas.surface is not None:
            draw_hud(canvas.surface, font, scene, clock.get_fps())
        pygame.display.flip()

    scene.remove()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
