"""Window and HUD constants."""

# Timing
FPS = 60

# Window
WIDTH, HEIGHT = 960, 640
TITLE = "crawl - procedural centipede"

# HUD
HUD_COLOR = (200, 200, 220)
HUD_DIM = (120, 120, 140)
HUD_PAD = 8
HUD_LINE_H = 16
