"""
Constants for Canvas Pong.
"""

from __future__ import annotations

import math

CANVAS_SIZE = (800, 400)
FPS = 60

BACKGROUND = (0, 0, 0)
WHITE = (255, 255, 255)

PADDLE_THICKNESS = 20
PADDLE_WIDTH = 100
# distance from the left edge to the left paddle center
PADDLE_INSET = 30

BALL_RADIUS = 10
BALL_SPEED = 10.0  # units/frame
BALL_DIRECTION = math.pi / 4
# ball spawn, relative to the canvas center
BALL_OFFSET = (-10.0, 50.0)

# at most this many direction flips while resolving one ball move
MAX_REFLECTIONS = 2
