"""
Canvas Pong: two CPU paddles and a ball on a fixed-size canvas.
"""

from __future__ import annotations

from canvas_pong.config import PongConfig
from canvas_pong.geometry import Canvas, Vector
from canvas_pong.loop import FrameScheduler, SimulationLoop
from canvas_pong.world import PongWorld, build_world

__all__ = [
    "Canvas",
    "FrameScheduler",
    "PongConfig",
    "PongWorld",
    "SimulationLoop",
    "Vector",
    "build_world",
]
