"""
Pong scene package.
"""

from __future__ import annotations

from .models import PongIntent, PongTickContext
from .scene import (
    DrawWorld,
    PongRenderSystem,
    PongScene,
    PongSimulationSystem,
    world_for_viewport,
)

__all__ = [
    "DrawWorld",
    "PongIntent",
    "PongRenderSystem",
    "PongScene",
    "PongSimulationSystem",
    "PongTickContext",
    "world_for_viewport",
]
