"""
Entities package for Canvas Pong.
This package contains all entity definitions used in the simulation.
"""

from __future__ import annotations

from .ball import Ball, BallState, Probes, Wall
from .base import Entity
from .paddle import Paddle

__all__ = [
    "Ball",
    "BallState",
    "Entity",
    "Paddle",
    "Probes",
    "Wall",
]
