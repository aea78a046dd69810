"""
Paddle controllers for Canvas Pong.
"""

from __future__ import annotations

from .cpu import CpuConfig, CpuPaddleController, MovePolicy

__all__ = [
    "CpuConfig",
    "CpuPaddleController",
    "MovePolicy",
]
