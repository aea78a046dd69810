"""
Simulation configuration for Canvas Pong.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from canvas_pong.constants import (
    BALL_DIRECTION,
    BALL_OFFSET,
    BALL_RADIUS,
    BALL_SPEED,
    CANVAS_SIZE,
    PADDLE_INSET,
    PADDLE_WIDTH,
)
from canvas_pong.difficulty import DEFAULT_DIFFICULTY, DIFFICULTY_PRESETS


def _pair(value: Any, default: tuple[float, float]) -> tuple[float, float]:
    if isinstance(value, (list, tuple)) and len(value) == 2:
        try:
            return (float(value[0]), float(value[1]))
        except (TypeError, ValueError):
            return default
    return default


def _number(value: Any, default: float) -> float:
    if value is None:
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


# Justification: flat settings bag, one attribute per knob
# pylint: disable=too-many-instance-attributes
@dataclass
class PongConfig:
    """
    Settings used to build a Pong world.

    :ivar canvas_size (tuple[int, int]): Canvas (width, height).
    :ivar paddle_width (float): Vertical extent of each paddle.
    :ivar paddle_inset (float): Left paddle center X (right one is mirrored).
    :ivar ball_radius (float): Ball radius.
    :ivar ball_speed (float): Ball speed in units/frame.
    :ivar ball_direction (float): Initial ball direction in radians.
    :ivar ball_offset (tuple[float, float]): Ball spawn relative to center.
    :ivar difficulty (str): CPU difficulty preset name.
    """

    canvas_size: tuple[int, int] = CANVAS_SIZE
    paddle_width: float = PADDLE_WIDTH
    paddle_inset: float = PADDLE_INSET
    ball_radius: float = BALL_RADIUS
    ball_speed: float = BALL_SPEED
    ball_direction: float = BALL_DIRECTION
    ball_offset: tuple[float, float] = BALL_OFFSET
    difficulty: str = DEFAULT_DIFFICULTY

    def __post_init__(self):
        width, height = self.canvas_size
        if width <= 0 or height <= 0:
            raise ValueError(
                f"canvas_size must be positive, got {self.canvas_size}"
            )
        if not (float(width).is_integer() and float(height).is_integer()):
            raise ValueError(
                f"canvas_size must be whole pixels, got {self.canvas_size}"
            )
        self.canvas_size = (int(width), int(height))
        for name in ("paddle_width", "ball_radius", "ball_speed"):
            if getattr(self, name) <= 0:
                raise ValueError(
                    f"{name} must be positive, got {getattr(self, name)}"
                )
        if self.paddle_width > height:
            raise ValueError(
                f"paddle_width {self.paddle_width} does not fit in a "
                f"canvas {height} high"
            )
        if self.difficulty not in DIFFICULTY_PRESETS:
            raise ValueError(
                f"Unknown difficulty {self.difficulty!r}, expected one of "
                f"{sorted(DIFFICULTY_PRESETS)}"
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "PongConfig":
        """
        Create a PongConfig from a dictionary.

        Missing or malformed values fall back to defaults; unknown keys are
        ignored.

        :param data: Dictionary containing configuration values.
        :type data: dict or None

        :return: A PongConfig populated with the provided data.
        :rtype: PongConfig

        :raises ValueError: If a value is out of range.
        """
        if not isinstance(data, dict):
            return cls()

        defaults = cls()
        difficulty = str(data.get("difficulty", defaults.difficulty))

        return cls(
            canvas_size=_pair(data.get("canvas_size"), defaults.canvas_size),
            paddle_width=_number(
                data.get("paddle_width"), defaults.paddle_width
            ),
            paddle_inset=_number(
                data.get("paddle_inset"), defaults.paddle_inset
            ),
            ball_radius=_number(data.get("ball_radius"), defaults.ball_radius),
            ball_speed=_number(data.get("ball_speed"), defaults.ball_speed),
            ball_direction=_number(
                data.get("ball_direction"), defaults.ball_direction
            ),
            ball_offset=_pair(data.get("ball_offset"), defaults.ball_offset),
            difficulty=difficulty.strip().lower(),
        )


# pylint: enable=too-many-instance-attributes
