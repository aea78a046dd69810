"""
Minimal CPU paddle controller for Canvas Pong.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from canvas_pong.entities import Ball, Paddle


class MovePolicy(Protocol):
    """
    Anything that can steer a paddle.
    """

    def compute_move(self, paddle: Paddle) -> float:
        """
        Decide paddle move direction:
            -1.0 = up
            0.0 = stop
            +1.0 = down
        """


@dataclass
class CpuConfig:
    """
    Basic CPU difficulty settings.

    - max_speed: how fast the CPU paddle can move (units/frame)
    """

    max_speed: float = 5.0


class CpuPaddleController:
    """
    Very simple CPU:
    - Looks at the ball's center Y.
    - Moves the paddle up/down toward it at a fixed speed.
    - Stays put while the ball is within half a paddle of its center.
    """

    def __init__(self, ball: Ball, *, config: CpuConfig | None = None):
        """
        :param ball: The ball to track.
        :type ball: Ball

        :param config: The CPU configuration settings.
        :type config: CpuConfig, optional
        """
        self.ball = ball
        self.config = config or CpuConfig()

    def attach(self, paddle: Paddle) -> Paddle:
        """
        Hand the paddle over to this controller.

        :param paddle: The paddle to control.
        :type paddle: Paddle

        :return: The same paddle, now driven by this controller.
        :rtype: Paddle
        """
        # paddle speed follows the CPU config
        paddle.speed = self.config.max_speed
        paddle.policy = self
        return paddle

    def compute_move(self, paddle: Paddle) -> float:
        diff = self.ball.position.y - paddle.position.y

        # Dead zone = "jitter reduction", covers diff == 0 too
        if abs(diff) < paddle.width / 2:
            return 0.0

        return 1.0 if diff > 0 else -1.0
