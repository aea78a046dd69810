"""
Pong world state and construction.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.backend import RenderProtocol
from mini_arcade_core.utils import logger

from canvas_pong.config import PongConfig
from canvas_pong.constants import BACKGROUND
from canvas_pong.controllers.cpu import CpuPaddleController
from canvas_pong.difficulty import cpu_config_for
from canvas_pong.entities import Ball, Entity, Paddle
from canvas_pong.geometry import Canvas, Vector


@dataclass
class PongWorld:
    """
    Pong world state.

    :ivar canvas (Canvas): Canvas the simulation runs on.
    :ivar left_paddle (Paddle): Left paddle entity.
    :ivar right_paddle (Paddle): Right paddle entity.
    :ivar ball (Ball): Ball entity.
    """

    canvas: Canvas
    left_paddle: Paddle
    right_paddle: Paddle
    ball: Ball

    @property
    def entities(self) -> tuple[Entity, ...]:
        """Entities in update order: paddles first, then the ball."""
        return (self.left_paddle, self.right_paddle, self.ball)

    @property
    def paddles(self) -> tuple[Paddle, Paddle]:
        """Both paddles, left first."""
        return (self.left_paddle, self.right_paddle)

    @property
    def is_over(self) -> bool:
        """Whether the ball got past a paddle."""
        return self.ball.stopped

    @staticmethod
    def step_entity(entity: Entity) -> bool:
        """
        Move one entity to its next position if it is allowed to go there.

        :param entity: Entity to move.
        :type entity: Entity

        :return: True if the entity moved.
        :rtype: bool
        """
        return entity.move_to(entity.compute_next_position())

    def advance(self):
        """Move every entity once, in update order."""
        for entity in self.entities:
            self.step_entity(entity)

    def clear(self, render: RenderProtocol):
        """
        Paint the background over the whole canvas.

        :param render: Render surface to draw on.
        :type render: RenderProtocol
        """
        render.draw_rect(
            0, 0, self.canvas.width, self.canvas.height, color=BACKGROUND
        )

    def draw(self, render: RenderProtocol):
        """
        Repaint the whole frame.

        :param render: Render surface to draw on.
        :type render: RenderProtocol
        """
        self.clear(render)
        for entity in self.entities:
            entity.draw(render)


def build_world(config: PongConfig | None = None) -> PongWorld:
    """
    Create the paddles and the ball and wire the CPU to both paddles.

    :param config: World settings, defaults when omitted.
    :type config: PongConfig, optional

    :return: A ready to run world.
    :rtype: PongWorld
    """
    config = config or PongConfig()
    canvas = Canvas.of(*config.canvas_size)

    left_start = Vector(config.paddle_inset, canvas.height / 2)
    left = Paddle(left_start, canvas, config.paddle_width)
    right = Paddle(canvas.mirror(left_start), canvas, config.paddle_width)

    ball = Ball(
        canvas.center + Vector(*config.ball_offset),
        canvas,
        radius=config.ball_radius,
        speed=config.ball_speed,
        direction=config.ball_direction,
        targets=[left, right],
    )

    cpu_config = cpu_config_for(config.difficulty)
    for paddle in (left, right):
        CpuPaddleController(ball, config=cpu_config).attach(paddle)

    logger.debug(
        f"Built world on {canvas.width}x{canvas.height} canvas, "
        f"difficulty={config.difficulty}"
    )
    return PongWorld(
        canvas=canvas, left_paddle=left, right_paddle=right, ball=ball
    )
