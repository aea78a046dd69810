"""
Paddle entity for Canvas Pong.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mini_arcade_core.backend import RenderProtocol
from mini_arcade_core.spaces.d2.collision2d import RectCollider
from mini_arcade_core.spaces.geometry.bounds import Position2D, Size2D

from canvas_pong.constants import PADDLE_THICKNESS, WHITE
from canvas_pong.entities.base import Entity
from canvas_pong.geometry import Canvas, Vector

if TYPE_CHECKING:
    from canvas_pong.controllers.cpu import MovePolicy


@dataclass(eq=False)
class Paddle(Entity):
    """
    Paddle entity for the Pong simulation.

    :ivar position (Vector): Center of the paddle.
    :ivar canvas (Canvas): Canvas the paddle is confined to.
    :ivar width (float): Vertical extent of the paddle.
    :ivar speed (float): Movement speed (units/frame).
    :ivar policy (MovePolicy | None): Decides where the paddle goes.
    :ivar thickness (float): Horizontal extent of the paddle.
    """

    position: Vector
    canvas: Canvas
    width: float
    speed: float = 1.0
    policy: MovePolicy | None = None
    thickness: float = PADDLE_THICKNESS

    @property
    def origin(self) -> Vector:
        """Top-left corner of the paddle."""
        return self.position - Vector(self.thickness / 2, self.width / 2)

    @property
    def collider(self) -> RectCollider:
        """Collider for the paddle."""
        origin = self.origin
        return RectCollider(
            Position2D(origin.x, origin.y),
            Size2D(self.thickness, self.width),
        )

    def compute_next_position(self) -> Vector:
        if self.policy is None:
            return self.position

        move = self.policy.compute_move(self)
        return self.position + Vector(0.0, move * self.speed)

    def can_move_to(self, position: Vector) -> bool:
        half = self.width / 2
        return (
            position.y - half >= 0
            and position.y + half <= self.canvas.height
        )

    def overlaps(self, point: Vector) -> bool:
        probe = RectCollider(Position2D(point.x, point.y), Size2D(0, 0))
        return self.collider.intersects(probe)

    def draw(self, render: RenderProtocol):
        origin = self.origin
        render.draw_rect(
            int(origin.x),
            int(origin.y),
            int(self.thickness),
            int(self.width),
            color=WHITE,
        )
