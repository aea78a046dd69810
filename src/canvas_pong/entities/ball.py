"""
Ball entity for Canvas Pong.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence, Union

from mini_arcade_core.backend import RenderProtocol
from mini_arcade_core.utils import logger

from canvas_pong.constants import (
    BALL_DIRECTION,
    BALL_RADIUS,
    BALL_SPEED,
    MAX_REFLECTIONS,
    WHITE,
)
from canvas_pong.entities.base import Entity
from canvas_pong.geometry import Canvas, Vector


class BallState(Enum):
    """Lifecycle of the ball. STOPPED is terminal."""

    MOVING = "moving"
    STOPPED = "stopped"


class Wall(Enum):
    """Marker for a probe point that left the canvas."""

    OUT_OF_BOUNDS = "out_of_bounds"


# What a probe point ran into: a target entity, a wall, or nothing.
Hit = Optional[Union[Entity, Wall]]


@dataclass(frozen=True)
class Probes:
    """
    The four points of a ball's bounding circle used for collision tests.

    :ivar top (Vector): Topmost point.
    :ivar left (Vector): Leftmost point.
    :ivar bottom (Vector): Bottom point.
    :ivar right (Vector): Rightmost point.
    """

    top: Vector
    left: Vector
    bottom: Vector
    right: Vector

    @classmethod
    def around(cls, center: Vector, radius: float) -> Probes:
        """
        Build probe points around a center.

        :param center: Circle center.
        :type center: Vector

        :param radius: Circle radius.
        :type radius: float

        :return: Probe points.
        :rtype: Probes
        """
        return cls(
            top=center + Vector(0.0, -radius),
            left=center + Vector(-radius, 0.0),
            bottom=center + Vector(0.0, radius),
            right=center + Vector(radius, 0.0),
        )

    def __iter__(self):
        return iter((self.top, self.left, self.bottom, self.right))


@dataclass(eq=False)
class Ball(Entity):
    """
    Ball entity for the Pong simulation.

    :ivar position (Vector): Center of the ball.
    :ivar canvas (Canvas): Canvas the ball bounces in.
    :ivar radius (float): Radius of the ball.
    :ivar speed (float): Speed of the ball (units/frame).
    :ivar direction (float): Movement direction in radians.
    :ivar targets (list[Entity]): Entities the ball bounces off.
    :ivar state (BallState): Whether the ball is still in play.
    """

    position: Vector
    canvas: Canvas
    radius: float = BALL_RADIUS
    speed: float = BALL_SPEED
    direction: float = BALL_DIRECTION
    targets: list[Entity] = field(default_factory=list)
    state: BallState = BallState.MOVING

    @property
    def stopped(self) -> bool:
        """Whether the ball left the playfield."""
        return self.state is BallState.STOPPED

    @property
    def step(self) -> Vector:
        """Displacement for one frame along the current direction."""
        return Vector(
            self.speed * math.cos(self.direction),
            self.speed * math.sin(self.direction),
        )

    def hit_at(self, point: Vector, targets: Sequence[Entity]) -> Hit:
        """
        Find what a single probe point collides with.

        :param point: Probe point.
        :type point: Vector

        :param targets: Candidate collision targets, in priority order.
        :type targets: Sequence[Entity]

        :return: The first overlapping target, Wall.OUT_OF_BOUNDS, or None.
        :rtype: Hit
        """
        for target in targets:
            if target.overlaps(point):
                return target
        if not self.canvas.contains(point):
            return Wall.OUT_OF_BOUNDS
        return None

    def compute_next_position(self) -> Vector:
        if self.stopped:
            return self.position

        for reflections in range(MAX_REFLECTIONS + 1):
            candidate = self.position + self.step
            probes = Probes.around(candidate, self.radius)

            top = self.hit_at(probes.top, self.targets)
            bottom = self.hit_at(probes.bottom, self.targets)
            if top is not None or bottom is not None:
                if reflections == MAX_REFLECTIONS:
                    break
                # retry from the current position, not the rejected candidate
                self.direction = -self.direction
                continue

            left = self.hit_at(probes.left, self.targets)
            right = self.hit_at(probes.right, self.targets)
            if Wall.OUT_OF_BOUNDS in (left, right):
                self.state = BallState.STOPPED
                logger.info(f"Ball left the playfield at {self.position}")
                return self.position
            if left is not None or right is not None:
                self.direction = math.pi - self.direction
                return self.position

            return candidate

        # wedged against a paddle end: both vertical directions are blocked,
        # so send the ball back horizontally and hold for this frame
        self.direction = math.pi - self.direction
        return self.position

    def can_move_to(self, position: Vector) -> bool:
        return all(
            self.hit_at(point, self.targets) is None
            for point in Probes.around(position, self.radius)
        )

    def draw(self, render: RenderProtocol):
        render.draw_circle(
            int(self.position.x),
            int(self.position.y),
            int(self.radius),
            color=WHITE,
        )
