"""
Base entity contract for Canvas Pong.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from mini_arcade_core.backend import RenderProtocol

from canvas_pong.geometry import Vector


class Entity(ABC):
    """
    Anything the simulation moves and draws every frame.

    Subclasses must provide a movement rule, a movement gate and a draw
    routine. Collision targets also override ``overlaps``.

    :ivar position (Vector): Center position of the entity.
    """

    position: Vector

    @abstractmethod
    def compute_next_position(self) -> Vector:
        """
        Candidate position for the next frame.

        :return: Candidate center position.
        :rtype: Vector
        """
        raise NotImplementedError

    @abstractmethod
    def can_move_to(self, position: Vector) -> bool:
        """
        Check whether the entity may occupy the given position.

        :param position: Candidate center position.
        :type position: Vector

        :return: True if the move is allowed.
        :rtype: bool
        """
        raise NotImplementedError

    @abstractmethod
    def draw(self, render: RenderProtocol):
        """
        Draw the entity at its current position.

        :param render: Render surface to draw on.
        :type render: RenderProtocol
        """
        raise NotImplementedError

    def overlaps(self, point: Vector) -> bool:
        """
        Check whether a point lies on this entity.

        :param point: Point to test.
        :type point: Vector

        :raises NotImplementedError: If the entity is not a collision target.
        """
        raise NotImplementedError(
            f"{type(self).__name__} is not a collision target"
        )

    def move_to(self, position: Vector) -> bool:
        """
        Commit a new position if the entity is allowed to occupy it.

        :param position: Candidate center position.
        :type position: Vector

        :return: True if the position changed.
        :rtype: bool
        """
        if not self.can_move_to(position):
            return False
        self.position = position
        return True
