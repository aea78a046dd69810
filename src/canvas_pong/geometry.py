"""
Vector and canvas helpers for Canvas Pong.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.spaces.geometry.bounds import Bounds2D, Size2D


@dataclass(frozen=True)
class Vector:
    """
    Immutable 2D vector in canvas pixel space.

    :ivar x (float): X coordinate.
    :ivar y (float): Y coordinate.
    """

    x: float
    y: float

    def add(self, other: Vector) -> Vector:
        """
        Return the sum of this vector and another one.

        :param other: Vector to add.
        :type other: Vector

        :return: New vector.
        :rtype: Vector
        """
        return Vector(self.x + other.x, self.y + other.y)

    def scale(self, scalar: float) -> Vector:
        """
        Return this vector multiplied by a scalar.

        :param scalar: Scale factor.
        :type scalar: float

        :return: New vector.
        :rtype: Vector
        """
        return Vector(self.x * scalar, self.y * scalar)

    def __add__(self, other: Vector) -> Vector:
        return self.add(other)

    def __sub__(self, other: Vector) -> Vector:
        return self.add(other.scale(-1))

    def __mul__(self, scalar: float) -> Vector:
        return self.scale(scalar)

    def to_tuple(self) -> tuple[float, float]:
        """
        Convert Vector to a tuple.

        :return: Tuple of (x, y).
        :rtype: tuple[float, float]
        """
        return (self.x, self.y)


@dataclass(frozen=True)
class Canvas:
    """
    Fixed-size drawing area the simulation runs in.

    :ivar size (Size2D): Canvas size in pixels.
    """

    size: Size2D

    def __post_init__(self):
        if self.size.width <= 0 or self.size.height <= 0:
            raise ValueError(
                f"Canvas size must be positive, got {self.size.to_tuple()}"
            )

    @classmethod
    def of(cls, width: int, height: int) -> Canvas:
        """
        Convenience factory from plain dimensions.

        :param width: Canvas width.
        :type width: int

        :param height: Canvas height.
        :type height: int

        :return: Canvas instance.
        :rtype: Canvas

        :raises ValueError: If a dimension is not a whole number of pixels.
        """
        if not (float(width).is_integer() and float(height).is_integer()):
            raise ValueError(
                f"Canvas size must be whole pixels, got {(width, height)}"
            )
        return cls(Size2D(int(width), int(height)))

    @property
    def width(self) -> int:
        """Canvas width."""
        return self.size.width

    @property
    def height(self) -> int:
        """Canvas height."""
        return self.size.height

    @property
    def center(self) -> Vector:
        """Center point of the canvas."""
        return Vector(self.width / 2, self.height / 2)

    @property
    def bounds(self) -> Bounds2D:
        """Canvas bounds from (0, 0) to (width, height)."""
        return Bounds2D.from_size(self.size)

    def mirror(self, point: Vector) -> Vector:
        """
        Reflect a point across the canvas center.

        :param point: Point to reflect.
        :type point: Vector

        :return: Reflected point.
        :rtype: Vector
        """
        return Vector(self.width - point.x, self.height - point.y)

    def contains(self, point: Vector) -> bool:
        """
        Check whether a point lies inside the canvas (edges included).

        :param point: Point to check.
        :type point: Vector

        :return: True if the point is in bounds.
        :rtype: bool
        """
        bounds = self.bounds
        return (
            bounds.left <= point.x <= bounds.right
            and bounds.top <= point.y <= bounds.bottom
        )
