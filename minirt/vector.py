"""Three-component vectors used for points and directions in a scene."""

from __future__ import annotations

import math
from dataclasses import dataclass

NORMAL_TOLERANCE = 0.00001


@dataclass(frozen=True)
class Vec3:
    """An immutable 3D vector or point."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def dot(self, other: Vec3) -> float:
        """Return the scalar (dot) product with ``other``."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Return the vector (cross) product with ``other``."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, factor: float) -> Vec3:
        """Return this vector multiplied by a scalar."""
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    def length(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vec3:
        """Return the unit vector in the same direction.

        Raises ZeroDivisionError for the zero vector.
        """
        length = self.length()
        return Vec3(self.x / length, self.y / length, self.z / length)

    def is_normalized(self) -> bool:
        """Tell whether the vector has unit length, within a small tolerance."""
        return abs(self.length() - 1) < NORMAL_TOLERANCE