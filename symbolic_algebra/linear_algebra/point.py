from dataclasses import dataclass

from ..exceptions import DimensionMismatchError
from .vector import Vector


@dataclass(frozen=True)
class Point3:
  x: float
  y: float
  z: float

  def as_vector(self) -> Vector:
    """Position vector from the origin"""
    return Vector([self.x, self.y, self.z])

  def __sub__(self, other):
    # p - q is the vector from q to p
    if not isinstance(other, Point3):
      return NotImplemented
    return Vector([self.x - other.x, self.y - other.y, self.z - other.z])

  def __add__(self, other):
    if not isinstance(other, Vector):
      return NotImplemented
    if other.dimension != 3:
      raise DimensionMismatchError(
        f"Cannot translate a 3-dimensional point by a {other.dimension}-dimensional vector",
        details={'left': 3, 'right': other.dimension}
      )
    return Point3(self.x + other[0], self.y + other[1], self.z + other[2])


Point3.ZERO = Point3(0.0, 0.0, 0.0)
