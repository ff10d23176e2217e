from enum import Enum
from typing import Optional, Tuple, Union

from .point import Point3
from .scalar import Scalar
from .vector import Vector

# Absolute tolerance for containment, orthogonality and parallelism tests
GEOMETRY_TOLERANCE: float = 1e-9


class Axis(Enum):
  X = 0
  Y = 1
  Z = 2


class Intersection3(Enum):
  COINCIDENT = 'coincident'
  PARALLEL = 'parallel'


AxisIntersection = Union[Point3, Intersection3]


class Plane3:
  """Plane in three dimensions given by a point on it and a normal vector"""

  __hash__ = None

  def __init__(self, point: Point3, normal: Vector):
    self.point = point
    self.normal = normal

  def __repr__(self) -> str:
    return f"Plane3(point={self.point!r}, normal={self.normal!r})"

  @classmethod
  def from_point_and_normal(cls, point: Point3, normal: Vector) -> 'Plane3':
    return cls(point, normal.unit_in_direction())

  @classmethod
  def from_points(cls, p1: Point3, p2: Point3, p3: Point3) -> 'Plane3':
    return cls(p1, ((p2 - p1) ^ (p3 - p1)).unit_in_direction())

  @classmethod
  def from_equation(cls, a: float, b: float, c: float, d: float) -> 'Plane3':
    """Plane satisfying ax + by + cz = d"""
    magnitude = Vector([a, b, c]).magnitude()
    normal = Vector([a, b, c]) / magnitude
    offset = float(Scalar(d) / magnitude)
    return cls(Point3(normal[0] * offset, normal[1] * offset, normal[2] * offset), normal)

  def as_equation(self) -> Tuple[Vector, Scalar]:
    """(n, d) such that n . p = d for every point p on the plane"""
    return self.normal, self.point.as_vector().dotted(self.normal)

  def contains(self, point: Point3) -> bool:
    _, d = self.as_equation()
    return (point.as_vector().dotted(self.normal) - d).is_close(0.0, GEOMETRY_TOLERANCE)

  def solve_for(self, axis: Axis, first: float, second: float) -> Optional[Scalar]:
    """Missing coordinate along axis, given the other two in x, y, z order"""
    normal, d = self.as_equation()
    a, b, c = normal
    if axis is Axis.X:
      coefficient, rest = a, b * first + c * second
    elif axis is Axis.Y:
      coefficient, rest = b, a * first + c * second
    else:
      coefficient, rest = c, a * first + b * second

    if abs(coefficient) <= GEOMETRY_TOLERANCE:
      return None
    return (d - rest) / coefficient

  def axis_intersects(self) -> Tuple[AxisIntersection, AxisIntersection, AxisIntersection]:
    on_origin = self.contains(Point3.ZERO)
    missing = Intersection3.COINCIDENT if on_origin else Intersection3.PARALLEL

    x = self.solve_for(Axis.X, 0.0, 0.0)
    y = self.solve_for(Axis.Y, 0.0, 0.0)
    z = self.solve_for(Axis.Z, 0.0, 0.0)
    return (
      missing if x is None else Point3(float(x), 0.0, 0.0),
      missing if y is None else Point3(0.0, float(y), 0.0),
      missing if z is None else Point3(0.0, 0.0, float(z)),
    )

  def is_orthogonal(self, other: 'Plane3') -> bool:
    return self.normal.dotted(other.normal).is_close(0.0, GEOMETRY_TOLERANCE)

  def is_parallel(self, other: 'Plane3') -> bool:
    return float((self.normal ^ other.normal).magnitude_squared()) <= GEOMETRY_TOLERANCE

  def __eq__(self, other) -> bool:
    if not isinstance(other, Plane3):
      return NotImplemented
    return self.contains(other.point) and self.is_parallel(other)
