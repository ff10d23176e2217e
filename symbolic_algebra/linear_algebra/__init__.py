"""Scalar and vector linear algebra."""

from .scalar import Scalar
from .vector import Vector
from .angle import Angle, Radians, Degrees, ANGLE_TOLERANCE
from .determinant import determinant, cross, units
from .point import Point3
from .plane import Plane3, Axis, Intersection3, GEOMETRY_TOLERANCE
from . import unit

__all__ = [
  'Scalar', 'Vector', 'unit',
  'Angle', 'Radians', 'Degrees', 'ANGLE_TOLERANCE',
  'determinant', 'cross', 'units',
  'Point3', 'Plane3', 'Axis', 'Intersection3', 'GEOMETRY_TOLERANCE'
]
