"""Standard unit vectors in two and three dimensions."""

from .vector import Vector


def i2() -> Vector:
  return Vector([1.0, 0.0])


def j2() -> Vector:
  return Vector([0.0, 1.0])


def i3() -> Vector:
  return Vector([1.0, 0.0, 0.0])


def j3() -> Vector:
  return Vector([0.0, 1.0, 0.0])


def k3() -> Vector:
  return Vector([0.0, 0.0, 1.0])
