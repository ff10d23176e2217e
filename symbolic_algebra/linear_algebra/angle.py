import numpy as np
from abc import ABC, abstractmethod

# Absolute tolerance, in radians, for equivalence of angles modulo a full turn
ANGLE_TOLERANCE: float = 1e-9

FULL_TURN = 2.0 * np.pi


class Angle(ABC):
  """Base class for angle values"""

  __slots__ = ('value',)

  def __init__(self, value: float):
    self.value = float(value)

  @abstractmethod
  def to_radians(self) -> 'Radians':
    pass

  @abstractmethod
  def to_degrees(self) -> 'Degrees':
    pass

  @abstractmethod
  def to_unit_circle(self) -> 'Angle':
    pass

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self.value!r})"

  def __float__(self) -> float:
    return self.value

  def is_eq(self, other: 'Angle') -> bool:
    """Exact equality after converting other to this unit"""
    return self.value == self._convert(other).value

  def is_equivalent(self, other: 'Angle') -> bool:
    """Equality modulo whole turns"""
    difference = (self.to_radians().value - other.to_radians().value) % FULL_TURN
    return bool(np.isclose(difference, 0.0, rtol=0.0, atol=ANGLE_TOLERANCE) or
                np.isclose(difference, FULL_TURN, rtol=0.0, atol=ANGLE_TOLERANCE))

  @abstractmethod
  def _convert(self, other: 'Angle') -> 'Angle':
    pass


class Radians(Angle):
  __slots__ = ()

  def to_radians(self) -> 'Radians':
    return self

  def to_degrees(self) -> 'Degrees':
    return Degrees(np.degrees(self.value))

  def to_unit_circle(self) -> 'Radians':
    return Radians(self.value % FULL_TURN)

  def _convert(self, other: Angle) -> 'Radians':
    return other.to_radians()


class Degrees(Angle):
  __slots__ = ()

  def to_radians(self) -> Radians:
    return Radians(np.radians(self.value))

  def to_degrees(self) -> 'Degrees':
    return self

  def to_unit_circle(self) -> 'Degrees':
    return Degrees(self.value % 360.0)

  def _convert(self, other: Angle) -> 'Degrees':
    return other.to_degrees()
