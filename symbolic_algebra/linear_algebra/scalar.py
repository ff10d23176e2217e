import numpy as np
from typing import Optional, Union

Number = Union[int, float, np.floating]


def scalar_value(other) -> Optional[np.float64]:
  if isinstance(other, Scalar):
    return other.value
  if isinstance(other, (int, float, np.integer, np.floating)) and not isinstance(other, bool):
    return np.float64(other)
  return None


class Scalar:
  """A single float64 value with IEEE-754 arithmetic"""

  __slots__ = ('_value',)

  def __init__(self, value: Number = 0.0):
    if isinstance(value, Scalar):
      value = value.value
    object.__setattr__(self, '_value', np.float64(value))

  def __setattr__(self, name, value):
    raise AttributeError("Scalar is immutable")

  @property
  def value(self) -> np.float64:
    return self._value

  def __float__(self) -> float:
    return float(self._value)

  def __repr__(self) -> str:
    return f"Scalar({float(self._value)!r})"

  def __str__(self) -> str:
    return np.format_float_positional(self._value, trim='-')

  def __hash__(self) -> int:
    return hash(float(self._value))

  # Arithmetic never raises on zero division or domain errors; results follow
  # IEEE-754 (inf / nan).

  def _apply(self, other, operation, reflected=False):
    other_value = scalar_value(other)
    if other_value is None:
      return NotImplemented
    lhs, rhs = (other_value, self._value) if reflected else (self._value, other_value)
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
      return Scalar(operation(lhs, rhs))

  def __add__(self, other):
    return self._apply(other, np.add)

  def __radd__(self, other):
    return self._apply(other, np.add, reflected=True)

  def __sub__(self, other):
    return self._apply(other, np.subtract)

  def __rsub__(self, other):
    return self._apply(other, np.subtract, reflected=True)

  def __mul__(self, other):
    return self._apply(other, np.multiply)

  def __rmul__(self, other):
    return self._apply(other, np.multiply, reflected=True)

  def __truediv__(self, other):
    return self._apply(other, np.divide)

  def __rtruediv__(self, other):
    return self._apply(other, np.divide, reflected=True)

  def __pow__(self, other):
    return self._apply(other, np.power)

  def __rpow__(self, other):
    return self._apply(other, np.power, reflected=True)

  def __neg__(self) -> 'Scalar':
    return Scalar(-self._value)

  def __abs__(self) -> 'Scalar':
    return Scalar(np.abs(self._value))

  def power(self, exponent) -> 'Scalar':
    """self raised to exponent"""
    return self ** exponent

  def log_base(self, base) -> 'Scalar':
    """Logarithm of self in the given base"""
    base_value = scalar_value(base)
    if base_value is None:
      raise TypeError(f"Unsupported logarithm base: {base!r}")
    with np.errstate(divide='ignore', invalid='ignore'):
      return Scalar(np.log(self._value) / np.log(base_value))

  def sqrt(self) -> 'Scalar':
    with np.errstate(invalid='ignore'):
      return Scalar(np.sqrt(self._value))

  def is_close(self, other, tolerance: float) -> bool:
    other_value = scalar_value(other)
    return other_value is not None and bool(np.abs(self._value - other_value) <= tolerance)

  # Comparisons follow float semantics, NaN compares unequal to everything.

  def _compare(self, other, comparison):
    other_value = scalar_value(other)
    if other_value is None:
      return NotImplemented
    return bool(comparison(self._value, other_value))

  def __eq__(self, other):
    return self._compare(other, np.equal)

  def __ne__(self, other):
    result = self._compare(other, np.equal)
    return result if result is NotImplemented else not result

  def __lt__(self, other):
    return self._compare(other, np.less)

  def __le__(self, other):
    return self._compare(other, np.less_equal)

  def __gt__(self, other):
    return self._compare(other, np.greater)

  def __ge__(self, other):
    return self._compare(other, np.greater_equal)
