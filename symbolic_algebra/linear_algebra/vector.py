import numpy as np
from typing import Iterable, Union

from ..exceptions import DimensionMismatchError
from .angle import Radians
from .kernels import cross3_kernel, dot_kernel, magnitude_squared_kernel
from .scalar import Scalar, scalar_value


class Vector:
  """Immutable n-dimensional vector backed by a float64 array"""

  __slots__ = ('_components',)
  # Keep numpy scalars from broadcasting over the components on the left of an operator
  __array_ufunc__ = None

  def __init__(self, components: Iterable[float]):
    array = np.array(components, dtype=np.float64)
    if array.ndim != 1:
      raise ValueError(f"Vector components must be one-dimensional, got shape {array.shape}")
    array.flags.writeable = False
    self._components = array

  @classmethod
  def from_points(cls, start, end) -> 'Vector':
    """Vector pointing from start to end"""
    return end - start

  @property
  def components(self) -> np.ndarray:
    return self._components

  @property
  def dimension(self) -> int:
    return self._components.shape[0]

  def __len__(self) -> int:
    return self.dimension

  def __iter__(self):
    return (float(c) for c in self._components)

  def __getitem__(self, index: int) -> float:
    return float(self._components[index])

  def __repr__(self) -> str:
    return f"Vector({self._components.tolist()!r})"

  def __eq__(self, other) -> bool:
    if not isinstance(other, Vector):
      return NotImplemented
    return bool(np.array_equal(self._components, other._components))

  def __hash__(self) -> int:
    return hash(tuple(self._components.tolist()))

  def is_close(self, other: 'Vector', tolerance: float = 1e-9) -> bool:
    self._check_dimension(other)
    return bool(np.allclose(self._components, other._components, rtol=0.0, atol=tolerance))

  def _check_dimension(self, other: 'Vector'):
    if self.dimension != other.dimension:
      raise DimensionMismatchError(
        f"Mismatched dimensions: {self.dimension} and {other.dimension}",
        details={'left': self.dimension, 'right': other.dimension}
      )

  def magnitude_squared(self) -> Scalar:
    return Scalar(magnitude_squared_kernel(self._components))

  def magnitude(self) -> Scalar:
    return self.magnitude_squared().sqrt()

  def unit_in_direction(self) -> 'Vector':
    return self / self.magnitude()

  def inverted(self) -> 'Vector':
    return Vector(-self._components)

  def added(self, other: 'Vector') -> 'Vector':
    self._check_dimension(other)
    return Vector(self._components + other._components)

  def subtracted(self, other: 'Vector') -> 'Vector':
    return self.added(other.inverted())

  def multiplied(self, scalar: Union[Scalar, float]) -> 'Vector':
    factor = scalar_value(scalar)
    if factor is None:
      raise TypeError(f"Cannot scale a vector by {scalar!r}")
    with np.errstate(invalid='ignore', over='ignore'):
      return Vector(self._components * factor)

  def dotted(self, other: 'Vector') -> Scalar:
    self._check_dimension(other)
    return Scalar(dot_kernel(self._components, other._components))

  def projected_on(self, base: 'Vector') -> 'Vector':
    return base.multiplied(self.dotted(base) / base.magnitude_squared())

  def angle_between(self, other: 'Vector') -> Radians:
    cosine = self.dotted(other) / (self.magnitude() * other.magnitude())
    return Radians(float(np.arccos(np.clip(cosine.value, -1.0, 1.0))))

  def crossed(self, other: 'Vector') -> 'Vector':
    if self.dimension != 3 or other.dimension != 3:
      raise DimensionMismatchError(
        "Cross product is only defined for 3-dimensional vectors",
        details={'left': self.dimension, 'right': other.dimension}
      )
    return Vector(cross3_kernel(self._components, other._components))

  # Operators

  def __add__(self, other):
    if not isinstance(other, Vector):
      return NotImplemented
    return self.added(other)

  def __sub__(self, other):
    if not isinstance(other, Vector):
      return NotImplemented
    return self.subtracted(other)

  def __mul__(self, other):
    if isinstance(other, Vector):
      return self.dotted(other)
    if scalar_value(other) is None:
      return NotImplemented
    return self.multiplied(other)

  def __rmul__(self, other):
    if scalar_value(other) is None:
      return NotImplemented
    return self.multiplied(other)

  def __truediv__(self, other):
    divisor = scalar_value(other)
    if divisor is None:
      return NotImplemented
    with np.errstate(divide='ignore', invalid='ignore'):
      return Vector(self._components / divisor)

  def __neg__(self) -> 'Vector':
    return self.inverted()

  def __xor__(self, other):
    if not isinstance(other, Vector):
      return NotImplemented
    return self.crossed(other)

  def __rshift__(self, other):
    # a >> b projects a onto b
    if not isinstance(other, Vector):
      return NotImplemented
    return self.projected_on(other)

  def __lshift__(self, other):
    # a << b projects b onto a
    if not isinstance(other, Vector):
      return NotImplemented
    return other.projected_on(self)
