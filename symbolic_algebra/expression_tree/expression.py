import sympy as sp
from typing import Dict, Optional, Union

from ..linear_algebra.scalar import Scalar
from ..logging_system import debug_enabled, log_debug
from .core.node import Node, VariableNode, ConstantNode, as_node
from .utils.differentiator import ExpressionDifferentiator
from .utils.evaluation import evaluate, with_values
from .utils.simplifier import ExpressionSimplifier
from .utils.sympy_utils import latex_representation
from .utils.tree_utils import calculate_tree_depth, get_variables

Bindings = Dict[str, Union[Scalar, float]]


def _unwrap(value):
  if isinstance(value, Expression):
    return value.root
  return as_node(value)


class Expression:
  """Handle on an expression tree with a cached string form"""

  __slots__ = ('root', '_string_cache')
  __array_ufunc__ = None

  def __init__(self, root: Node):
    if not isinstance(root, Node):
      raise TypeError(f"Expression root must be a Node, got {type(root).__name__}")
    self.root = root
    self._string_cache: Optional[str] = None

  @classmethod
  def variable(cls, name: str) -> 'Expression':
    return cls(VariableNode(name))

  @classmethod
  def constant(cls, value: Union[Scalar, float]) -> 'Expression':
    return cls(ConstantNode(value))

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = self.root.to_string()
    return self._string_cache

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Expression({self.to_string()})"

  def copy(self) -> 'Expression':
    return Expression(self.root.copy())

  def size(self) -> int:
    """Node count"""
    return self.root.size()

  def depth(self) -> int:
    return calculate_tree_depth(self.root)

  def variables(self):
    return get_variables(self.root)

  def simplified(self) -> 'Expression':
    return Expression(ExpressionSimplifier.simplify(self.root))

  def differentiate(self, wrt) -> 'Expression':
    wrt_node = wrt.root if isinstance(wrt, Expression) else wrt
    derivative = ExpressionDifferentiator.differentiate(self.root, wrt_node)
    if debug_enabled():
      log_debug(f"d/d{wrt_node} {self.to_string()} = {derivative.to_string()}")
    return Expression(derivative)

  def with_values(self, bindings: Bindings) -> 'Expression':
    return Expression(with_values(self.root, bindings))

  def evaluate(self, bindings: Bindings) -> Scalar:
    return evaluate(self.root, bindings)

  def to_sympy(self) -> sp.Expr:
    return self.root.to_sympy()

  def to_latex(self) -> str:
    return latex_representation(self.root)

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if isinstance(other, Expression):
      return self.root == other.root
    if isinstance(other, Node):
      return self.root == other
    return NotImplemented

  def _binary(self, operator, other, reflected=False):
    other_node = _unwrap(other)
    if other_node is None:
      return NotImplemented
    left, right = (other_node, self.root) if reflected else (self.root, other_node)
    return Expression(getattr(left, operator)(right))

  def __add__(self, other):
    return self._binary('__add__', other)

  def __radd__(self, other):
    return self._binary('__add__', other, reflected=True)

  def __sub__(self, other):
    return self._binary('__sub__', other)

  def __rsub__(self, other):
    return self._binary('__sub__', other, reflected=True)

  def __mul__(self, other):
    return self._binary('__mul__', other)

  def __rmul__(self, other):
    return self._binary('__mul__', other, reflected=True)

  def __truediv__(self, other):
    return self._binary('__truediv__', other)

  def __rtruediv__(self, other):
    return self._binary('__truediv__', other, reflected=True)

  def __xor__(self, other):
    return self._binary('__xor__', other)

  def __rxor__(self, other):
    return self._binary('__xor__', other, reflected=True)

  def __pow__(self, other):
    return self._binary('__xor__', other)

  def __rpow__(self, other):
    return self._binary('__xor__', other, reflected=True)

  def __neg__(self) -> 'Expression':
    return Expression(-self.root)
