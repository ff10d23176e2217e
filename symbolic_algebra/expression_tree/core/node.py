import numpy as np
import sympy as sp
from abc import ABC, abstractmethod
from typing import Dict, Optional, Union, TYPE_CHECKING

from ...linear_algebra.scalar import Scalar
from .operators import (
  NodeType, OpType, BINARY_OP_MAP, COMMUTATIVE_OPS, ZERO_TOLERANCE, is_euler
)

if TYPE_CHECKING:
  from .functions import DerivableFunction

Bindings = Dict[str, Union[Scalar, float]]


def as_node(value) -> Optional['Node']:
  """Promote numbers and Scalars to constants, pass nodes through"""
  if isinstance(value, Node):
    return value
  if isinstance(value, Scalar):
    return ConstantNode(value)
  if isinstance(value, (int, float, np.integer, np.floating)) and not isinstance(value, bool):
    return ConstantNode(value)
  return None


class Node(ABC):
  """Base node of an immutable expression tree"""

  __slots__ = ('_hash_cache', '_size_cache')
  # Numpy scalars on the left of an operator defer to the node
  __array_ufunc__ = None

  def __init__(self):
    self._hash_cache: Optional[int] = None
    self._size_cache: Optional[int] = None

  @abstractmethod
  def to_string(self) -> str:
    pass

  @abstractmethod
  def copy(self) -> 'Node':
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  @abstractmethod
  def _compute_size(self) -> int:
    pass

  @abstractmethod
  def _compute_hash(self) -> int:
    pass

  @abstractmethod
  def _same_structure(self, other: 'Node') -> bool:
    pass

  def size(self) -> int:
    """Node count"""
    if self._size_cache is None:
      self._size_cache = self._compute_size()
    return self._size_cache

  def __hash__(self) -> int:
    if self._hash_cache is None:
      self._hash_cache = self._compute_hash()
    return self._hash_cache

  def __eq__(self, other) -> bool:
    if not isinstance(other, Node):
      return NotImplemented
    if type(self) is not type(other):
      return False
    if hash(self) != hash(other):
      return False
    return self._same_structure(other)

  def __ne__(self, other) -> bool:
    result = self.__eq__(other)
    return result if result is NotImplemented else not result

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"<{type(self).__name__} {self.to_string()}>"

  # Construction operators. `^` and `**` both build an exponentiation node.

  def _binary(self, operator: str, other, reflected: bool = False):
    other_node = as_node(other)
    if other_node is None:
      return NotImplemented
    if reflected:
      return BinaryOpNode(operator, other_node, self)
    return BinaryOpNode(operator, self, other_node)

  def __add__(self, other):
    return self._binary('+', other)

  def __radd__(self, other):
    return self._binary('+', other, reflected=True)

  def __sub__(self, other):
    return self._binary('-', other)

  def __rsub__(self, other):
    return self._binary('-', other, reflected=True)

  def __mul__(self, other):
    return self._binary('*', other)

  def __rmul__(self, other):
    return self._binary('*', other, reflected=True)

  def __truediv__(self, other):
    return self._binary('/', other)

  def __rtruediv__(self, other):
    return self._binary('/', other, reflected=True)

  def __xor__(self, other):
    return self._binary('^', other)

  def __rxor__(self, other):
    return self._binary('^', other, reflected=True)

  def __pow__(self, other):
    return self._binary('^', other)

  def __rpow__(self, other):
    return self._binary('^', other, reflected=True)

  def __neg__(self) -> 'BinaryOpNode':
    return BinaryOpNode('*', ConstantNode(-1.0), self)

  # Transformations, each returning a new tree

  def simplified(self) -> 'Node':
    from ..utils.simplifier import ExpressionSimplifier
    return ExpressionSimplifier.simplify(self)

  def differentiate(self, wrt: 'Node') -> 'Node':
    from ..utils.differentiator import ExpressionDifferentiator
    return ExpressionDifferentiator.differentiate(self, wrt)

  def with_values(self, bindings: Bindings) -> 'Node':
    from ..utils.evaluation import with_values
    return with_values(self, bindings)

  def evaluate(self, bindings: Bindings) -> Scalar:
    from ..utils.evaluation import evaluate
    return evaluate(self, bindings)


class VariableNode(Node):
  __slots__ = ('name',)

  def __init__(self, name: str):
    super().__init__()
    if not isinstance(name, str) or len(name) != 1:
      raise ValueError(f"Variable name must be a single character, got {name!r}")
    self.name = name

  def to_string(self) -> str:
    return self.name

  def copy(self) -> 'VariableNode':
    return VariableNode(self.name)

  def to_sympy(self) -> sp.Expr:
    return sp.Symbol(self.name)

  def _compute_size(self) -> int:
    return 1

  def _compute_hash(self) -> int:
    return hash((NodeType.VARIABLE, self.name))

  def _same_structure(self, other: 'VariableNode') -> bool:
    return self.name == other.name


class ConstantNode(Node):
  __slots__ = ('value',)

  def __init__(self, value: Union[Scalar, float]):
    super().__init__()
    self.value = Scalar(value)

  def to_string(self) -> str:
    return str(self.value)

  def copy(self) -> 'ConstantNode':
    return ConstantNode(self.value)

  def to_sympy(self) -> sp.Expr:
    return sp.Float(float(self.value))

  def _compute_size(self) -> int:
    return 1

  def _compute_hash(self) -> int:
    return hash((NodeType.CONSTANT, hash(self.value)))

  def _same_structure(self, other: 'ConstantNode') -> bool:
    # Exact float comparison
    return self.value == other.value


class BinaryOpNode(Node):
  __slots__ = ('operator', 'left', 'right')

  def __init__(self, operator: str, left: Node, right: Node):
    super().__init__()
    if operator not in BINARY_OP_MAP:
      raise ValueError(f"Unknown binary operator: {operator!r}")
    if not isinstance(left, Node) or not isinstance(right, Node):
      raise TypeError("Binary operands must be expression nodes")
    self.operator = operator
    self.left = left
    self.right = right

  @property
  def op_type(self) -> OpType:
    return BINARY_OP_MAP[self.operator]

  def to_string(self) -> str:
    if self.op_type == OpType.MUL:
      if _is_minus_one(self.left):
        return f"-({self.right.to_string()})"
      if _is_minus_one(self.right):
        return f"-({self.left.to_string()})"

    if self.op_type == OpType.LOG:
      if isinstance(self.left, ConstantNode) and is_euler(self.left.value):
        return f"ln({self.right.to_string()})"
      return f"log_({self.left.to_string()})({self.right.to_string()})"

    return f"({self.left.to_string()} {self.operator} {self.right.to_string()})"

  def copy(self) -> 'BinaryOpNode':
    return BinaryOpNode(self.operator, self.left.copy(), self.right.copy())

  def to_sympy(self) -> sp.Expr:
    left = self.left.to_sympy()
    right = self.right.to_sympy()
    op_type = self.op_type
    if op_type == OpType.ADD:
      return sp.Add(left, right)
    elif op_type == OpType.SUB:
      return sp.Add(left, sp.Mul(-1, right))
    elif op_type == OpType.MUL:
      return sp.Mul(left, right)
    elif op_type == OpType.DIV:
      return sp.Mul(left, sp.Pow(right, -1))
    elif op_type == OpType.POW:
      return sp.Pow(left, right)
    return sp.log(right, left)

  def _compute_size(self) -> int:
    return 1 + self.left.size() + self.right.size()

  def _compute_hash(self) -> int:
    child_hashes = (hash(self.left), hash(self.right))
    if self.op_type in COMMUTATIVE_OPS:
      child_hashes = tuple(sorted(child_hashes))
    return hash((NodeType.BINARY_OP, self.operator, child_hashes))

  def _same_structure(self, other: 'BinaryOpNode') -> bool:
    if self.operator != other.operator:
      return False
    if self.left == other.left and self.right == other.right:
      return True
    if self.op_type in COMMUTATIVE_OPS:
      return self.left == other.right and self.right == other.left
    return False


class NamedFunctionNode(Node):
  """Application of a derivable function to a single operand"""

  __slots__ = ('function', 'operand')

  def __init__(self, function: 'DerivableFunction', operand: Node):
    super().__init__()
    if not isinstance(operand, Node):
      raise TypeError("Function operand must be an expression node")
    self.function = function
    self.operand = operand

  def to_string(self) -> str:
    return f"{self.function.name}({self.operand.to_string()})"

  def copy(self) -> 'NamedFunctionNode':
    return NamedFunctionNode(self.function, self.operand.copy())

  def to_sympy(self) -> sp.Expr:
    return self.function.to_sympy(self.operand.to_sympy())

  def _compute_size(self) -> int:
    return 1 + self.operand.size()

  def _compute_hash(self) -> int:
    return hash((NodeType.NAMED_FUNCTION, self.function.name, hash(self.operand)))

  def _same_structure(self, other: 'NamedFunctionNode') -> bool:
    return self.function.name == other.function.name and self.operand == other.operand


def _is_minus_one(node: Node) -> bool:
  return isinstance(node, ConstantNode) and node.value.is_close(-1.0, ZERO_TOLERANCE)
