"""Core expression tree components."""

from .node import Node, VariableNode, ConstantNode, BinaryOpNode, NamedFunctionNode, as_node
from .operators import (
  NodeType, OpType, BINARY_OP_MAP, COMMUTATIVE_OPS, ZERO_TOLERANCE, fold_binary_op
)
from .functions import (
  DerivableFunction, FunctionRegistry, define_function, get_function, get_registry,
  SINE, COSINE, sin, cos, logarithm, ln
)

__all__ = [
  'Node', 'VariableNode', 'ConstantNode', 'BinaryOpNode', 'NamedFunctionNode', 'as_node',
  'NodeType', 'OpType', 'BINARY_OP_MAP', 'COMMUTATIVE_OPS', 'ZERO_TOLERANCE', 'fold_binary_op',
  'DerivableFunction', 'FunctionRegistry', 'define_function', 'get_function', 'get_registry',
  'SINE', 'COSINE', 'sin', 'cos', 'logarithm', 'ln'
]
