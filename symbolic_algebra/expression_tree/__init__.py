"""Expression Tree Module

Symbolic expression trees with simplification, differentiation and
evaluation.
"""

from .expression import Expression
from .core.node import (
  Node,
  VariableNode,
  ConstantNode,
  BinaryOpNode,
  NamedFunctionNode
)
from .core.operators import NodeType, OpType, BINARY_OP_MAP, ZERO_TOLERANCE
from .core.functions import (
  DerivableFunction, FunctionRegistry, define_function, get_function, get_registry,
  SINE, COSINE, sin, cos, logarithm, ln
)
from .utils import (
  ExpressionSimplifier, ExpressionDifferentiator, with_values, evaluate,
  to_sympy, latex_representation, are_equivalent
)

__all__ = [
  "Expression",
  "Node", "VariableNode", "ConstantNode", "BinaryOpNode", "NamedFunctionNode",
  "NodeType", "OpType", "BINARY_OP_MAP", "ZERO_TOLERANCE",
  "DerivableFunction", "FunctionRegistry", "define_function", "get_function", "get_registry",
  "SINE", "COSINE", "sin", "cos", "logarithm", "ln",
  "ExpressionSimplifier", "ExpressionDifferentiator", "with_values", "evaluate",
  "to_sympy", "latex_representation", "are_equivalent"
]
