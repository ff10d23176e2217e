"""Symbolic Algebra Package

Scalar and vector linear algebra with a symbolic expression engine for
simplification and differentiation.
"""

from .linear_algebra import (
  Scalar, Vector, Radians, Degrees, Point3, Plane3, Axis, Intersection3,
  determinant, cross, units
)
from .expression_tree import (
  Expression, Node, VariableNode, ConstantNode, BinaryOpNode, NamedFunctionNode,
  DerivableFunction, define_function, get_function, sin, cos, logarithm, ln
)
from .exceptions import (
  AlgebraError, BadDifferentiationError, UnresolvedEvaluationError, DimensionMismatchError
)
from .logging_system import LogLevel, configure_logging, get_logger, set_log_level
from .plotting import sample_2d, value_range

__version__ = "0.1.0"
__all__ = [
  "Scalar", "Vector", "Radians", "Degrees", "Point3", "Plane3", "Axis", "Intersection3",
  "determinant", "cross", "units",
  "Expression", "Node", "VariableNode", "ConstantNode", "BinaryOpNode", "NamedFunctionNode",
  "DerivableFunction", "define_function", "get_function", "sin", "cos", "logarithm", "ln",
  "AlgebraError", "BadDifferentiationError", "UnresolvedEvaluationError", "DimensionMismatchError",
  "LogLevel", "configure_logging", "get_logger", "set_log_level",
  "sample_2d", "value_range"
]
