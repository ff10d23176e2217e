from typing import Dict, Union

from ...exceptions import UnresolvedEvaluationError
from ...linear_algebra.scalar import Scalar
from ...logging_system import debug_enabled, log_debug, log_warning
from ..core.node import Node, ConstantNode
from .simplifier import ExpressionSimplifier
from .tree_utils import get_named_functions, get_variables, substitute_variables

Bindings = Dict[str, Union[Scalar, float]]


def with_values(node: Node, bindings: Bindings) -> Node:
  """Substitute bound variables with constants and simplify

  Unbound variables are left in place. When every variable is bound and no
  named function remains, the result is a single ConstantNode.
  """
  scalars = {name: Scalar(value) for name, value in bindings.items()}
  return ExpressionSimplifier.simplify(substitute_variables(node, scalars))


def evaluate(node: Node, bindings: Bindings) -> Scalar:
  """Numeric value of node under bindings"""
  result = with_values(node, bindings)
  if isinstance(result, ConstantNode):
    if debug_enabled():
      log_debug(f"{node.to_string()} with {dict(bindings)} = {result.to_string()}")
    return result.value

  free_variables = sorted(get_variables(result))
  named_functions = sorted(get_named_functions(result))
  message = (f"{node.to_string()} did not reduce to a constant: "
             f"free variables {free_variables}, named functions {named_functions}")
  log_warning(message)
  raise UnresolvedEvaluationError(message, details={
    'free_variables': free_variables,
    'named_functions': named_functions,
    'result': result.to_string(),
  })
