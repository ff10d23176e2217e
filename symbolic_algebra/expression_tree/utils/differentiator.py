from ...exceptions import BadDifferentiationError
from ..core.node import Node, VariableNode, ConstantNode, BinaryOpNode, NamedFunctionNode
from ..core.operators import OpType
from .simplifier import ExpressionSimplifier


class ExpressionDifferentiator:
  """Structural differentiation of expression trees

  Every intermediate derivative is simplified before it is returned. Known
  limitations kept as they are:

  - division uses the product rule formula, l'*r + r'*l
  - the logarithm derivative is (1 / argument) times the derivative of the base
  - exponentiation uses the constant-exponent power rule only
  """

  @staticmethod
  def differentiate(node: Node, wrt: Node) -> Node:
    if not isinstance(wrt, VariableNode):
      raise BadDifferentiationError(
        f"Can only differentiate with respect to a variable, got {wrt!r}",
        details={'wrt': repr(wrt)}
      )
    return ExpressionDifferentiator._differentiate(node, wrt.name)

  @staticmethod
  def _differentiate(node: Node, name: str) -> Node:
    d = ExpressionDifferentiator._differentiate

    if isinstance(node, BinaryOpNode):
      left, right = node.left, node.right
      op_type = node.op_type

      if op_type == OpType.ADD:
        result = d(left, name) + d(right, name)
      elif op_type == OpType.SUB:
        result = d(left, name) - d(right, name)
      elif op_type in (OpType.MUL, OpType.DIV):
        result = d(left, name) * right.copy() + d(right, name) * left.copy()
      elif op_type == OpType.POW:
        result = right.copy() * (left.copy() ^ (right.copy() - ConstantNode(1.0))) * d(left, name)
      else:
        result = (ConstantNode(1.0) / right.copy()) * d(left, name)

    elif isinstance(node, NamedFunctionNode):
      # Chain rule: outer derivative at the operand times the operand's derivative
      result = node.function.derivative(node.operand.copy()) * d(node.operand, name)

    elif isinstance(node, VariableNode):
      result = ConstantNode(1.0 if node.name == name else 0.0)

    elif isinstance(node, ConstantNode):
      result = ConstantNode(0.0)

    else:
      raise TypeError(f"Cannot differentiate {type(node).__name__}")

    return ExpressionSimplifier.simplify(result)
