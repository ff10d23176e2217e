from ..core.node import Node, VariableNode, ConstantNode, BinaryOpNode, NamedFunctionNode
from ..core.operators import OpType, fold_binary_op, is_zero, is_one


class ExpressionSimplifier:
  """Bottom-up rewrite of an expression tree into a reduced equivalent

  Children are simplified first, then the rules for the node's own operator
  are tried in order and the first match wins. This is a single pass, not a
  fixed point: callers that need further reduction call simplify again.
  """

  @staticmethod
  def simplify(node: Node) -> Node:
    if isinstance(node, BinaryOpNode):
      left = ExpressionSimplifier.simplify(node.left)
      right = ExpressionSimplifier.simplify(node.right)
      return ExpressionSimplifier._apply_binary_rules(node.operator, left, right)

    elif isinstance(node, NamedFunctionNode):
      return NamedFunctionNode(node.function, ExpressionSimplifier.simplify(node.operand))

    elif isinstance(node, (VariableNode, ConstantNode)):
      return node.copy()

    raise TypeError(f"Cannot simplify {type(node).__name__}")

  @staticmethod
  def _apply_binary_rules(operator: str, left: Node, right: Node) -> Node:
    node = BinaryOpNode(operator, left, right)
    op_type = node.op_type
    left_value = left.value if isinstance(left, ConstantNode) else None
    right_value = right.value if isinstance(right, ConstantNode) else None

    if left_value is not None and right_value is not None:
      return ConstantNode(fold_binary_op(left_value, right_value, operator))

    if op_type == OpType.ADD:
      if right_value is not None and is_zero(right_value):
        return left  # x + 0 = x
      if left_value is not None and is_zero(left_value):
        return right  # 0 + x = x

    elif op_type == OpType.SUB:
      if right_value is not None and is_zero(right_value):
        return left  # x - 0 = x

    elif op_type == OpType.MUL:
      if (left_value is not None and is_zero(left_value)) or \
         (right_value is not None and is_zero(right_value)):
        return ConstantNode(0.0)  # x * 0 = 0
      if right_value is not None and is_one(right_value):
        return left  # x * 1 = x
      if left_value is not None and is_one(left_value):
        return right  # 1 * x = x

    elif op_type == OpType.DIV:
      if right_value is not None and is_one(right_value):
        return left  # x / 1 = x

    elif op_type == OpType.POW:
      if left_value is not None and is_one(left_value):
        return ConstantNode(1.0)  # 1 ^ x = 1
      if right_value is not None and is_one(right_value):
        return left  # x ^ 1 = x
      # 0 ^ x is not guarded against x <= 0
      if left_value is not None and is_zero(left_value):
        return ConstantNode(0.0)
      if right_value is not None and is_zero(right_value):
        return ConstantNode(1.0)  # x ^ 0 = 1

    return node
