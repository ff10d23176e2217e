import numpy as np
from enum import IntEnum

from ...linear_algebra.scalar import Scalar

# Tolerance for the zero / one identity rules and for recognising Euler's number
ZERO_TOLERANCE: float = float(np.finfo(np.float64).eps)


class NodeType(IntEnum):
  VARIABLE = 0
  CONSTANT = 1
  BINARY_OP = 2
  NAMED_FUNCTION = 3


class OpType(IntEnum):
  ADD = 0
  SUB = 1
  MUL = 2
  DIV = 3
  POW = 4
  LOG = 5


BINARY_OP_MAP = {
  '+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL,
  '/': OpType.DIV, '^': OpType.POW, 'log': OpType.LOG
}

# Operators whose structural equality ignores operand order
COMMUTATIVE_OPS = frozenset({OpType.ADD, OpType.MUL})


def is_zero(value: Scalar) -> bool:
  return value.is_close(0.0, ZERO_TOLERANCE)


def is_one(value: Scalar) -> bool:
  return value.is_close(1.0, ZERO_TOLERANCE)


def is_euler(value: Scalar) -> bool:
  return value.is_close(np.e, ZERO_TOLERANCE)


def fold_binary_op(left: Scalar, right: Scalar, operator: str) -> Scalar:
  """Apply operator to two constants"""
  op_type = BINARY_OP_MAP[operator]
  if op_type == OpType.ADD:
    return left + right
  elif op_type == OpType.SUB:
    return left - right
  elif op_type == OpType.MUL:
    return left * right
  elif op_type == OpType.DIV:
    return left / right
  elif op_type == OpType.POW:
    return left.power(right)
  # log: left is the base, right the argument
  return right.log_base(left)
