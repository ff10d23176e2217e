"""
Derivable functions.

A DerivableFunction is a named transcendental function that can sit in an
expression tree. It carries its own derivative rule: a callable mapping the
function's operand to the derivative of the function with respect to that
operand. The chain rule multiplies by the operand's derivative, so rules only
describe the outer derivative.
"""

import numpy as np
import sympy as sp
from typing import Callable, Dict, Optional

from .node import Node, NamedFunctionNode, BinaryOpNode, ConstantNode, as_node

DerivativeRule = Callable[[Node], Node]


class DerivableFunction:
  """Descriptor of a named function; compared and hashed by name only"""

  __slots__ = ('name', 'derivative_rule', 'sympy_function')

  def __init__(self, name: str, derivative_rule: DerivativeRule,
               sympy_function: Optional[Callable] = None):
    if not name:
      raise ValueError("Function name must not be empty")
    self.name = name
    self.derivative_rule = derivative_rule
    self.sympy_function = sympy_function

  def __call__(self, operand) -> NamedFunctionNode:
    node = as_node(operand)
    if node is None:
      raise TypeError(f"Cannot apply {self.name} to {operand!r}")
    return NamedFunctionNode(self, node)

  def derivative(self, operand: Node) -> Node:
    """Outer derivative evaluated at operand"""
    return self.derivative_rule(operand)

  def to_sympy(self, operand: sp.Expr) -> sp.Expr:
    if self.sympy_function is None:
      return sp.Function(self.name)(operand)
    return self.sympy_function(operand)

  def __eq__(self, other) -> bool:
    if not isinstance(other, DerivableFunction):
      return NotImplemented
    return self.name == other.name

  def __hash__(self) -> int:
    return hash(('DerivableFunction', self.name))

  def __repr__(self) -> str:
    return f"DerivableFunction({self.name!r})"


class FunctionRegistry:
  """Lookup of derivable functions by name"""

  def __init__(self):
    self._functions: Dict[str, DerivableFunction] = {}

  def register(self, function: DerivableFunction) -> DerivableFunction:
    if function.name in self._functions:
      raise ValueError(f"Function {function.name!r} is already registered")
    self._functions[function.name] = function
    return function

  def get(self, name: str) -> DerivableFunction:
    try:
      return self._functions[name]
    except KeyError:
      raise KeyError(f"Unknown function: {name!r}") from None

  def __contains__(self, name: str) -> bool:
    return name in self._functions

  def names(self):
    return sorted(self._functions)


_default_registry = FunctionRegistry()


def get_registry() -> FunctionRegistry:
  return _default_registry


def define_function(name: str, derivative_rule: DerivativeRule,
                    sympy_function: Optional[Callable] = None,
                    registry: Optional[FunctionRegistry] = None) -> DerivableFunction:
  """Create a derivable function and register it under its name"""
  registry = registry if registry is not None else _default_registry
  return registry.register(DerivableFunction(name, derivative_rule, sympy_function))


def get_function(name: str) -> DerivableFunction:
  return _default_registry.get(name)


# sin and cos refer to each other through their derivative rules

SINE = define_function('sin', lambda operand: COSINE(operand), sp.sin)
COSINE = define_function('cos', lambda operand: ConstantNode(-1.0) * SINE(operand), sp.cos)


def sin(operand) -> NamedFunctionNode:
  return SINE(operand)


def cos(operand) -> NamedFunctionNode:
  return COSINE(operand)


def logarithm(base, argument) -> BinaryOpNode:
  """log base `base` of `argument`"""
  base_node, argument_node = as_node(base), as_node(argument)
  if base_node is None or argument_node is None:
    raise TypeError("Logarithm operands must be expression nodes or numbers")
  return BinaryOpNode('log', base_node, argument_node)


def ln(argument) -> BinaryOpNode:
  return logarithm(ConstantNode(np.e), argument)
