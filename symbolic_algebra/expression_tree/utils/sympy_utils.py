import sympy as sp

from ..core.node import Node


def to_sympy(node: Node) -> sp.Expr:
  """SymPy expression equivalent to node"""
  return node.to_sympy()


def latex_representation(node: Node) -> str:
  """LaTeX rendering of node via SymPy"""
  return sp.latex(node.to_sympy())


def are_equivalent(first: Node, second: Node) -> bool:
  """True when SymPy can show first - second simplifies to zero"""
  difference = sp.simplify(sp.nsimplify(first.to_sympy() - second.to_sympy()))
  return difference == 0
