import math

import sympy as sp

from symbolic_algebra.expression_tree import (
    VariableNode, are_equivalent, latex_representation, ln, sin, to_sympy
)

x = VariableNode('x')
y = VariableNode('y')
X = sp.Symbol('x')


def test_conversion():
    assert to_sympy(x + 2) == X + sp.Float(2.0)
    assert to_sympy(x / y) == X / sp.Symbol('y')


def test_logarithm_conversion():
    value = sp.lambdify(X, to_sympy(ln(x)), "math")(math.e)
    assert abs(float(value) - 1.0) < 1e-9


def test_latex():
    assert latex_representation(sin(x)) == sp.latex(sp.sin(X))


def test_equivalence():
    assert are_equivalent((x + 1) * (x + 1), (x ^ 2) + 2 * x + 1)
    assert are_equivalent(x + y, y + x)
    assert not are_equivalent(x + 1, x + 2)
