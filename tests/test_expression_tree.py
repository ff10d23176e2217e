import numpy as np
import pytest

from symbolic_algebra.expression_tree import (
    BinaryOpNode, ConstantNode, Expression, VariableNode, cos, ln, logarithm, sin
)
from symbolic_algebra.expression_tree.utils.tree_utils import (
    calculate_tree_depth, get_all_nodes, get_named_functions, get_variables
)

x = VariableNode('x')
y = VariableNode('y')


def test_variable_names_are_single_characters():
    with pytest.raises(ValueError):
        VariableNode('xy')
    with pytest.raises(ValueError):
        VariableNode('')


def test_unknown_operator():
    with pytest.raises(ValueError):
        BinaryOpNode('%', x, y)


def test_operator_construction():
    assert (x + 2) == BinaryOpNode('+', x, ConstantNode(2.0))
    assert (2 - x) == BinaryOpNode('-', ConstantNode(2.0), x)
    assert (x ** 2) == (x ^ 2)
    assert (x ^ 2) == BinaryOpNode('^', x, ConstantNode(2.0))
    assert (-x) == BinaryOpNode('*', ConstantNode(-1.0), x)


def test_numpy_scalar_on_the_left():
    product = np.float64(2.0) * x
    assert isinstance(product, BinaryOpNode)
    assert product.to_string() == "(2 * x)"


def test_formatting():
    assert ConstantNode(2.5).to_string() == "2.5"
    assert ConstantNode(4.0).to_string() == "4"
    assert (x + 2).to_string() == "(x + 2)"
    assert (x / y).to_string() == "(x / y)"
    assert (x ^ 2).to_string() == "(x ^ 2)"
    assert (-x).to_string() == "-(x)"
    assert (x * -1).to_string() == "-(x)"
    assert (-(x + y)).to_string() == "-((x + y))"
    assert sin(x).to_string() == "sin(x)"
    assert cos(x ^ 2).to_string() == "cos((x ^ 2))"
    assert ln(x).to_string() == "ln(x)"
    assert logarithm(2, x).to_string() == "log_(2)(x)"


def test_commutative_equality():
    assert x + y == y + x
    assert x * 2 == 2 * x
    assert hash(x + y) == hash(y + x)
    assert x - y != y - x
    assert x / y != y / x
    assert (x ^ y) != (y ^ x)


def test_equality_across_node_types():
    assert x == VariableNode('x')
    assert x != y
    assert ConstantNode(1) == ConstantNode(1.0)
    assert x != ConstantNode(1.0)
    assert sin(x) == sin(x)
    assert sin(x) != cos(x)
    assert sin(x) != sin(y)


def test_copy_is_deep():
    expression = (x + 2) * sin(y)
    duplicate = expression.copy()
    assert duplicate == expression
    assert duplicate is not expression
    assert duplicate.left is not expression.left
    assert duplicate.right.operand is not expression.right.operand


def test_size_and_depth():
    expression = (x + 2) * sin(y)
    assert expression.size() == 6
    assert calculate_tree_depth(expression) == 3
    assert x.size() == 1


def test_traversal():
    expression = (x + 2) * sin(y)
    breadth = [node.to_string() for node in get_all_nodes(expression)]
    depth = [node.to_string() for node in get_all_nodes(expression, 'depth_first')]
    assert breadth[:3] == ["((x + 2) * sin(y))", "(x + 2)", "sin(y)"]
    assert depth[:3] == ["((x + 2) * sin(y))", "(x + 2)", "x"]
    with pytest.raises(ValueError):
        get_all_nodes(expression, 'sideways')


def test_inspection():
    expression = sin(x) + cos(y) * x
    assert get_variables(expression) == {'x', 'y'}
    assert get_named_functions(expression) == {'sin', 'cos'}


class TestExpression:

    def test_operators_build_expressions(self):
        e = Expression.variable('x') ** 2 + 1
        assert isinstance(e, Expression)
        assert str(e) == "((x ^ 2) + 1)"
        assert repr(e) == "Expression(((x ^ 2) + 1))"

    def test_reflected_operators(self):
        e = 3 - Expression.variable('x')
        assert str(e) == "(3 - x)"
        assert str(2 ** Expression.variable('x')) == "(2 ^ x)"

    def test_equality_with_nodes(self):
        e = Expression.variable('x') + Expression.variable('y')
        assert e == y + x
        assert e == Expression(x + y)
        assert hash(e) == hash(x + y)

    def test_root_must_be_a_node(self):
        with pytest.raises(TypeError):
            Expression(3.0)

    def test_inspection(self):
        e = Expression(sin(x) * (y + 1))
        assert e.size() == 6
        assert e.depth() == 3
        assert e.variables() == {'x', 'y'}
        assert e.copy() == e

    def test_calculus_round_trip(self):
        e = Expression.variable('x') ** 2 + 1
        derivative = e.differentiate(Expression.variable('x'))
        assert str(derivative) == "(2 * x)"
        assert float(e.evaluate({'x': 3.0})) == 10.0
        assert str(e.with_values({'x': 2.0})) == "5"
        assert str(Expression((x + 0) * 1).simplified()) == "x"

    def test_latex(self):
        latex = Expression(sin(x)).to_latex()
        assert "\\sin" in latex
