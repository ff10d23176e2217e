"""Utilities for expression trees."""

from .simplifier import ExpressionSimplifier
from .differentiator import ExpressionDifferentiator
from .evaluation import with_values, evaluate
from .sympy_utils import to_sympy, latex_representation, are_equivalent
from .tree_utils import (
    children, get_all_nodes, calculate_tree_depth, find_nodes_by_type,
    get_variables, get_named_functions, map_leaves, substitute_variables
)

__all__ = [
    'ExpressionSimplifier', 'ExpressionDifferentiator',
    'with_values', 'evaluate',
    'to_sympy', 'latex_representation', 'are_equivalent',
    'children', 'get_all_nodes', 'calculate_tree_depth', 'find_nodes_by_type',
    'get_variables', 'get_named_functions', 'map_leaves', 'substitute_variables'
]
