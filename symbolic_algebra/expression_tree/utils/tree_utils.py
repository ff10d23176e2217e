"""
Tree Utility Functions

Traversal and inspection helpers for expression trees.
"""

from typing import Callable, Dict, List, Set

from ..core.node import Node, BinaryOpNode, NamedFunctionNode, ConstantNode, VariableNode
from ...linear_algebra.scalar import Scalar


def children(node: Node) -> List[Node]:
    """Direct sub-expressions of a node"""
    if isinstance(node, BinaryOpNode):
        return [node.left, node.right]
    elif isinstance(node, NamedFunctionNode):
        return [node.operand]
    return []


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        nodes_to_visit = [node]
        all_nodes = []
        while nodes_to_visit:
            current_node = nodes_to_visit.pop(0)
            all_nodes.append(current_node)
            nodes_to_visit.extend(children(current_node))
        return all_nodes
    elif traversal_order == 'depth_first':
        nodes = [node]
        for child in children(node):
            nodes.extend(get_all_nodes(child, 'depth_first'))
        return nodes
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    return 1 + max((calculate_tree_depth(child) for child in children(node)), default=0)


def find_nodes_by_type(node: Node, node_type: type) -> List[Node]:
    """All nodes of a specific type, depth first"""
    return [n for n in get_all_nodes(node, 'depth_first') if isinstance(n, node_type)]


def get_variables(node: Node) -> Set[str]:
    """Names of the variables occurring in the tree"""
    return {n.name for n in find_nodes_by_type(node, VariableNode)}


def get_named_functions(node: Node) -> Set[str]:
    """Names of the derivable functions applied in the tree"""
    return {n.function.name for n in find_nodes_by_type(node, NamedFunctionNode)}


def map_leaves(node: Node, transform: Callable[[Node], Node]) -> Node:
    """
    Rebuild the tree, replacing every leaf with transform(leaf).

    Args:
        node: Root node of the tree
        transform: Called on each VariableNode and ConstantNode

    Returns:
        A new tree; the input is left untouched
    """
    if isinstance(node, BinaryOpNode):
        return BinaryOpNode(node.operator, map_leaves(node.left, transform),
                            map_leaves(node.right, transform))
    elif isinstance(node, NamedFunctionNode):
        return NamedFunctionNode(node.function, map_leaves(node.operand, transform))
    return transform(node)


def substitute_variables(node: Node, bindings: Dict[str, Scalar]) -> Node:
    """Replace bound variables with constants, without simplifying"""
    def _substitute(leaf: Node) -> Node:
        if isinstance(leaf, VariableNode) and leaf.name in bindings:
            return ConstantNode(bindings[leaf.name])
        return leaf.copy()

    return map_leaves(node, _substitute)
