"""
Tree Utility Functions

Traversal and analysis helpers for expression trees. Everything here is built
on PostOrderIterator (or an explicit queue) so deep trees never hit the
interpreter's recursion limit.
"""

import copy
from collections import deque
from typing import Dict, List, Set

from ..core.node import Node, Tree
from ..core.traversal import PostOrderIterator
from ..expression import NodeType, values_equal


def get_all_nodes(tree: Tree, traversal_order: str = 'post_order') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        tree: Root of the tree
        traversal_order: 'post_order' (default) or 'breadth_first'

    Returns:
        List of all nodes, one entry per occurrence of a shared subtree
    """
    if traversal_order == 'post_order':
        return list(PostOrderIterator(tree))
    elif traversal_order == 'breadth_first':
        return _breadth_first_traversal(tree.node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(root: Node) -> List[Node]:
    nodes_to_visit = deque([root])
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.popleft()
        all_nodes.append(current_node)
        for i in range(current_node.operand_count):
            nodes_to_visit.append(current_node.operand(i))

    return all_nodes


def tree_size(tree: Tree) -> int:
    """Number of nodes visited by a post-order walk"""
    return sum(1 for _ in PostOrderIterator(tree))


def calculate_tree_depth(tree: Tree) -> int:
    """
    Calculate the maximum depth of the tree.

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    depths: List[int] = []
    for node in PostOrderIterator(tree):
        count = node.operand_count
        if count == 0:
            depths.append(1)
            continue
        split = len(depths) - count
        deepest = max(depths[split:])
        del depths[split:]
        depths.append(deepest + 1)
    return depths.pop()


def get_variable_usage_counts(tree: Tree) -> Dict[str, int]:
    """Count how often each variable name occurs in the tree"""
    usage_counts: Dict[str, int] = {}
    for node in PostOrderIterator(tree):
        if node.data.node_type is NodeType.VARIABLE:
            name = node.data.name
            usage_counts[name] = usage_counts.get(name, 0) + 1
    return usage_counts


def get_variables(tree: Tree) -> Set[str]:
    """Names that must be bound before the tree can be accumulated"""
    return set(get_variable_usage_counts(tree))


def is_constant_tree(tree: Tree) -> bool:
    """True when no Variable occurs anywhere in the tree"""
    return not any(node.data.node_type is NodeType.VARIABLE for node in PostOrderIterator(tree))


def tree_to_string(tree: Tree) -> str:
    """Render the tree: infix for operators with a symbol, ``name(a, b)`` otherwise"""
    parts: List[str] = []
    for node in PostOrderIterator(tree):
        data = node.data
        count = node.operand_count
        if data.node_type is not NodeType.OPERATOR:
            parts.append(str(data))
            continue
        if count == 0:
            parts.append(f"{data.name}()")
            continue
        split = len(parts) - count
        args = parts[split:]
        del parts[split:]
        if data.symbol is not None and count > 1:
            parts.append("(" + f" {data.symbol} ".join(args) + ")")
        else:
            parts.append(f"{data.name}({', '.join(args)})")
    return parts.pop()


def trees_equal(left: Tree, right: Tree) -> bool:
    """Structural and value equality of two trees (numpy-aware)"""
    if left.shares_node_with(right):
        return True
    left_nodes = PostOrderIterator(left)
    right_nodes = PostOrderIterator(right)
    sentinel = object()
    while True:
        a = next(left_nodes, sentinel)
        b = next(right_nodes, sentinel)
        if a is sentinel or b is sentinel:
            return a is b
        if a.operand_count != b.operand_count:
            return False
        if a.data.node_type is not b.data.node_type:
            return False
        if a.data.node_type is NodeType.CONSTANT:
            if not values_equal(a.data.value, b.data.value):
                return False
        elif a.data != b.data:
            return False


def clone_tree(tree: Tree) -> Tree:
    """Deep copy of the whole tree; the copy shares no node with the original"""
    return copy.deepcopy(tree)
