"""Utilities for expression trees."""

from .simplifier import ExpressionSimplifier, reduce_tree
from .sympy_utils import to_sympy, latex_representation
from .tree_utils import (
    get_all_nodes, tree_size, calculate_tree_depth,
    get_variable_usage_counts, get_variables, is_constant_tree,
    tree_to_string, trees_equal, clone_tree
)
from .validator import TreeValidator, is_valid_tree

__all__ = [
    'ExpressionSimplifier', 'reduce_tree',
    'to_sympy', 'latex_representation',
    'get_all_nodes', 'tree_size', 'calculate_tree_depth',
    'get_variable_usage_counts', 'get_variables', 'is_constant_tree',
    'tree_to_string', 'trees_equal', 'clone_tree',
    'TreeValidator', 'is_valid_tree'
]
