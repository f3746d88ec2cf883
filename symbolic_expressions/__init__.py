"""Symbolic Expressions Package

Immutable, structurally shared expression trees of Operator, Variable and
Constant nodes, with a recursion-free post-order traversal, an evaluator and
a constant-folding reducer.
"""

from .expression_tree import (
  NodeType, Operator, Variable, Constant, Expression,
  Node, Tree, data, children, PostOrderIterator, post_order,
  accumulate, EVALUATION_STRATEGIES, BUILTIN_OPERATORS, get_operator,
  ExpressionSimplifier, reduce_tree, TreeValidator, is_valid_tree,
  to_sympy, latex_representation
)
from .expression_tree.utils.tree_utils import (
  get_all_nodes, tree_size, calculate_tree_depth, get_variables,
  get_variable_usage_counts, is_constant_tree, tree_to_string,
  trees_equal, clone_tree
)
from .builder import TreeBuilder, make_constant, make_variable, make_operator
from .errors import TreeError, TreeErrorKind, VarNotFound, TreeNotInScope, MalformedTreeError
from .logging_system import LogLevel, configure_logging, set_log_level, get_logger

reduce = reduce_tree

__version__ = "0.1.0"
__all__ = [
  "NodeType", "Operator", "Variable", "Constant", "Expression",
  "Node", "Tree", "data", "children", "PostOrderIterator", "post_order",
  "accumulate", "reduce", "reduce_tree", "EVALUATION_STRATEGIES",
  "BUILTIN_OPERATORS", "get_operator",
  "ExpressionSimplifier", "TreeValidator", "is_valid_tree",
  "to_sympy", "latex_representation",
  "get_all_nodes", "tree_size", "calculate_tree_depth", "get_variables",
  "get_variable_usage_counts", "is_constant_tree", "tree_to_string",
  "trees_equal", "clone_tree",
  "TreeBuilder", "make_constant", "make_variable", "make_operator",
  "TreeError", "TreeErrorKind", "VarNotFound", "TreeNotInScope", "MalformedTreeError",
  "LogLevel", "configure_logging", "set_log_level", "get_logger"
]
