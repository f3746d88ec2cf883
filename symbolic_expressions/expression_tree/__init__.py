"""Expression Tree Module

Shared, copy-on-write expression trees with post-order traversal,
evaluation and constant folding.
"""

from .expression import NodeType, Operator, Variable, Constant, Expression
from .core import (
    Node, Tree, data, children,
    PostOrderIterator, post_order,
    accumulate, EVALUATION_STRATEGIES,
    BUILTIN_OPERATORS, get_operator
)
from .utils import (
    ExpressionSimplifier, reduce_tree, TreeValidator, is_valid_tree,
    to_sympy, latex_representation
)

__all__ = [
    "NodeType", "Operator", "Variable", "Constant", "Expression",
    "Node", "Tree", "data", "children",
    "PostOrderIterator", "post_order",
    "accumulate", "EVALUATION_STRATEGIES",
    "BUILTIN_OPERATORS", "get_operator",
    "ExpressionSimplifier", "reduce_tree", "TreeValidator", "is_valid_tree",
    "to_sympy", "latex_representation"
]
