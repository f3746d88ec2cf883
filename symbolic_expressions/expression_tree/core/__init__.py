"""Core expression tree components."""

from .node import Node, Tree, data, children
from .traversal import PostOrderIterator, post_order
from .evaluator import accumulate, EVALUATION_STRATEGIES
from .operators import (
    BUILTIN_OPERATORS, get_operator, protected_divide, protected_log,
    ADD, SUBTRACT, MULTIPLY, DIVIDE, POWER, NEGATE, SIN, COS, EXP, LOG, SQRT, ABS
)

__all__ = [
    'Node', 'Tree', 'data', 'children',
    'PostOrderIterator', 'post_order',
    'accumulate', 'EVALUATION_STRATEGIES',
    'BUILTIN_OPERATORS', 'get_operator', 'protected_divide', 'protected_log',
    'ADD', 'SUBTRACT', 'MULTIPLY', 'DIVIDE', 'POWER', 'NEGATE',
    'SIN', 'COS', 'EXP', 'LOG', 'SQRT', 'ABS'
]
