import sympy as sp
from typing import List

from ..core.node import Tree
from ..core.traversal import PostOrderIterator
from ..expression import NodeType
from ...errors import MalformedTreeError


def to_sympy(tree: Tree) -> sp.Expr:
  """Convert a tree to a SymPy expression.

  Variables become symbols of the same name. Operators use their
  ``sympy_function`` when they have one and an undefined SymPy function named
  after the operator otherwise.
  """
  stack: List[sp.Expr] = []
  for node in PostOrderIterator(tree):
    data = node.data
    if data.node_type is NodeType.VARIABLE:
      stack.append(sp.Symbol(data.name))
    elif data.node_type is NodeType.CONSTANT:
      stack.append(sp.sympify(data.value))
    else:
      count = node.operand_count
      if count == 0:
        raise MalformedTreeError(f"Operator '{data.name}' found no operands")
      split = len(stack) - count
      args = stack[split:]
      del stack[split:]
      if data.sympy_function is not None:
        stack.append(data.sympy_function(args))
      else:
        stack.append(sp.Function(data.name)(*args))
  return stack.pop()


def latex_representation(tree: Tree) -> str:
  """Get LaTeX representation of the tree"""
  return sp.latex(to_sympy(tree))
