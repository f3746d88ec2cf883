from typing import List, Tuple

from ..core.node import Tree
from ..expression import Constant, NodeType
from ...errors import MalformedTreeError
from ...logging_system import log_debug


class ExpressionSimplifier:
  """Constant folding for expression trees"""

  @staticmethod
  def reduce(root: Tree) -> int:
    """
    Fold every variable-free operator subtree into a single Constant, in place.

    Folding is bottom-up, so an operator folds as soon as all of its (already
    reduced) operands are constants; any Variable below an operator keeps that
    operator and all of its ancestors unfolded. Rewrites go through
    copy-on-write, so other handles sharing a rewritten node are unaffected.
    The walk uses an explicit stack rather than recursion.

    Returns:
        Number of operator nodes folded into constants
    """
    folded = 0
    stack: List[Tuple[Tree, bool]] = [(root, False)]
    while stack:
      tree, expanded = stack.pop()
      data = tree.node.data
      if data.node_type is not NodeType.OPERATOR:
        continue

      if not expanded:
        if tree.node.operand_count == 0:
          raise MalformedTreeError(f"Operator '{data.name}' found no operands")
        # Own the parent before its child handles get rebound by folding.
        node = tree._make_mut()
        stack.append((tree, True))
        stack.extend((link, False) for link in reversed(node._links))
        continue

      operands = [link.node.data for link in tree.node._links]
      if all(operand.node_type is NodeType.CONSTANT for operand in operands):
        value = data.apply([operand.value for operand in operands])
        tree._replace(Constant(value))
        folded += 1

    return folded


def reduce_tree(root: Tree) -> None:
  """Fold constant-only subtrees of ``root`` in place"""
  folded = ExpressionSimplifier.reduce(root)
  log_debug(f"Reduced tree: folded {folded} operator node(s)")
