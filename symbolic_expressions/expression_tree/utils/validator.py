from typing import List

from ..core.node import Tree
from ..core.traversal import PostOrderIterator
from ..expression import NodeType


class TreeValidator:

  @staticmethod
  def validate(tree: Tree) -> List[str]:
    """Return human-readable structural problems; an empty list means well formed"""
    problems: List[str] = []
    for node in PostOrderIterator(tree):
      data = node.data
      if data.node_type is NodeType.OPERATOR:
        count = node.operand_count
        if count == 0:
          problems.append(f"Operator '{data.name}' has no operands")
        elif data.arity is not None and count != data.arity:
          problems.append(f"Operator '{data.name}' expects {data.arity} operand(s), has {count}")
      elif node.child_count:
        problems.append(
          f"{data.node_type.name.capitalize()} '{data}' carries {node.child_count} ignored child(ren)")
    return problems

  @staticmethod
  def is_valid_tree(tree: Tree) -> bool:
    return not TreeValidator.validate(tree)


def is_valid_tree(tree: Tree) -> bool:
  return TreeValidator.is_valid_tree(tree)
