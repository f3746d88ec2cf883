from typing import Iterator, List, Union

from .node import Node, Tree


class PostOrderIterator:
  """Iterates a tree in post-order (children left to right, then the parent).

  The walk keeps an explicit path of ancestors and, in lockstep, the index of
  the next child to visit for each of them, so its depth is bounded by memory
  rather than by the interpreter's recursion limit. A subtree shared by
  several parents is visited once per occurrence.

  The iterator holds plain references into the tree: the tree must not be
  mutated while an iterator over it is alive. Each instance is single-use;
  create a new one to traverse again.
  """

  __slots__ = ('_path', '_positions')

  def __init__(self, root: Union[Tree, Node]):
    node = root.node if isinstance(root, Tree) else root
    self._path: List[Node] = [node]
    self._positions: List[int] = [0]

  def __iter__(self) -> 'PostOrderIterator':
    return self

  def __next__(self) -> Node:
    path = self._path
    positions = self._positions
    while path:
      top = path[-1]
      index = positions[-1]
      count = top.operand_count
      if index < count:
        path.append(top.operand(index))
        positions.append(0)
        continue
      if index == count:
        # All operands done: visit the top now, pop it on the next call.
        positions[-1] += 1
        return top
      path.pop()
      positions.pop()
      if positions:
        positions[-1] += 1
    raise StopIteration


def post_order(root: Tree) -> Iterator[Tree]:
  """Lazy post-order traversal yielding a handle for every visited node"""
  for node in PostOrderIterator(root):
    yield Tree._from_node(node)
