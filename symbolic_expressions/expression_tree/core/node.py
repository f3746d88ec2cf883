import copy
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from ..expression import EXPRESSION_TYPES, Expression, NodeType
from ...errors import MalformedTreeError
from ...logging_system import log_debug, log_warning


class Node:
  """Shared backing store of one tree vertex.

  A Node is only ever mutated through a Tree handle that owns it exclusively.
  ``_owners`` counts the live Tree handles bound to this node, including the
  handles a parent node keeps for its children.
  """

  __slots__ = ('_data', '_links', '_owners')

  def __init__(self, data: Expression, links: Optional[List['Tree']] = None):
    self._data = data
    self._links = links
    self._owners = 0

  @property
  def data(self) -> Expression:
    return self._data

  @property
  def children(self) -> Optional[Tuple['Node', ...]]:
    if self._links is None:
      return None
    return tuple(link._node for link in self._links)

  @property
  def owners(self) -> int:
    return self._owners

  @property
  def child_count(self) -> int:
    return 0 if self._links is None else len(self._links)

  @property
  def operand_count(self) -> int:
    """Number of children consulted by traversal and evaluation.

    Children linked onto Variable/Constant nodes are inert and not counted.
    """
    if self._links is None or self._data.node_type is not NodeType.OPERATOR:
      return 0
    return len(self._links)

  def operand(self, index: int) -> 'Node':
    return self._links[index]._node

  def clone(self) -> 'Node':
    """Shallow copy: same payload, children shared with the original"""
    links = None if self._links is None else [link.share() for link in self._links]
    return Node(self._data, links)

  def __repr__(self) -> str:
    return f"Node({self._data!r}, children={self.child_count}, owners={self._owners})"


class Tree:
  """Shared-ownership handle to a Node with copy-on-write mutation.

  Several handles (and several parents) may point at one Node. ``link`` and
  ``reduce`` mutate in place when this handle is the only owner and clone the
  node first otherwise, so no other handle ever observes the change.
  """

  __slots__ = ('_node',)

  def __init__(self, data: Expression):
    if not isinstance(data, EXPRESSION_TYPES):
      raise TypeError(f"Tree data must be an Operator, Variable or Constant, got {type(data).__name__}")
    self._bind(Node(data))

  @classmethod
  def _from_node(cls, node: Node) -> 'Tree':
    tree = cls.__new__(cls)
    tree._bind(node)
    return tree

  def _bind(self, node: Node):
    node._owners += 1
    self._node = node

  def __del__(self):
    node = getattr(self, '_node', None)
    if node is not None:
      node._owners -= 1

  def share(self) -> 'Tree':
    """Return a new handle owning the same node"""
    return Tree._from_node(self._node)

  def __copy__(self) -> 'Tree':
    return self.share()

  def __deepcopy__(self, memo) -> 'Tree':
    # Iterative so that deep trees do not hit the recursion limit; nodes
    # shared inside the tree stay shared inside the copy.
    copies = {}
    stack = [(self._node, False)]
    while stack:
      node, expanded = stack.pop()
      if id(node) in copies:
        continue
      if node._links and not expanded:
        stack.append((node, True))
        stack.extend((link._node, False) for link in reversed(node._links))
        continue
      links = None
      if node._links is not None:
        links = [Tree._from_node(copies[id(link._node)]) for link in node._links]
      copies[id(node)] = Node(copy.deepcopy(node._data, memo), links)
    return Tree._from_node(copies[id(self._node)])

  @property
  def node(self) -> Node:
    """Read-only view of the backing node"""
    return self._node

  def is_unique(self) -> bool:
    return self._node._owners == 1

  def shares_node_with(self, other: 'Tree') -> bool:
    return self._node is other._node

  def _make_mut(self) -> Node:
    node = self._node
    if node._owners > 1:
      clone = node.clone()
      node._owners -= 1
      clone._owners += 1
      self._node = clone
      log_debug(f"Copy-on-write clone of {node._data} node ({node._owners} other owner(s))")
    return self._node

  def _replace(self, data: Expression):
    """Rewrite this vertex to ``data`` with no children (copy-on-write)"""
    node = self._make_mut()
    node._data = data
    node._links = None

  def link(self, children: Iterable['Tree']):
    """Replace this node's children (copy-on-write)"""
    children = list(children)
    for child in children:
      if not isinstance(child, Tree):
        raise TypeError(f"Children must be Tree handles, got {type(child).__name__}")

    data = self._node._data
    if data.node_type is NodeType.OPERATOR:
      if not children:
        raise MalformedTreeError(f"Operator '{data.name}' requires at least one operand")
      if data.arity is not None and len(children) != data.arity:
        raise MalformedTreeError(
          f"Operator '{data.name}' expects {data.arity} operand(s), got {len(children)}")
    else:
      log_warning(f"Linking {len(children)} child(ren) onto {data.node_type.name.lower()} "
                  f"'{data}': they will be ignored by evaluation and reduction")

    links = [child.share() for child in children]
    self._make_mut()._links = links

  def data(self) -> Expression:
    return self._node._data

  def children(self) -> Optional[Tuple['Tree', ...]]:
    links = self._node._links
    if links is None:
      return None
    return tuple(link.share() for link in links)

  def post_iter(self):
    from .traversal import PostOrderIterator
    return PostOrderIterator(self)

  def accumulate(self, variables: Optional[Mapping[str, Any]] = None, strategy: str = 'iterative') -> Any:
    from .evaluator import accumulate
    return accumulate(self, variables, strategy=strategy)

  def reduce(self):
    from ..utils.simplifier import reduce_tree
    reduce_tree(self)

  def to_string(self) -> str:
    from ..utils.tree_utils import tree_to_string
    return tree_to_string(self)

  def __repr__(self) -> str:
    return f"Tree({self.to_string()})"


def data(node: Tree) -> Expression:
  return node.data()


def children(node: Tree) -> Optional[Tuple[Tree, ...]]:
  return node.children()
