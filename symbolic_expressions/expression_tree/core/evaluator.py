from typing import Any, List, Mapping, Optional

from ..expression import NodeType
from .node import Node, Tree
from .traversal import PostOrderIterator
from ...errors import MalformedTreeError, VarNotFound
from ...logging_system import log_debug

EVALUATION_STRATEGIES = ('iterative', 'recursive')


def accumulate(root: Tree, bindings: Optional[Mapping[str, Any]] = None, strategy: str = 'iterative') -> Any:
  """
  Evaluate the tree rooted at ``root``.

  Args:
      root: Tree handle to evaluate
      bindings: Mapping from variable name to value (``None`` means no bindings)
      strategy: 'iterative' (operand stack over a post-order walk, no recursion
          limit) or 'recursive' (plain recursive descent); both agree on every input

  Returns:
      The value of the root node

  Raises:
      VarNotFound: a Variable node's name is missing from ``bindings``
      MalformedTreeError: an Operator node has no operands
  """
  if bindings is None:
    bindings = {}
  if strategy == 'iterative':
    result = _accumulate_iterative(root.node, bindings)
  elif strategy == 'recursive':
    result = _accumulate_recursive(root.node, bindings)
  else:
    raise ValueError(f"Unknown evaluation strategy '{strategy}', expected one of {EVALUATION_STRATEGIES}")
  log_debug(f"Accumulated tree ({strategy}) with {len(bindings)} binding(s)")
  return result


def _lookup(bindings: Mapping[str, Any], name: str) -> Any:
  try:
    return bindings[name]
  except KeyError:
    raise VarNotFound(name) from None


def _accumulate_iterative(root: Node, bindings: Mapping[str, Any]) -> Any:
  operands: List[Any] = []
  for node in PostOrderIterator(root):
    data = node.data
    if data.node_type is NodeType.OPERATOR:
      count = node.operand_count
      if count == 0:
        raise MalformedTreeError(f"Operator '{data.name}' found no operands")
      # The last `count` values are this node's children, already in link order.
      split = len(operands) - count
      args = operands[split:]
      del operands[split:]
      operands.append(data.apply(args))
    elif data.node_type is NodeType.VARIABLE:
      operands.append(_lookup(bindings, data.name))
    else:
      operands.append(data.value)
  return operands.pop()


def _accumulate_recursive(node: Node, bindings: Mapping[str, Any]) -> Any:
  data = node.data
  if data.node_type is NodeType.OPERATOR:
    count = node.operand_count
    if count == 0:
      raise MalformedTreeError(f"Operator '{data.name}' found no operands")
    args = [_accumulate_recursive(node.operand(i), bindings) for i in range(count)]
    return data.apply(args)
  if data.node_type is NodeType.VARIABLE:
    return _lookup(bindings, data.name)
  return data.value
