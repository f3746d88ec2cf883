"""
Tree Construction

Factory functions used by front-ends to build expression trees, and a
TreeBuilder that bundles them with an operator registry, the set of observed
variable names and a scope of named trees.
"""

from typing import Any, Callable, Dict, Iterable, Optional, Set, Tuple, Union

from .errors import TreeNotInScope
from .expression_tree.core.node import Tree
from .expression_tree.core.operators import BUILTIN_OPERATORS, get_operator
from .expression_tree.expression import Constant, Operator, Variable, as_operator
from .logging_system import log_debug

OperatorLike = Union[Operator, Callable, str]


def make_constant(value: Any) -> Tree:
    """Create a Constant leaf"""
    return Tree(Constant(value))


def make_variable(name: str, observed: Optional[Set[str]] = None) -> Tree:
    """Create a Variable leaf, recording its name in ``observed`` when given"""
    tree = Tree(Variable(name))
    if observed is not None:
        observed.add(name)
    return tree


def make_operator(op: OperatorLike, children: Iterable[Tree]) -> Tree:
    """Create an Operator node and link ``children`` to it in order"""
    if isinstance(op, str):
        op = get_operator(op)
    tree = Tree(as_operator(op))
    tree.link(children)
    return tree


class TreeBuilder:
    """
    Construction context for a front-end.

    Leaves and operators created through the builder record every variable
    name they mention, and finished trees can be published under a name with
    ``define`` and fetched back with ``resolve``.
    """

    def __init__(self, variables: Optional[Set[str]] = None,
                 operators: Optional[Dict[str, Operator]] = None):
        self.variables: Set[str] = set() if variables is None else variables
        self.operators: Dict[str, Operator] = dict(BUILTIN_OPERATORS)
        if operators:
            self.operators.update(operators)
        self._scope: Dict[str, Tree] = {}

    def register_operator(self, op: OperatorLike, name: Optional[str] = None) -> Operator:
        """Make an operator available by name to ``operator()``"""
        op = as_operator(op)
        self.operators[name or op.name] = op
        return op

    def constant(self, value: Any) -> Tree:
        return make_constant(value)

    def variable(self, name: str) -> Tree:
        return make_variable(name, self.variables)

    def operator(self, op: OperatorLike, children: Iterable[Tree]) -> Tree:
        if isinstance(op, str):
            if op not in self.operators:
                raise KeyError(f"Unknown operator '{op}'")
            op = self.operators[op]
        return make_operator(op, children)

    def define(self, name: str, tree: Tree) -> Tree:
        """Publish ``tree`` under ``name``"""
        if not isinstance(tree, Tree):
            raise TypeError(f"Only Tree handles can be defined, got {type(tree).__name__}")
        self._scope[name] = tree.share()
        return tree

    def is_defined(self, name: str) -> bool:
        return name in self._scope

    def resolve(self, name: str) -> Tuple[Tree, Set[str]]:
        """
        Fetch the tree defined under ``name``.

        Returns:
            The tree and the set of variable names observed so far

        Raises:
            TreeNotInScope: nothing was defined under ``name``
        """
        try:
            tree = self._scope[name]
        except KeyError:
            raise TreeNotInScope(name) from None
        return tree.share(), set(self.variables)

    def build(self, body: Callable[['TreeBuilder'], Any], tree_name: str,
              prologue: Optional[Callable[['TreeBuilder'], Any]] = None,
              epilogue: Optional[Callable[['TreeBuilder'], Any]] = None) -> Tuple[Tree, Set[str]]:
        """
        Run ``prologue``, ``body`` and ``epilogue`` against this builder, then
        resolve the tree they defined under ``tree_name``.
        """
        for step in (prologue, body, epilogue):
            if step is not None:
                step(self)
        tree, variables = self.resolve(tree_name)
        log_debug(f"Built tree '{tree_name}' with variables {sorted(variables)}")
        return tree, variables
