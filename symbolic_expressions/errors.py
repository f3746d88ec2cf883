"""
Error types for expression trees.

Two tiers: recoverable domain errors derive from TreeError and carry a
TreeErrorKind plus a readable message; structural invariant violations raise
MalformedTreeError, which is not a TreeError so that handlers for the
recoverable tier never catch it.
"""

from enum import Enum
from typing import Dict, Optional


class TreeErrorKind(Enum):
    """Kinds of recoverable tree errors"""
    VAR_NOT_FOUND = "var_not_found"
    TREE_NOT_IN_SCOPE = "tree_not_in_scope"


_MESSAGES: Dict[TreeErrorKind, str] = {
    TreeErrorKind.VAR_NOT_FOUND: "Found variable in tree but not map",
    TreeErrorKind.TREE_NOT_IN_SCOPE: "Tree not defined in scope - use define(name, tree)",
}


class TreeError(Exception):
    """Recoverable error raised while building or evaluating a tree"""

    def __init__(self, kind: TreeErrorKind, detail: Optional[str] = None):
        self.kind = kind
        self.message = _MESSAGES[kind] if detail is None else f"{_MESSAGES[kind]}: {detail}"
        super().__init__(self.message)

    @classmethod
    def create(cls, kind: TreeErrorKind) -> 'TreeError':
        """Create an error of the given kind with its default message"""
        if kind is TreeErrorKind.VAR_NOT_FOUND:
            return VarNotFound()
        if kind is TreeErrorKind.TREE_NOT_IN_SCOPE:
            return TreeNotInScope()
        return cls(kind)

    def __str__(self) -> str:
        return self.message


class VarNotFound(TreeError):
    """A Variable node's name is missing from the bindings"""

    def __init__(self, name: Optional[str] = None):
        self.name = name
        super().__init__(TreeErrorKind.VAR_NOT_FOUND, None if name is None else repr(name))


class TreeNotInScope(TreeError):
    """No tree was defined under the requested name"""

    def __init__(self, name: Optional[str] = None):
        self.name = name
        super().__init__(TreeErrorKind.TREE_NOT_IN_SCOPE, None if name is None else repr(name))


class MalformedTreeError(RuntimeError):
    """A tree violates a structural invariant (e.g. an operator with no operands)"""
