import copy

import pytest

from symbolic_expressions import (
    Tree, Operator, Variable, Constant, NodeType, MalformedTreeError,
    make_constant, make_operator, make_variable, reduce, accumulate, trees_equal
)


def test_leaf_constructors():
    c = make_constant(3)
    v = make_variable("x")

    assert c.data() == Constant(3)
    assert c.data().node_type is NodeType.CONSTANT
    assert c.children() is None
    assert v.data() == Variable("x")
    assert v.children() is None


def test_new_operator_has_no_children(sum_op):
    tree = Tree(sum_op)
    assert tree.data() is sum_op
    assert tree.children() is None


def test_tree_rejects_non_expression():
    with pytest.raises(TypeError):
        Tree(3)


def test_link_sets_children_in_order(sum_op):
    a, b = make_constant(1), make_variable("x")
    tree = Tree(sum_op)
    tree.link([a, b])

    kids = tree.children()
    assert len(kids) == 2
    assert kids[0].data() == Constant(1)
    assert kids[1].data() == Variable("x")
    assert kids[0].shares_node_with(a)
    assert kids[1].shares_node_with(b)


def test_link_replaces_previous_children(sum_op):
    tree = make_operator(sum_op, [make_constant(1), make_constant(2)])
    tree.link([make_constant(5)])
    assert [kid.data() for kid in tree.children()] == [Constant(5)]


def test_link_in_place_when_unique(sum_op):
    tree = make_operator(sum_op, [make_constant(1)])
    assert tree.is_unique()
    node = tree.node
    tree.link([make_constant(2)])
    assert tree.node is node


def test_link_is_copy_on_write_for_shared_handle(sum_op):
    original = make_operator(sum_op, [make_constant(1), make_constant(2)])
    alias = original.share()
    assert not original.is_unique()

    alias.link([make_constant(10)])

    assert [kid.data() for kid in original.children()] == [Constant(1), Constant(2)]
    assert [kid.data() for kid in alias.children()] == [Constant(10)]
    assert not alias.shares_node_with(original)
    assert original.is_unique()
    assert alias.is_unique()


def test_copy_copy_shares_node(sum_op):
    tree = make_operator(sum_op, [make_constant(1)])
    alias = copy.copy(tree)
    assert alias.shares_node_with(tree)
    assert tree.node.owners == 2


def test_releasing_handle_decrements_owners():
    tree = make_constant(1)
    alias = tree.share()
    assert tree.node.owners == 2
    del alias
    assert tree.node.owners == 1


def test_children_returns_independent_handles(sum_op):
    tree = make_operator(sum_op, [make_constant(1), make_constant(2)])
    kid = tree.children()[0]

    kid.link([make_constant(99)])  # inert on a leaf, but still a mutation of the handle
    assert tree.children()[0].children() is None


def test_shared_child_is_not_changed_through_other_parent(sum_op, product_op):
    shared = make_operator(sum_op, [make_constant(2), make_constant(3)])
    first = make_operator(product_op, [shared, make_variable("x")])
    second = make_operator(product_op, [shared, make_constant(4)])

    reduce(second)

    assert second.data() == Constant(20)
    assert shared.data() is sum_op
    assert first.children()[0].data() is sum_op
    assert accumulate(first, {"x": 1}) == 5


def test_link_empty_operator_is_malformed(sum_op):
    tree = Tree(sum_op)
    with pytest.raises(MalformedTreeError):
        tree.link([])


def test_link_checks_declared_arity(difference_op):
    tree = Tree(difference_op)
    with pytest.raises(MalformedTreeError, match="expects 2"):
        tree.link([make_constant(1)])


def test_link_rejects_non_tree_children(sum_op):
    tree = Tree(sum_op)
    with pytest.raises(TypeError):
        tree.link([1, 2])


def test_link_on_leaf_is_inert(sum_op, caplog):
    leaf = make_constant(3)
    with caplog.at_level("WARNING", logger="symbolic_expressions"):
        leaf.link([make_constant(100)])

    assert "ignored" in caplog.text
    assert len(leaf.children()) == 1
    assert accumulate(leaf) == 3
    assert accumulate(make_operator(sum_op, [leaf, make_constant(1)])) == 4


def test_self_link_cannot_create_cycle(sum_op):
    tree = make_operator(sum_op, [make_constant(1)])
    tree.link([tree])

    assert accumulate(tree) == 1
    assert not tree.children()[0].shares_node_with(tree)


def test_bare_callable_is_wrapped():
    tree = make_operator(max, [make_constant(1), make_constant(7)])
    assert isinstance(tree.data(), Operator)
    assert tree.data().name == "max"
    assert accumulate(tree) == 7


def test_deepcopy_preserves_structure_without_sharing(sum_op):
    shared = make_operator(sum_op, [make_constant(1), make_variable("x")])
    tree = make_operator(sum_op, [shared, shared])

    clone = copy.deepcopy(tree)

    assert trees_equal(tree, clone)
    assert not clone.shares_node_with(tree)
    left, right = clone.children()
    assert left.shares_node_with(right)
    assert not left.shares_node_with(shared)
