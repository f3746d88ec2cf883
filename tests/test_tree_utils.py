import numpy as np
import pytest
import sympy as sp

from symbolic_expressions import (
    Tree, make_constant, make_operator, make_variable,
    get_all_nodes, tree_size, calculate_tree_depth, get_variables,
    get_variable_usage_counts, is_constant_tree, tree_to_string, trees_equal,
    clone_tree, TreeValidator, is_valid_tree, to_sympy, latex_representation
)


@pytest.fixture
def sample_tree(sum_op, product_op):
    # sum(product(2, x), x, 3)
    x = make_variable("x")
    return make_operator(sum_op, [
        make_operator(product_op, [make_constant(2), x]),
        x,
        make_constant(3),
    ])


def test_sizes_and_depth(sample_tree, make_chain, sum_op):
    assert tree_size(sample_tree) == 6
    assert calculate_tree_depth(sample_tree) == 3
    assert calculate_tree_depth(make_constant(1)) == 1
    assert calculate_tree_depth(make_chain(sum_op, 5000, make_constant(0))) == 5001


def test_traversal_orders(sample_tree):
    post = [str(node.data) for node in get_all_nodes(sample_tree)]
    breadth = [str(node.data) for node in get_all_nodes(sample_tree, 'breadth_first')]
    assert post == ["2", "x", "product", "x", "3", "sum"]
    assert breadth == ["sum", "product", "x", "3", "2", "x"]
    with pytest.raises(ValueError):
        get_all_nodes(sample_tree, 'sideways')


def test_variables(sample_tree):
    assert get_variables(sample_tree) == {"x"}
    assert get_variable_usage_counts(sample_tree) == {"x": 2}
    assert not is_constant_tree(sample_tree)
    assert is_constant_tree(make_operator("add", [make_constant(1), make_constant(2)]))


def test_to_string(sample_tree):
    assert tree_to_string(sample_tree) == "((2 * x) + x + 3)"
    assert tree_to_string(make_operator("negate", [make_variable("y")])) == "negate(y)"
    assert repr(make_constant(1.5)) == "Tree(1.5)"


def test_trees_equal(sample_tree, sum_op):
    assert trees_equal(sample_tree, clone_tree(sample_tree))
    assert trees_equal(sample_tree, sample_tree.share())
    other = make_operator(sum_op, [make_constant(2), make_variable("x")])
    assert not trees_equal(sample_tree, other)
    assert trees_equal(make_constant(np.array([1, 2])), make_constant(np.array([1, 2])))
    assert not trees_equal(make_constant(np.array([1, 2])), make_constant(np.array([1, 3])))


def test_validator_reports_problems(sum_op, difference_op):
    assert is_valid_tree(make_operator(sum_op, [make_constant(1)]))

    leaf = make_constant(1)
    leaf.link([make_constant(2)])
    tree = make_operator(sum_op, [Tree(sum_op), leaf])

    problems = TreeValidator.validate(tree)
    assert len(problems) == 2
    assert "no operands" in problems[0]
    assert "ignored" in problems[1]
    assert not is_valid_tree(tree)


def test_to_sympy_builtins():
    x = make_variable("x")
    tree = make_operator("add", [
        make_operator("multiply", [make_constant(2), x]),
        make_operator("sin", [x]),
    ])
    symbol = sp.Symbol("x")
    assert sp.simplify(to_sympy(tree) - (2 * symbol + sp.sin(symbol))) == 0
    assert "sin" in latex_representation(tree)


def test_to_sympy_custom_operator(sum_op):
    tree = make_operator(sum_op, [make_variable("a"), make_constant(1)])
    expr = to_sympy(tree)
    assert expr == sp.Function("sum")(sp.Symbol("a"), sp.Integer(1))
