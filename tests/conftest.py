import random

import pytest

from symbolic_expressions import (
    Operator, LogLevel, configure_logging,
    make_constant, make_operator, make_variable
)


def _sum(values):
    return sum(values)


def _product(values):
    result = 1
    for value in values:
        result *= value
    return result


def _difference(values):
    return values[0] - values[1]


@pytest.fixture(autouse=True)
def default_logging():
    configure_logging(LogLevel.MODERATE)
    yield


@pytest.fixture
def sum_op():
    return Operator(_sum, 'sum', symbol='+')


@pytest.fixture
def product_op():
    return Operator(_product, 'product', symbol='*')


@pytest.fixture
def difference_op():
    return Operator(_difference, 'difference', arity=2, symbol='-')


@pytest.fixture
def random_tree_factory(sum_op, product_op, difference_op):
    """Build random integer trees over variables x, y, z"""

    def build(seed, max_depth=5):
        rng = random.Random(seed)

        def grow(depth):
            if depth >= max_depth or rng.random() < 0.3:
                if rng.random() < 0.5:
                    return make_variable(rng.choice('xyz'))
                return make_constant(rng.randint(-5, 5))
            op = rng.choice([sum_op, product_op, difference_op])
            count = 2 if op.arity == 2 else rng.randint(1, 3)
            return make_operator(op, [grow(depth + 1) for _ in range(count)])

        return grow(0)

    return build


def chain(op, depth, leaf):
    """Left-deep chain ``op(op(...op(leaf, 1)..., 1), 1)`` built without recursion"""
    tree = leaf
    for _ in range(depth):
        tree = make_operator(op, [tree, make_constant(1)])
    return tree


@pytest.fixture
def make_chain():
    return chain
