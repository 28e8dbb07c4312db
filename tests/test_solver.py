import itertools
import random

import pytest

from pushswap.solver import binary_length, radix_pass, solve, sort3
from pushswap.stacks import Operation, Stack, StackPair


def _replay(values, operations):
    pair = StackPair(Stack(values))
    for operation in operations:
        assert pair.apply(operation)
    return pair


@pytest.mark.parametrize("values", list(itertools.permutations([0, 1, 2])))
def test_sort3_orders_every_permutation(values):
    pair = StackPair(Stack(values))
    sort3(pair)
    assert list(pair.a) == [0, 1, 2]
    assert len(pair.operations) <= 2
    assert len(pair.b) == 0


def test_sort3_leaves_sorted_stack_alone():
    pair = StackPair(Stack([5, 7, 9]))
    sort3(pair)
    assert pair.operations == []
    assert list(pair.a) == [5, 7, 9]


@pytest.mark.parametrize("values", [[], [1], [2, 1], [4, 3, 2, 1]])
def test_sort3_rejects_other_sizes(values):
    with pytest.raises(ValueError):
        sort3(StackPair(Stack(values)))


def test_binary_length_of_zero_and_one():
    assert binary_length(0) == 1
    assert binary_length(1) == 1


@pytest.mark.parametrize("n", [2, 3, 7, 8, 100, 500, 1023, 1024])
def test_binary_length_bounds(n):
    length = binary_length(n)
    assert 2 ** (length - 1) <= n < 2**length


def test_binary_length_rejects_negative():
    with pytest.raises(ValueError):
        binary_length(-1)


@pytest.mark.parametrize("bit", [0, 1, 2, 3])
def test_radix_pass_splits_on_bit(bit):
    values = list(range(16))
    random.Random(bit).shuffle(values)
    pair = StackPair(Stack(values))
    radix_pass(pair, bit)
    assert set(pair.a) == {v for v in values if (v >> bit) & 1}
    assert set(pair.b) == {v for v in values if not (v >> bit) & 1}
    kept = [v for v in values if (v >> bit) & 1]
    assert list(pair.a) == kept


def test_solve_sorted_input_needs_nothing():
    assert solve([1, 2, 3, 4]) == []
    assert solve([42]) == []


def test_solve_two_values():
    assert solve([2, 1]) == [Operation.SA]


@pytest.mark.parametrize("size", [2, 3, 4, 5, 6, 8, 10, 17, 33, 100])
def test_solve_sorts_random_permutations(size):
    rng = random.Random(size)
    for _ in range(3):
        values = rng.sample(range(-1000, 1000), size)
        pair = _replay(values, solve(values))
        assert list(pair.a) == sorted(values)
        assert len(pair.b) == 0


@pytest.mark.parametrize("values", list(itertools.permutations([3, -7, 12, 0])))
def test_solve_sorts_all_permutations_of_four(values):
    pair = _replay(values, solve(values))
    assert list(pair.a) == sorted(values)
    assert len(pair.b) == 0


def test_solve_handles_extreme_values():
    values = [2147483647, -2147483648, 0, -1, 1]
    pair = _replay(values, solve(values))
    assert list(pair.a) == sorted(values)