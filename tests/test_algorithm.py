import itertools
import random

import pytest

from pushswap.algorithm import (
    first_median,
    reverse_a,
    reverse_b,
    rotate_a,
    rotate_b,
    search_best_move,
    second_median,
    solve,
    sort_of_four,
    sort_of_three,
    sort_stacks,
)
from pushswap.parsing import InputError
from pushswap.stacks import Stacks

_ALLOWED = {"sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"}


def _replay(values, moves):
    stacks = Stacks(values)
    for move in moves:
        getattr(stacks, move)()
    return stacks


def _shuffled(count, seed):
    values = list(range(-count // 2, count - count // 2))
    random.Random(seed).shuffle(values)
    return values


def _assert_sorts(values):
    moves = solve(values)
    assert set(moves) <= _ALLOWED
    result = _replay(values, moves)
    assert result.stack_a == sorted(values)
    assert result.stack_b == []


def test_sorted_input_needs_no_moves():
    assert solve([1, 2, 3, 4, 5]) == []


def test_two_values_swapped():
    assert solve([2, 1]) == ["sa"]


def test_three_values_known_sequences():
    assert solve([3, 1, 2]) == ["ra"]
    assert solve([1, 3, 2]) == ["ra", "sa", "rra"]


@pytest.mark.parametrize("perm", list(itertools.permutations([1, 2, 3])))
def test_all_permutations_of_three(perm):
    _assert_sorts(list(perm))


@pytest.mark.parametrize("size", [4, 5])
def test_all_permutations_small(size):
    for perm in itertools.permutations(range(size)):
        _assert_sorts(list(perm))


def test_duplicates_raise():
    with pytest.raises(InputError):
        solve([3, 1, 3])


def test_twenty_values_are_left_alone():
    values = list(range(20, 0, -1))
    stacks = Stacks(values)
    sort_stacks(stacks)
    assert stacks.moves == []
    assert stacks.stack_a == values


def test_sort_of_three_only_uses_a_moves():
    stacks = Stacks([3, 2, 1])
    sort_of_three(stacks)
    assert stacks.stack_a == [1, 2, 3]
    assert set(stacks.moves) <= {"sa", "ra", "rra"}


def test_sort_of_four_empties_b():
    values = [9, -4, 7, 0, 3, 12]
    stacks = Stacks(values)
    sort_of_four(stacks)
    assert stacks.stack_a == sorted(values)
    assert stacks.size_b == 0


def test_rotate_a_and_b_counts():
    values = [1, 2, 3, 4, 5]
    stacks = Stacks(values)
    rotate_a(stacks, 2)
    assert stacks.stack_a == values[2:] + values[:2]
    assert stacks.moves == ["ra", "ra"]
    stacks.pb()
    stacks.pb()
    stacks.pb()
    before = stacks.stack_b
    rotate_b(stacks, 1)
    assert stacks.stack_b == before[1:] + before[:1]


def test_reverse_a_runs_until_size():
    values = [1, 2, 3, 4, 5]
    stacks = Stacks(values)
    reverse_a(stacks, 3)
    assert stacks.moves == ["rra", "rra"]
    assert stacks.stack_a == values[-2:] + values[:-2]


def test_reverse_b_does_nothing_when_count_reaches_size():
    stacks = Stacks([1, 2, 3])
    stacks.pb()
    reverse_b(stacks, 1)
    assert stacks.moves == ["pb"]


def test_first_median_pushes_lower_half():
    values = _shuffled(24, 7)
    stacks = Stacks(values)
    first_median(stacks, 24 // 4, 0)
    assert sorted(stacks.stack_b) == sorted(values)[: 24 // 2 + 1]
    assert sorted(stacks.stack_a + stacks.stack_b) == sorted(values)


def test_second_median_leaves_three_in_a():
    values = _shuffled(30, 3)
    stacks = Stacks(values)
    first_median(stacks, 30 // 4, 0)
    second_median(stacks)
    assert stacks.size_a == 3
    assert sorted(stacks.stack_a + stacks.stack_b) == sorted(values)


def test_search_best_move_only_rotates():
    values = _shuffled(30, 11)
    stacks = Stacks(values)
    first_median(stacks, 30 // 4, 0)
    second_median(stacks)
    sort_of_three(stacks)
    sizes = (stacks.size_a, stacks.size_b)
    start = len(stacks.moves)
    search_best_move(stacks)
    new_moves = stacks.moves[start:]
    assert set(new_moves) <= {"ra", "rb", "rr", "rra", "rrb", "rrr"}
    assert (stacks.size_a, stacks.size_b) == sizes
    assert sorted(stacks.stack_a + stacks.stack_b) == sorted(values)


def test_reversed_twenty_five():
    _assert_sorts(list(range(25, 0, -1)))


@pytest.mark.parametrize("seed", [1, 2])
def test_random_hundred(seed):
    _assert_sorts(_shuffled(100, seed))