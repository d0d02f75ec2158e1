"""The sorting strategy that turns a list of integers into push_swap moves."""

from __future__ import annotations

from collections.abc import Iterable

from pushswap.parsing import InputError
from pushswap.stacks import Stacks


def solve(values: Iterable[int]) -> list[str]:
    """Return the instructions that sort ``values``.

    Repeated values raise :class:`InputError`; an already sorted list needs
    no instructions.
    """
    values = list(values)
    if len(set(values)) != len(values):
        raise InputError()
    stacks = Stacks(values)
    if stacks.is_a_sorted():
        return []
    sort_stacks(stacks)
    return list(stacks.moves)


def sort_stacks(stacks: Stacks) -> None:
    """Pick the strategy that suits the number of values and run it."""
    count = stacks.nb_values
    if count <= 3:
        sort_of_three(stacks)
    elif 3 < count < 20:
        sort_of_four(stacks)
        if stacks.is_a_sorted():
            return
        insertion_sort(stacks)
    elif count > 20:
        first_median(stacks, count // 4, 0)
        second_median(stacks)
        sort_of_three(stacks)
        insertion_sort(stacks)


def _full_and_sorted(stacks: Stacks) -> bool:
    return stacks.is_a_sorted() and stacks.size_a == stacks.nb_values


def sort_of_three(stacks: Stacks) -> None:
    """Sort the top two or three values of ``a`` in place."""
    a = stacks.a
    if stacks.nb_values == 2:
        if a[0] > a[1]:
            stacks.sa()
        return
    if a[2] < a[1] and a[2] < a[0] and a[0] > a[1]:
        stacks.ra()
        stacks.sa()
    if a[2] < a[1] and a[2] < a[0]:
        stacks.rra()
    if a[0] > a[2] and a[0] > a[1]:
        stacks.ra()
    if a[0] > a[1]:
        stacks.sa()
    if a[1] > a[2]:
        stacks.ra()
        stacks.sa()
        stacks.rra()


def _sort_three_in_loop(stacks: Stacks) -> None:
    a = stacks.a
    while not stacks.is_a_sorted():
        if a[0] > a[1] and a[0] > a[2]:
            stacks.ra()
        if a[0] > a[1] and a[0] < a[2]:
            stacks.sa()
        if a[0] < a[1] and a[1] > a[2]:
            stacks.sa()
            stacks.ra()


def sort_of_four(stacks: Stacks) -> None:
    """Push the smallest values to ``b`` until three remain, sort, push back."""
    while stacks.size_a != 3 and not stacks.is_a_sorted():
        smallest = min(stacks.stack_a)
        j = stacks.stack_a.index(smallest)
        if j <= (stacks.size_a - 1) // 2:
            for _ in range(j):
                stacks.ra()
        else:
            for _ in range(stacks.size_a - j):
                stacks.rra()
        stacks.pb()
    _sort_three_in_loop(stacks)
    while stacks.size_b != 0:
        stacks.pa()


def sort_full_a(stacks: Stacks) -> None:
    """Rotate ``a`` the short way until its smallest value is on top."""
    if _full_and_sorted(stacks):
        return
    a = stacks.a
    last = stacks.size_a - 1
    if a[0] > a[last]:
        steps = 0
        while a[steps] > a[last]:
            steps += 1
        if steps > stacks.size_a // 2:
            while a[0] > a[stacks.size_a - 1]:
                stacks.rra()
        else:
            while a[0] > a[stacks.size_a - 1]:
                stacks.ra()


def rotate_second(stacks: Stacks, lastone, ra: int) -> None:
    """Rotate ``a`` until its top is not above the top of ``b``, within a bound."""
    step = stacks.ra if lastone == 1 else stacks.rra
    step()
    while stacks.a[0] > stacks.b[0]:
        ra += 1
        if ra == stacks.size_a + 1:
            break
        step()


def rotate(stacks: Stacks, lastone) -> None:
    """Bring ``a`` to where the top of ``b`` fits."""
    if _full_and_sorted(stacks):
        return
    a, b = stacks.a, stacks.b
    ra = 0
    while a[ra] < b[0]:
        ra += 1
        if ra > stacks.size_a:
            return
    if ra <= (stacks.size_a - 1) // 2:
        while a[0] < b[0]:
            ra += 1
            if ra == stacks.size_a + 1:
                break
            stacks.ra()
    else:
        rotate_second(stacks, lastone, ra)


def first_median(stacks: Stacks, limit: int, push: int) -> None:
    """Push the lower half of the values to ``b``, the lowest quarter first."""
    count = stacks.nb_values
    for i in range(count * 2):
        start = 0
        push = 0
        if i >= count:
            limit = count // 2
            start = count // 4 + 1
        for j in range(start, limit + 1):
            if stacks.a[0] == stacks.a_index[j]:
                stacks.pb()
                push += 1
                break
        if push == 0:
            stacks.ra()


def push_median(stacks: Stacks) -> None:
    """Rotate ``a`` one step toward the end nearer a value of the third quarter."""
    if stacks.size_a // 2 <= 0:
        return
    count = stacks.nb_values
    bound = count // 2 + count // 4
    a, index = stacks.a, stacks.a_index

    def rank(value: int) -> int:
        return next((y for y in range(bound + 1) if value == index[y]), bound + 1)

    if rank(a[0]) <= rank(a[stacks.size_a - 1]):
        stacks.ra()
    else:
        stacks.rra()


def second_median(stacks: Stacks) -> None:
    """Push the third quarter to ``b``, then all but three values, rotating ``b``."""
    count = stacks.nb_values
    low = count // 2 + 1
    high = count // 2 + count // 4
    for _ in range(count):
        for j in range(low, high + 1):
            if stacks.a[0] == stacks.a_index[j]:
                stacks.pb()
                break
        push_median(stacks)
        if stacks.size_b + count // 4 == count:
            break
    while stacks.size_a != 3:
        stacks.pb()
        stacks.rb()


def _first_fee(stacks: Stacks, i: int, j: int) -> None:
    half_a = stacks.size_a // 2
    half_b = stacks.size_b // 2
    total = stacks.ra_gas_fee + stacks.rb_gas_fee
    if j < half_a and i < half_b:
        if j + i + 1 < total + 1:
            stacks.ra_gas_fee, stacks.rb_gas_fee = j, i
    elif j < half_a and i > half_b:
        if j + (i - half_b) + 1 < total + 1:
            stacks.ra_gas_fee, stacks.rb_gas_fee = j, i


def _second_fee(stacks: Stacks, i: int, j: int) -> None:
    half_a = stacks.size_a // 2
    half_b = stacks.size_b // 2
    total = stacks.ra_gas_fee + stacks.rb_gas_fee
    if j > half_a and i < half_b:
        if (j - half_a) + i + 1 < total + 1:
            stacks.ra_gas_fee, stacks.rb_gas_fee = j, i
    elif j > half_a and i > half_b:
        if (j - half_a) + (i - half_b) < total:
            stacks.ra_gas_fee, stacks.rb_gas_fee = j, i


def _apply_reverse_fees(stacks: Stacks, ra_fee: int, rb_fee: int) -> None:
    if ra_fee > stacks.size_a // 2 and rb_fee < stacks.size_b // 2:
        reverse_a(stacks, ra_fee)
        rotate_b(stacks, rb_fee)
        return
    while (
        ra_fee < stacks.size_a
        and rb_fee < stacks.size_b
        and rb_fee != 0
        and ra_fee != 0
    ):
        stacks.rrr()
        ra_fee += 1
        rb_fee += 1
    if ra_fee != 0:
        reverse_a(stacks, ra_fee)
    if rb_fee != 0:
        reverse_b(stacks, rb_fee)


def _apply_fees(stacks: Stacks, ra_fee: int, rb_fee: int) -> None:
    half_a = stacks.size_a // 2
    half_b = stacks.size_b // 2
    if ra_fee < half_a and rb_fee < half_b:
        while ra_fee > 0 and rb_fee > 0:
            stacks.rr()
            ra_fee -= 1
            rb_fee -= 1
        rotate_a(stacks, ra_fee)
        rotate_b(stacks, rb_fee)
        return
    if ra_fee < half_a and rb_fee > half_b:
        rotate_a(stacks, ra_fee)
        reverse_b(stacks, rb_fee)
        return
    _apply_reverse_fees(stacks, ra_fee, rb_fee)


def search_best_move(stacks: Stacks) -> None:
    """Find a cheap value of ``b`` to insert into ``a`` and rotate both there."""
    a, b = stacks.a, stacks.b
    for i in range(stacks.size_b):
        j = 0
        while a[j] < b[i] and j != stacks.size_a:
            j += 1
        if i == 0:
            stacks.ra_gas_fee, stacks.rb_gas_fee = j, i
        else:
            _first_fee(stacks, i, j)
            _second_fee(stacks, i, j)
            if stacks.ra_gas_fee + stacks.rb_gas_fee < 4:
                break
    _apply_fees(stacks, stacks.ra_gas_fee, stacks.rb_gas_fee)


def _replace_stack_a(stacks: Stacks) -> None:
    if _full_and_sorted(stacks):
        return
    a, b = stacks.a, stacks.b
    while a[stacks.size_a - 1] < a[0] and a[stacks.size_a - 1] > b[0]:
        stacks.rra()
    if a[stacks.size_a - 1] > a[0] and a[stacks.size_a - 1] < a[1]:
        stacks.rra()
        stacks.sa()


def _settle_after_push(stacks: Stacks) -> None:
    if stacks.size_b == 1:
        rotate(stacks, 1)
    elif stacks.size_b == 0:
        sort_full_a(stacks)


def _slot_second(stacks: Stacks) -> None:
    a, b = stacks.a, stacks.b
    while a[0] < b[0] and a[1] > b[0]:
        stacks.pa()
        stacks.sa()
        _settle_after_push(stacks)


def _realign(stacks: Stacks) -> None:
    if stacks.size_b > 3:
        search_best_move(stacks)
    else:
        rotate(stacks, 0)


def _push_while_a_bigger(stacks: Stacks) -> None:
    a, b = stacks.a, stacks.b
    while stacks.size_a != stacks.nb_values and a[0] > b[0]:
        stacks.pa()
        _settle_after_push(stacks)
        _realign(stacks)
        _slot_second(stacks)
        _replace_stack_a(stacks)


def insertion_sort(stacks: Stacks) -> None:
    """Insert every value of ``b`` back into ``a`` at its place."""
    a, b = stacks.a, stacks.b
    while stacks.size_a != stacks.nb_values:
        _push_while_a_bigger(stacks)
        _slot_second(stacks)
        sort_full_a(stacks)
        if (
            stacks.size_a != stacks.nb_values
            and a[0] < b[0]
            and a[stacks.size_a - 1] < b[0]
        ):
            stacks.pa()
            stacks.ra()
        if stacks.size_a != stacks.nb_values and a[stacks.size_a - 1] > b[0]:
            _realign(stacks)


def rotate_a(stacks: Stacks, count: int) -> None:
    """Rotate ``a`` ``count`` times."""
    while count > 0:
        stacks.ra()
        count -= 1


def rotate_b(stacks: Stacks, count: int) -> None:
    """Rotate ``b`` ``count`` times."""
    while count > 0:
        stacks.rb()
        count -= 1


def reverse_a(stacks: Stacks, count: int) -> None:
    """Reverse-rotate ``a`` until ``count`` reaches the size of ``a``."""
    while count < stacks.size_a:
        stacks.rra()
        count += 1


def reverse_b(stacks: Stacks, count: int) -> None:
    """Reverse-rotate ``b`` until ``count`` reaches the size of ``b``."""
    while count < stacks.size_b:
        stacks.rrb()
        count += 1