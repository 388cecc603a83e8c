"""The sorting strategy: choose and perform moves on a pair of stacks."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pushswap.stacks import Stacks, is_sorted

# Differences of this size or more never select a target.
_DIFF_LIMIT = 2**31


def min_position(values: Sequence[int]) -> int:
    """Return the position of the first smallest value.

    Raises ValueError for an empty sequence.
    """
    return list(values).index(min(values))


def is_above_median(position: int, size: int) -> bool:
    """Tell whether a position lies in the upper half of a stack of that size."""
    return position <= size // 2


def move_cost(b_position: int, size_b: int, a_position: int, size_a: int) -> int:
    """Estimate the rotations needed to bring both positions to their tops."""
    cost = b_position
    if b_position > size_b // 2:
        cost = size_b - b_position
    if a_position <= size_a // 2:
        cost += a_position
    else:
        cost += size_a - a_position
    return cost


def target_position(value: int, stack_a: Sequence[int]) -> int:
    """Return where in stack a the value belongs.

    That is the position of the smallest element greater than the value, or
    of the smallest element of all when none is greater.
    """
    candidates = [
        (element - value, position)
        for position, element in enumerate(stack_a)
        if 0 < element - value < _DIFF_LIMIT
    ]
    if candidates:
        return min(candidates)[1]
    return min_position(stack_a)


def cheapest_position(stacks: Stacks) -> int | None:
    """Return the position in b of the element cheapest to move, if any."""
    size_a, size_b = len(stacks.a), len(stacks.b)
    costs = [
        move_cost(position, size_b, target_position(value, stacks.a), size_a)
        for position, value in enumerate(stacks.b)
    ]
    if not costs:
        return None
    return costs.index(min(costs))


def _bring_to_top_a(stacks: Stacks, value: int) -> None:
    above = is_above_median(stacks.a.index(value), len(stacks.a))
    while stacks.a[0] != value:
        if above:
            stacks.ra()
        else:
            stacks.rra()


def _bring_to_top_b(stacks: Stacks, value: int) -> None:
    above = is_above_median(stacks.b.index(value), len(stacks.b))
    while stacks.b[0] != value:
        if above:
            stacks.rb()
        else:
            stacks.rrb()


def sort_three(stacks: Stacks) -> None:
    """Sort stack a when it holds exactly three elements."""
    if len(stacks.a) != 3:
        return
    first, second, third = stacks.a
    if first > second and second < third and first < third:
        stacks.sa()
    elif first > second and second > third:
        stacks.sa()
        stacks.rra()
    elif first > second and second < third and first > third:
        stacks.ra()
    elif first < second and second > third and first < third:
        stacks.sa()
        stacks.ra()
    elif first < second and second > third and first > third:
        stacks.rra()


def sort_small_stack(stacks: Stacks) -> None:
    """Handle a short stack a by pushing to b, sorting three, pushing back.

    Elements are ranked by their position in a when this is called; the
    lowest-ranked one is pushed to b until three remain.
    """
    if len(stacks.a) == 2:
        if stacks.a[0] > stacks.a[1]:
            stacks.sa()
        return
    rank = {value: position for position, value in enumerate(stacks.a)}
    while len(stacks.a) > 3:
        lowest = min_position([rank[value] for value in stacks.a])
        if lowest == 0:
            stacks.pb()
        elif lowest <= len(stacks.a) // 2:
            stacks.ra()
        else:
            stacks.rra()
    sort_three(stacks)
    while stacks.b:
        stacks.pa()


def push_all_except_three(stacks: Stacks) -> None:
    """Move all but three elements of a onto b, smaller half first."""
    size = len(stacks.a)
    if not size:
        return
    median = sorted(stacks.a)[size // 2]
    pushed = 0
    while len(stacks.a) > 6 and pushed < size // 2:
        if stacks.a[0] < median:
            stacks.pb()
            pushed += 1
        else:
            stacks.ra()
    while len(stacks.a) > 3:
        stacks.pb()


def reinsert_from_b(stacks: Stacks) -> None:
    """Push the cheapest element of b onto a just above its successor."""
    position = cheapest_position(stacks)
    if position is None:
        return
    value = stacks.b[position]
    target = stacks.a[target_position(value, stacks.a)]
    _bring_to_top_b(stacks, value)
    _bring_to_top_a(stacks, target)
    stacks.pa()


def finish_rotation(stacks: Stacks) -> None:
    """Rotate a until its smallest element is on top."""
    if not stacks.a:
        return
    _bring_to_top_a(stacks, stacks.a[min_position(stacks.a)])


def sort(values: Iterable[int]) -> list[str]:
    """Return the operations that sort the values onto stack a."""
    stacks = Stacks(values)
    size = len(stacks.a)
    if size <= 2:
        if not is_sorted(stacks.a):
            stacks.sa()
    elif size == 3:
        sort_three(stacks)
    else:
        push_all_except_three(stacks)
        sort_three(stacks)
        while stacks.b:
            reinsert_from_b(stacks)
        finish_rotation(stacks)
    return stacks.operations