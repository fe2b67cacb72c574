"""Sorting strategies that drive the two stacks with push_swap moves."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Deque, List

from pushswap.stacks import (
    Node,
    PushSwap,
    get_max_steps,
    get_median,
    is_sorted_ascending,
    is_sorted_descending,
)

# Bit pairs (top of a, top of b) for which sort_stack_bitwise keeps rotating.
_ROTATING_PAIRS = frozenset({(1, 0), (1, 1), (0, 0)})


def _bit(stack: Deque[Node], step: int) -> int:
    """Return the given bit of the rank of the top element."""
    return (stack[0].index >> step) & 1


def _both_unsorted(state: PushSwap) -> bool:
    return not is_sorted_ascending(state.stack_a) and not is_sorted_descending(
        state.stack_b
    )


def sort_three(state: PushSwap) -> None:
    """Sort exactly three elements on stack a with at most two moves."""
    a = state.stack_a
    if is_sorted_ascending(a):
        return
    first, second, third = a[0].value, a[1].value, a[2].value
    if first < second:
        if first > third:
            state.rra()
        else:
            state.sa()
            state.ra()
    elif second > third:
        state.sa()
        state.rra()
    elif first < third:
        state.sa()
    else:
        state.ra()


def sort_up_to_five(state: PushSwap) -> None:
    """Push the smallest elements to b until three remain, then merge back."""
    while state.stack_a and not is_sorted_ascending(state.stack_a):
        state.assign_indices()
        median = len(state.stack_a) // 2
        target = next(node for node in state.stack_a if node.index == 0)
        while state.stack_a[0].index != 0:
            if target.order <= median:
                state.ra()
            else:
                state.rra()
        state.pb()
        if len(state.stack_a) == 3:
            sort_three(state)
    while state.stack_b:
        state.pa()


def tiny_sort(state: PushSwap) -> None:
    """Sort a stack of two to five elements."""
    a = state.stack_a
    if not a:
        return
    size = len(a)
    if size == 2:
        if a[0].value > a[1].value:
            state.sa()
    elif size == 3:
        sort_three(state)
    elif size in (4, 5):
        sort_up_to_five(state)


def divide_between_stacks(state: PushSwap) -> None:
    """Move every element ranked below the median to stack b."""
    size = len(state.stack_a)
    median = get_median(state.stack_a)
    for _ in range(size):
        if state.stack_a[0].index < median:
            state.pb()
        else:
            state.ra()


def process_stack_a(state: PushSwap) -> None:
    """Partition stack a by the current bit: zeros on top, ones below."""
    counter = state.process_a
    moved = counter.moved
    for _ in range(counter.processed, counter.total):
        if _bit(state.stack_a, state.step) == 0:
            state.pb()
            moved += 1
        else:
            state.ra()
    for _ in range(moved):
        state.pa()
    counter.processed = 0
    counter.moved = 0


def process_stack_b(state: PushSwap) -> None:
    """Partition stack b by the current bit: ones on top, zeros below."""
    counter = state.process_b
    moved = counter.moved
    for _ in range(counter.processed, counter.total):
        if _bit(state.stack_b, state.step) == 1:
            state.pa()
            moved += 1
        else:
            state.rb()
    for _ in range(moved):
        state.pb()
    counter.processed = 0
    counter.moved = 0


def sort_stacks_separately(state: PushSwap) -> None:
    """Run a partition pass on each stack that still needs one, then advance."""
    a_sorted = is_sorted_ascending(state.stack_a)
    b_sorted = is_sorted_descending(state.stack_b)
    if not a_sorted and not b_sorted:
        process_stack_a(state)
        process_stack_b(state)
    elif a_sorted and not b_sorted:
        process_stack_b(state)
    elif not a_sorted and b_sorted:
        process_stack_a(state)
    state.step += 1


def sort_stack_bitwise(state: PushSwap, bit_a: int, bit_b: int) -> None:
    """Rotate the stacks while their tops are already on the right side."""
    while (bit_a, bit_b) in _ROTATING_PAIRS and _both_unsorted(state):
        if (bit_a, bit_b) == (1, 0):
            state.rr()
            state.process_a.processed += 1
            state.process_b.processed += 1
        elif (bit_a, bit_b) == (1, 1):
            state.ra()
            state.process_a.processed += 1
        else:
            state.rb()
            state.process_b.processed += 1
        bit_a = _bit(state.stack_a, state.step)
        bit_b = _bit(state.stack_b, state.step)


def sort_both_stacks_bitwise(state: PushSwap) -> None:
    """Radix-sort a ascending and b descending, one bit per pass."""
    while (
        state.step < state.max_steps
        or not is_sorted_ascending(state.stack_a)
        or not is_sorted_descending(state.stack_b)
    ):
        sort_stack_bitwise(
            state,
            _bit(state.stack_a, state.step),
            _bit(state.stack_b, state.step),
        )
        sort_stacks_separately(state)


def bit_by_bit_processing(state: PushSwap) -> None:
    """Sort both halves bitwise, then push everything back onto stack a."""
    state.max_steps = get_max_steps(state.stack_a)
    state.process_a.total = len(state.stack_a)
    state.process_b.total = len(state.stack_b)
    while state.step < state.max_steps or _both_unsorted(state):
        sort_both_stacks_bitwise(state)
        state.reset_counters()
        state.step += 1
    while state.stack_b:
        state.pa()


def solve(values: Iterable[int]) -> List[str]:
    """Return the moves that sort the given values, top of stack a first."""
    state = PushSwap(values)
    if not is_sorted_ascending(state.stack_a):
        if len(state.stack_a) <= 5:
            tiny_sort(state)
        else:
            state.assign_indices()
            divide_between_stacks(state)
            bit_by_bit_processing(state)
    return state.moves