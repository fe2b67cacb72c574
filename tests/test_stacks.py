import io

import pytest

from pushswap.stacks import (
    Node,
    ProcessCounter,
    PushSwap,
    atoll,
    get_max_steps,
    get_median,
    is_sorted_ascending,
    is_sorted_descending,
)


def values(stack):
    return [node.value for node in stack]


def test_sa_swaps_top_two():
    state = PushSwap([1, 2, 3])
    state.sa()
    assert values(state.stack_a) == [2, 1, 3]
    assert state.moves == ["sa"]


def test_sa_on_single_element_still_recorded():
    state = PushSwap([7])
    state.sa()
    assert values(state.stack_a) == [7]
    assert state.moves == ["sa"]


def test_ss_swaps_both():
    state = PushSwap([1, 2])
    state.pb()
    state.pb()
    state.ss()
    assert values(state.stack_a) == []
    assert values(state.stack_b) == [1, 2]
    assert state.moves == ["pb", "pb", "ss"]


def test_pb_and_pa_move_top():
    state = PushSwap([4, 5, 6])
    state.pb()
    assert values(state.stack_a) == [5, 6]
    assert values(state.stack_b) == [4]
    state.pa()
    assert values(state.stack_a) == [4, 5, 6]
    assert values(state.stack_b) == []
    assert state.moves == ["pb", "pa"]


def test_pa_on_empty_b_does_nothing():
    state = PushSwap([1, 2])
    state.pa()
    assert values(state.stack_a) == [1, 2]
    assert state.moves == []


def test_pb_on_empty_a_does_nothing():
    state = PushSwap([])
    state.pb()
    assert state.moves == []
    assert len(state.stack_b) == 0


def test_ra_moves_top_to_bottom():
    state = PushSwap([1, 2, 3])
    state.ra()
    assert values(state.stack_a) == [2, 3, 1]
    assert state.moves == ["ra"]


def test_rra_moves_bottom_to_top():
    state = PushSwap([1, 2, 3])
    state.rra()
    assert values(state.stack_a) == [3, 1, 2]
    assert state.moves == ["rra"]


def test_ra_then_rra_round_trip():
    original = [9, -3, 4, 0, 12]
    state = PushSwap(original)
    state.ra()
    state.rra()
    assert values(state.stack_a) == original


def test_rb_and_rrb_round_trip():
    state = PushSwap([1, 2, 3])
    state.pb()
    state.pb()
    state.pb()
    before = values(state.stack_b)
    state.rb()
    assert values(state.stack_b) == before[1:] + before[:1]
    state.rrb()
    assert values(state.stack_b) == before
    assert state.moves[-2:] == ["rb", "rrb"]


def test_rr_requires_both_stacks_to_have_two():
    state = PushSwap([1, 2, 3])
    state.pb()
    state.rr()
    assert values(state.stack_a) == [2, 3]
    assert "rr" not in state.moves


def test_rr_and_rrr_rotate_both():
    state = PushSwap([1, 2, 3, 4])
    state.pb()
    state.pb()
    state.rr()
    assert values(state.stack_a) == [4, 3]
    assert values(state.stack_b) == [1, 2]
    state.rrr()
    assert values(state.stack_a) == [3, 4]
    assert values(state.stack_b) == [2, 1]
    assert state.moves == ["pb", "pb", "rr", "rrr"]


def test_rrr_skipped_when_b_too_small():
    state = PushSwap([1, 2])
    state.rrr()
    assert state.moves == []


def test_moves_written_to_stream():
    buffer = io.StringIO()
    state = PushSwap([2, 1], stream=buffer)
    state.sa()
    state.pb()
    assert buffer.getvalue() == "sa\npb\n"


def test_is_sorted_ascending():
    assert is_sorted_ascending([Node(1), Node(2), Node(2), Node(5)])
    assert not is_sorted_ascending([Node(2), Node(1)])
    assert is_sorted_ascending([])
    assert is_sorted_ascending([Node(3)])


def test_is_sorted_descending():
    assert is_sorted_descending([Node(5), Node(2), Node(2), Node(1)])
    assert not is_sorted_descending([Node(1), Node(2)])
    assert is_sorted_descending([])


@pytest.mark.parametrize("size", [0, 1, 2, 5, 6, 11])
def test_get_median_is_half_size(size):
    median = get_median([Node(i) for i in range(size)])
    assert median * 2 in (size, size - 1)


def test_get_max_steps_empty():
    assert get_max_steps([]) == 0


@pytest.mark.parametrize("size", [2, 3, 8, 9, 100])
def test_get_max_steps_covers_largest_index(size):
    state = PushSwap(range(size, 0, -1))
    state.assign_indices()
    steps = get_max_steps(state.stack_a)
    top = size - 1
    assert (1 << steps) > top
    assert (1 << (steps - 1)) <= top


def test_get_max_steps_unassigned_raises():
    with pytest.raises(ValueError):
        get_max_steps([Node(4), Node(2)])


def test_atoll_parses_leading_number():
    assert atoll("  -42abc") == -42
    assert atoll("+7") == 7
    assert atoll("2147483648") == 2147483648
    assert atoll("-2147483649") == -2147483649


def test_atoll_without_digits_is_zero():
    assert atoll("") == 0
    assert atoll("abc") == 0
    assert atoll("- 5") == 0


def test_assign_indices_ranks_and_positions():
    data = [30, -5, 12, 7]
    state = PushSwap(data)
    state.assign_indices()
    ranks = sorted(data)
    for position, node in enumerate(state.stack_a):
        assert node.order == position
        assert node.index == ranks.index(node.value)
    assert sorted(n.index for n in state.stack_a) == list(range(len(data)))


def test_assign_indices_reassigns_after_moves():
    state = PushSwap([3, 1, 2])
    state.assign_indices()
    state.ra()
    state.assign_indices()
    assert [n.order for n in state.stack_a] == [0, 1, 2]
    assert values(state.stack_a) == [1, 2, 3]
    assert [n.index for n in state.stack_a] == [0, 1, 2]


def test_reset_counters_clears_processed():
    state = PushSwap([1])
    state.process_a.processed = 4
    state.process_b.processed = 2
    state.process_a.total = 9
    state.reset_counters()
    assert state.process_a.processed == 0
    assert state.process_b.processed == 0
    assert state.process_a.total == 9


def test_new_state_defaults():
    state = PushSwap([5, 6])
    assert state.step == 0
    assert state.max_steps == 0
    assert state.process_a == ProcessCounter()
    assert [n.index for n in state.stack_a] == [-1, -1]