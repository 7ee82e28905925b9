from itertools import islice

import pytest

from leftheap.selfcheck_extra import (
    binary_order,
    copy_trace,
    faulty_compare_checks,
    growth_trace,
    modular_rand,
    sort_order,
)


def test_modular_rand_stays_in_range():
    values = list(islice(modular_rand(), 500))
    assert all(0 <= value < 1_000_000_007 for value in values)
    assert len(set(values)) > 490


def test_modular_rand_first_value():
    advanced = modular_rand()
    next(advanced)
    assert next(modular_rand()) == 242718757


def test_growth_trace_sizes_and_tops():
    trace = growth_trace(2000)
    assert len(trace) == 20
    assert [shot.size for shot in trace] == list(range(100, 2001, 100))
    assert all(shot.empty is False for shot in trace)
    tops = [shot.top for shot in trace]
    assert tops == sorted(tops)


def test_growth_trace_top_is_running_maximum():
    values = list(islice(modular_rand(), 1000))
    trace = growth_trace(1000)
    assert [shot.top for shot in trace] == [max(values[:n]) for n in range(100, 1001, 100)]


def test_growth_trace_short_run_is_empty():
    assert growth_trace(99) == []


@pytest.mark.parametrize("base,rounds", [(2000, 5), (300, 2)])
def test_copy_trace_sizes(base, rounds):
    trace = copy_trace(base, rounds)
    assert len(trace) == rounds * 20
    expected_round = list(range(base + 100, base + 90, -1)) + list(range(base + 190, base + 180, -1))
    for start in range(0, len(trace), 20):
        assert [shot.size for shot in trace[start:start + 20]] == expected_round


def test_copy_trace_tops_descend_within_blocks():
    trace = copy_trace(500, 3)
    for start in range(0, len(trace), 10):
        tops = [shot.top for shot in trace[start:start + 10]]
        assert tops == sorted(tops, reverse=True)
    assert not any(shot.empty for shot in trace)


def test_sort_order_matches_source_output():
    assert sort_order(50) == list(range(49, -1, -1))


def test_sort_order_empty():
    assert sort_order(0) == []


def test_binary_order_is_descending_by_value():
    order = binary_order(1000)
    assert len(order) == 999
    assert [int(text, 2) for text in order] == list(range(999, 0, -1))
    assert order[-1] == "1"


def test_faulty_compare_checks_all_pass():
    results = faulty_compare_checks()
    assert results == {
        "basic": True,
        "push": True,
        "pop": True,
        "merge": True,
        "recovery": True,
    }