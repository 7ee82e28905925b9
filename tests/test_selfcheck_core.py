from itertools import accumulate, islice

import pytest

from leftheap.selfcheck_core import (
    compare_exception_check,
    empty_access_check,
    linear_rand,
    merge_check,
    mixed_trace,
    push_top_trace,
    shift_rand,
)


def test_shift_rand_first_values():
    advanced = shift_rand()
    next(advanced)
    assert list(islice(shift_rand(), 2)) == [1342937120, 1539993827]


def test_shift_rand_stays_in_signed_32_bit_range():
    values = list(islice(shift_rand(), 2000))
    assert all(-(2**31) <= v < 2**31 for v in values)
    assert any(v < 0 for v in values)
    assert len(set(values)) > 1900


def test_linear_rand_first_value():
    assert next(linear_rand()) == 78061


def test_linear_rand_first_two_values():
    assert list(islice(linear_rand(), 2)) == [78061, 371986]


def test_linear_rand_range():
    values = list(islice(linear_rand(), 5000))
    assert all(0 <= v < 1000007 for v in values)


@pytest.mark.parametrize("size", [0, 1, 100, 2000])
def test_merge_check_passes(size):
    assert merge_check(size) is True


def test_push_top_trace_empty():
    assert push_top_trace(0) == []


def test_push_top_trace_tracks_running_maximum():
    trace = push_top_trace(5000)
    expected = list(accumulate(islice(linear_rand(), 5000), max))
    assert trace == expected


def test_push_top_trace_is_non_decreasing():
    trace = push_top_trace(500)
    assert all(a <= b for a, b in zip(trace, trace[1:]))


def test_mixed_trace_values_come_from_generator():
    trace = mixed_trace(6000)
    drawn = set(islice(linear_rand(), 12000))
    assert 0 < len(trace) <= 6000
    assert set(trace) <= drawn


def test_mixed_trace_first_step_records_first_push():
    assert mixed_trace(1) == [next(linear_rand())]


def test_mixed_trace_shorter_run_is_prefix():
    short = mixed_trace(100)
    long = mixed_trace(3000)
    assert short[0] == 78061
    assert long[: len(short)] == short


def test_empty_access_check_passes():
    assert empty_access_check() is True


def test_compare_exception_check_passes():
    assert compare_exception_check() is True