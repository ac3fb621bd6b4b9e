import pytest

from arcanum.timeman import allocated_time


def test_sudden_death_share():
    assert allocated_time(60000, 0, -1, 0, 0) == 2000


def test_moves_to_go_share():
    assert allocated_time(60000, 0, 40, 0, 0) == 1500


def test_increment_limited_to_half_of_remaining():
    time, inc = 1000, 5000
    assert allocated_time(time, inc, -1, 0, 0) == time // 2


def test_single_move_to_go_uses_all_but_overhead():
    time, overhead = 5000, 10
    assert allocated_time(time, 1000, 1, 0, overhead) == time - overhead


def test_move_time_caps_allocation():
    assert allocated_time(100000, 0, -1, 50, 0) == 50


def test_negative_limit_gives_minimum():
    assert allocated_time(5, 0, -1, 0, 10) == 1
    assert allocated_time(5, 0, 3, 0, 10) == 1


def test_zero_time_gives_minimum():
    assert allocated_time(0, 0, -1, 0, 0) == 1


@pytest.mark.parametrize("moves_to_go", [-1, 0, 1, 5, 40])
@pytest.mark.parametrize("time", [100, 3000, 60000, 600000])
def test_never_exceeds_limit(time, moves_to_go):
    overhead = 10
    result = allocated_time(time, 500, moves_to_go, 0, overhead)
    assert 1 <= result <= time - overhead


@pytest.mark.parametrize("moves_to_go", [-1, 20])
def test_increment_never_reduces_allocation(moves_to_go):
    without = allocated_time(60000, 0, moves_to_go, 0, 10)
    with_inc = allocated_time(60000, 1000, moves_to_go, 0, 10)
    assert with_inc >= without


def test_more_time_never_reduces_allocation():
    results = [allocated_time(t, 0, -1, 0, 10) for t in (1000, 10000, 100000)]
    assert results == sorted(results)