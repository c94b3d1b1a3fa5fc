from collections import Counter

import pytest

from puzzlesolve.schedwork import format_schedule, main, schedule


def _assert_valid(avail, daily_need, max_shifts, sched):
    assert len(sched) == len(avail)
    counts = Counter()
    for day, workers in enumerate(sched):
        assert len(workers) == daily_need
        assert len(set(workers)) == daily_need
        for worker in workers:
            assert avail[day][worker]
        counts.update(workers)
    assert all(count <= max_shifts for count in counts.values())


def test_empty_availability():
    assert schedule([], 1, 1) is None


def test_single_day_single_worker():
    assert schedule([[1, 1]], 1, 1) == [[0]]


def test_sample_matrix_valid_or_none():
    avail = [[1, 1, 1, 1], [1, 0, 1, 0], [1, 1, 0, 1], [1, 0, 0, 1]]
    sched = schedule(avail, 2, 2)
    assert sched is None or len(sched) == 4
    if sched is not None:
        _assert_valid(avail, 2, 2, sched)


@pytest.mark.parametrize(
    "avail,need,shifts",
    [
        ([[1, 1, 1], [1, 1, 1], [1, 1, 1]], 2, 2),
        ([[1, 0, 1], [0, 1, 1], [1, 1, 0], [1, 0, 1]], 1, 2),
        ([[True, True], [True, True]], 1, 1),
    ],
)
def test_feasible_schedules_are_valid(avail, need, shifts):
    sched = schedule(avail, need, shifts)
    assert sched is not None and len(sched) == len(avail)
    _assert_valid(avail, need, shifts, sched)


def test_nobody_available():
    assert schedule([[0, 0], [1, 1]], 1, 2) is None


def test_shift_limit_makes_it_infeasible():
    assert schedule([[1, 0], [1, 0]], 1, 1) is None


def test_need_exceeds_workers():
    assert schedule([[1, 1]], 3, 5) is None


def test_format_schedule():
    assert format_schedule([[0, 1], [2, 3]]) == "Day 0: 0 1 \nDay 1: 2 3 "


def test_main_prints_outcome(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    assert out.startswith("Day 0: ") or out.strip() == "No solution found!"