"""Build a work schedule from worker availability by backtracking search."""

from __future__ import annotations

import sys
from collections.abc import Sequence

Schedule = list[list[int]]

SAMPLE_AVAILABILITY = [
    [1, 1, 1, 1],
    [1, 0, 1, 0],
    [1, 1, 0, 1],
    [1, 0, 0, 1],
]


def schedule(
    avail: Sequence[Sequence[bool]], daily_need: int, max_shifts: int
) -> Schedule | None:
    """Assign ``daily_need`` distinct available workers to each day.

    No worker may get more than ``max_shifts`` shifts. ``avail[day][worker]``
    tells whether a worker can work that day. Returns one schedule as a list
    of worker ids per day, or None when no schedule exists.
    """
    if not avail:
        return None

    worker_count = len(avail[0])
    sched: Schedule = [[] for _ in avail]
    worked = [0] * worker_count

    def fill(day: int, slot: int) -> bool:
        if day == len(sched):
            return True
        today = sched[day]
        for worker, available in enumerate(avail[day][:worker_count]):
            if not available or worked[worker] >= max_shifts or worker in today:
                continue
            today.append(worker)
            worked[worker] += 1
            next_day, next_slot = day, slot + 1
            if next_slot == daily_need:
                next_day, next_slot = day + 1, 0
            if fill(next_day, next_slot):
                return True
            today.pop()
            worked[worker] -= 1
        return False

    return sched if fill(0, 0) else None


def format_schedule(sched: Sequence[Sequence[int]]) -> str:
    """Render a schedule as one ``Day N: ...`` line per day."""
    lines = []
    for day, workers in enumerate(sched):
        names = "".join(f"{worker} " for worker in workers)
        lines.append(f"Day {day}: {names}")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the sample availability matrix and print the result."""
    sched = schedule(SAMPLE_AVAILABILITY, 2, 2)
    if sched is None:
        print("No solution found!")
    else:
        print(format_schedule(sched))
    return 0


if __name__ == "__main__":
    sys.exit(main())