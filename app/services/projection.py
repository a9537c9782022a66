"""Derived lab views, computed from one snapshot of joined rows.

Nothing here touches the database; the caller fetches the rows in a single
statement and these functions fold them in one pass.
"""
from collections import Counter
from typing import Iterable

from app.models.computer import Computer
from app.models.student import Student


def computers_with_counts(
    rows: Iterable[tuple[Computer, int | None]],
) -> list[tuple[Computer, int]]:
    """Fold (computer, allocation_id | None) outer-join rows into (computer, count).

    Input order is preserved; a computer without allocations arrives once
    with allocation_id None and ends up with count 0.
    """
    computers: dict[int, Computer] = {}
    counts: Counter = Counter()
    for computer, allocation_id in rows:
        computers.setdefault(computer.id, computer)
        if allocation_id is not None:
            counts[computer.id] += 1
    return [(computer, counts[computer_id]) for computer_id, computer in computers.items()]


def students_with_computer(
    rows: Iterable[tuple[Student, int | None, str | None]],
) -> list[tuple[Student, int | None, str | None]]:
    """Fold (student, computer_id, computer_name) outer-join rows, one entry per student."""
    seen: dict[int, tuple[Student, int | None, str | None]] = {}
    for student, computer_id, computer_name in rows:
        seen.setdefault(student.id, (student, computer_id, computer_name))
    return list(seen.values())


def load_percent(count: int, capacity: int) -> int:
    """Soft occupancy indicator, capped at 100. Capacity is never enforced."""
    if capacity <= 0:
        return 0
    return min(round(count * 100 / capacity), 100)
