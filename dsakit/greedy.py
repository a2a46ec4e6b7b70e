"""Greedy algorithms: activity selection, fractional knapsack, job sequencing."""

from collections.abc import Iterable
from dataclasses import dataclass, field


def max_activities(intervals: Iterable[tuple[int, int]]) -> int:
    """Largest number of activities one person can do without overlap.

    Each activity is ``(start, end)``; one may start when another ends.
    """
    ordered = sorted(intervals, key=lambda interval: interval[1])
    if not ordered:
        return 0
    count = 1
    finish = ordered[0][1]
    for start, end in ordered[1:]:
        if start >= finish:
            finish = end
            count += 1
    return count


@dataclass(frozen=True)
class Item:
    """An object that may be taken in part."""

    profit: float
    weight: float

    def __post_init__(self):
        if self.weight <= 0:
            raise ValueError(f"item weight must be positive, got {self.weight}")

    @property
    def ratio(self) -> float:
        return self.profit / self.weight


def fractional_knapsack(items: Iterable[Item], capacity: float) -> float:
    """Best profit when items may be split, taking the best ratio first."""
    if capacity < 0:
        raise ValueError(f"capacity must be non-negative, got {capacity}")
    remaining = capacity
    total = 0.0
    for item in sorted(items, key=lambda it: it.ratio, reverse=True):
        if remaining <= 0:
            break
        if item.weight <= remaining:
            total += item.profit
            remaining -= item.weight
        else:
            total += item.profit * remaining / item.weight
            remaining = 0
    return total


@dataclass(frozen=True)
class Job:
    """A unit-length job earning ``profit`` if done by ``deadline``."""

    profit: int
    deadline: int


@dataclass
class Schedule:
    """Jobs chosen, in the order they run, and what they earn together."""

    jobs: list[Job] = field(default_factory=list)
    total_profit: int = 0


def job_sequencing(jobs: Iterable[Job]) -> Schedule:
    """Choose jobs most profitable first, each in the latest free slot before its deadline."""
    jobs = list(jobs)
    slots: list[Job | None] = [None] * len(jobs)
    total = 0
    for job in sorted(jobs, key=lambda j: j.profit, reverse=True):
        for slot in range(min(len(jobs), job.deadline) - 1, -1, -1):
            if slots[slot] is None:
                slots[slot] = job
                total += job.profit
                break
    return Schedule([job for job in slots if job is not None], total)