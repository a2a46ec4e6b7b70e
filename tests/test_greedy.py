import random
from itertools import combinations

import pytest

from dsakit.greedy import Item, Job, Schedule, fractional_knapsack, job_sequencing, max_activities


def _compatible(chosen):
    ordered = sorted(chosen)
    return all(a[1] <= b[0] for a, b in zip(ordered, ordered[1:]))


def _best_by_search(intervals):
    for size in range(len(intervals), 0, -1):
        if any(_compatible(c) for c in combinations(intervals, size)):
            return size
    return 0


@pytest.mark.parametrize("seed", range(6))
def test_max_activities_is_optimal(seed):
    rng = random.Random(seed)
    intervals = []
    for _ in range(7):
        start = rng.randint(0, 20)
        intervals.append((start, start + rng.randint(1, 6)))
    assert max_activities(intervals) == _best_by_search(intervals)


def test_max_activities_edge_cases():
    assert max_activities([]) == 0
    touching = [(0, 2), (2, 4), (4, 6)]
    assert max_activities(touching) == len(touching)
    nested = [(0, 10), (1, 9), (2, 8)]
    assert max_activities(nested) == 1


def test_fractional_knapsack_classic():
    items = [Item(60, 10), Item(100, 20), Item(120, 30)]
    assert fractional_knapsack(items, 50) == pytest.approx(240.0)


def test_fractional_knapsack_takes_everything_when_it_fits():
    items = [Item(3, 1), Item(5, 4), Item(7, 2)]
    total_weight = sum(i.weight for i in items)
    assert fractional_knapsack(items, total_weight + 5) == pytest.approx(
        sum(i.profit for i in items)
    )


def test_fractional_knapsack_zero_capacity_and_errors():
    assert fractional_knapsack([Item(5, 2)], 0) == 0
    with pytest.raises(ValueError):
        Item(5, 0)
    with pytest.raises(ValueError):
        fractional_knapsack([Item(5, 2)], -1)


CLASSIC_JOBS = [Job(100, 2), Job(19, 1), Job(27, 2), Job(25, 1), Job(15, 3)]


def test_job_sequencing_classic():
    schedule = job_sequencing(CLASSIC_JOBS)
    assert schedule.total_profit == 142
    assert schedule.jobs == [Job(27, 2), Job(100, 2), Job(15, 3)]


@pytest.mark.parametrize("seed", range(5))
def test_job_sequencing_invariants(seed):
    rng = random.Random(seed)
    jobs = [Job(rng.randint(1, 50), rng.randint(0, 6)) for _ in range(8)]
    schedule = job_sequencing(jobs)
    assert schedule.total_profit == sum(j.profit for j in schedule.jobs)
    assert len(schedule.jobs) <= len(jobs)
    for position, job in enumerate(schedule.jobs):
        assert job.deadline > position


def test_job_sequencing_skips_zero_deadline_and_empty():
    schedule = job_sequencing([Job(50, 0), Job(10, 1)])
    assert schedule.jobs == [Job(10, 1)]
    assert job_sequencing([]) == Schedule([], 0)