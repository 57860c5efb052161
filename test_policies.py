import pytest

from policies.baseline import FREQUENCY_LADDER_MHZ, ThresholdFrequencyPolicy, select_frequency
from simulator import Task
from workload import generate_workload


@pytest.mark.parametrize("burst, deadline, expected", [
    (100, 1000, 800),
    (299, 1000, 800),
    (300, 1000, 1200),
    (699, 1000, 1200),
    (700, 1000, 1800),
    (1000, 1000, 1800),
    (3000, 1000, 1800),
])
def test_ladder_thresholds(burst, deadline, expected):
    assert select_frequency(Task(1, 5, burst, deadline), 0.5) == expected


def test_utilization_does_not_change_decision():
    task = Task(1, 5, 400, 1000)
    assert {select_frequency(task, u) for u in (0.0, 0.25, 0.5, 1.0)} == {1200}


def test_selector_stays_on_ladder():
    for task in generate_workload("mixed", num_tasks=50, seed=3):
        assert select_frequency(task, 1.0) in FREQUENCY_LADDER_MHZ


def test_policy_object_counts_decisions():
    policy = ThresholdFrequencyPolicy()
    assert policy.select_frequency(Task(1, 5, 100, 1000), 0.1) == 800
    assert policy.select_frequency(Task(2, 5, 900, 1000), 0.9) == 1800
    assert policy.decisions == 2
