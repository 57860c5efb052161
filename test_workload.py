import pytest

from simulator import validate_task
from workload import SCENARIO_RATIO_BANDS, generate_workload


@pytest.mark.parametrize("scenario", sorted(SCENARIO_RATIO_BANDS))
def test_generated_tasks_are_admissible(scenario):
    tasks = generate_workload(scenario, num_tasks=30, seed=11)
    assert [t.task_id for t in tasks] == list(range(1, 31))
    for task in tasks:
        validate_task(task)


def test_scenario_bands():
    assert all(t.tightness < 0.3 for t in generate_workload("slack", 40, seed=1))
    assert all(0.3 <= t.tightness < 0.7 for t in generate_workload("moderate", 40, seed=1))
    assert all(0.7 <= t.tightness <= 1.0 for t in generate_workload("tight", 40, seed=1))
    assert all(t.tightness > 1.0 for t in generate_workload("overloaded", 40, seed=1))


def test_seed_is_reproducible():
    a = generate_workload("mixed", 10, seed=5)
    b = generate_workload("mixed", 10, seed=5)
    assert [(t.priority, t.burst_time, t.deadline) for t in a] == \
        [(t.priority, t.burst_time, t.deadline) for t in b]


def test_unknown_scenario():
    with pytest.raises(ValueError):
        generate_workload("bursty")
