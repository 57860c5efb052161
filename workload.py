import random

from simulator import Task

# Tightness (burst / deadline) bands per scenario
SCENARIO_RATIO_BANDS = {
    "slack": (0.05, 0.29),
    "moderate": (0.3, 0.69),
    "tight": (0.7, 1.0),
    "overloaded": (1.1, 2.0),
    "mixed": (0.05, 1.2),
}


def generate_workload(scenario="mixed", num_tasks=5, seed=None):
    if scenario not in SCENARIO_RATIO_BANDS:
        raise ValueError(f"Unknown scenario {scenario!r}, expected one of {sorted(SCENARIO_RATIO_BANDS)}")
    if seed is not None:
        random.seed(seed)

    low, high = SCENARIO_RATIO_BANDS[scenario]
    tasks = []
    for i in range(num_tasks):
        deadline = random.randint(100, 2000)
        ratio = random.uniform(low, high)
        burst = max(1, int(deadline * ratio))

        # Rounding may push the ratio out of a narrow band; nudge it back
        if scenario == "slack":
            burst = min(burst, int(deadline * 0.29))
        elif scenario == "moderate":
            burst = min(max(burst, -(-deadline * 3 // 10)), deadline * 7 // 10 - 1)
        elif scenario == "tight":
            burst = min(max(burst, -(-deadline * 7 // 10)), deadline)
        elif scenario == "overloaded":
            burst = max(burst, deadline + 1)
        burst = max(1, burst)

        priority = random.randint(1, 10)
        tasks.append(Task(i + 1, priority, burst, deadline))

    return tasks
