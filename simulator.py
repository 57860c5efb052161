import copy
import heapq
import logging
import numbers
import time
from collections import Counter

import numpy as np

from energy_trace import EnergyTrace, ExecutionRecord
from policies.baseline import ThresholdFrequencyPolicy
from power_model import DEFAULT_FREQUENCY_MHZ, calculate_power, frequency_in_range

logger = logging.getLogger("edf_dvfs")


class TaskValidationError(ValueError):
    pass


class Task:
    def __init__(self, task_id, priority, burst_time, deadline, arrival_time=0.0):
        self.task_id = task_id
        self.priority = priority          # 1-10, reported only
        self.burst_time = burst_time      # ms of work
        self.deadline = deadline          # ms, relative to batch start
        self.completed = False
        self.arrival_time = arrival_time  # logical batch start

    @property
    def tightness(self):
        return self.burst_time / self.deadline

    @property
    def time_ratio(self):
        return min(1.0, self.tightness)

    def __repr__(self):
        return (f"Task({self.task_id}, priority={self.priority}, "
                f"burst={self.burst_time}ms, deadline={self.deadline}ms)")


def _is_int(value):
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def validate_task(task):
    for name in ("task_id", "priority", "burst_time", "deadline"):
        value = getattr(task, name)
        if not _is_int(value):
            raise TaskValidationError(f"Task {task.task_id!r}: {name} must be an integer, got {value!r}")
    if task.task_id <= 0:
        raise TaskValidationError(f"Task id must be positive, got {task.task_id}")
    if not 1 <= task.priority <= 10:
        raise TaskValidationError(f"Task {task.task_id}: priority {task.priority} outside 1-10")
    if task.burst_time <= 0:
        raise TaskValidationError(f"Task {task.task_id}: burst time must be positive")
    if task.deadline <= 0:
        raise TaskValidationError(f"Task {task.task_id}: deadline must be positive")

    # Ratio and duration feed the float arithmetic of the run loop
    try:
        ratio = task.burst_time / task.deadline
        seconds = task.burst_time / 1000.0
    except OverflowError:
        raise TaskValidationError(f"Task {task.task_id}: burst/deadline too large for float arithmetic")
    if not (np.isfinite(ratio) and np.isfinite(seconds)):
        raise TaskValidationError(f"Task {task.task_id}: burst/deadline produce non-finite values")


def system_utilization(tasks):
    """Sum of burst/deadline over tasks not yet completed, clamped to 1.0."""
    total = sum(t.burst_time / t.deadline for t in tasks if not t.completed)
    return min(1.0, total)


class ReadyQueue:
    # Min-heap on (deadline, task_id); ids are unique so tasks are never compared
    def __init__(self):
        self._heap = []

    def push(self, task):
        heapq.heappush(self._heap, (task.deadline, task.task_id, task))

    def pop_min_deadline(self):
        if not self._heap:
            raise IndexError("pop from an empty ready queue")
        return heapq.heappop(self._heap)[2]

    def peek(self):
        if not self._heap:
            raise IndexError("peek at an empty ready queue")
        return self._heap[0][2]

    def __len__(self):
        return len(self._heap)

    def __bool__(self):
        return bool(self._heap)


class SchedulerState:
    def __init__(self):
        self.reset()

    def reset(self):
        self.current_frequency_mhz = DEFAULT_FREQUENCY_MHZ
        self.total_energy_j = 0.0
        self.start_time = 0.0
        self.elapsed = 0.0
        self.energy_series = EnergyTrace()


class EDFDVFSScheduler:
    def __init__(self, frequency_policy=None, pace_seconds=0.0):
        self.policy = frequency_policy or ThresholdFrequencyPolicy()
        self.pace_seconds = pace_seconds
        self.tasks = []
        self.state = SchedulerState()

    def load_tasks(self, tasks):
        """Admit a batch. Tasks are validated and copied; the caller's objects stay untouched."""
        admitted = []
        seen = set()
        for task in tasks:
            validate_task(task)
            if task.task_id in seen:
                raise TaskValidationError(f"Duplicate task id {task.task_id}")
            seen.add(task.task_id)
            own = copy.copy(task)
            own.completed = False
            own.arrival_time = 0.0
            admitted.append(own)
        self.tasks = admitted

    def adjust_frequency(self, new_freq):
        if not frequency_in_range(new_freq):
            logger.debug("Ignoring out-of-range frequency %s MHz", new_freq)
            return False
        self.state.current_frequency_mhz = new_freq
        logger.info("Adjusted CPU frequency to %d MHz", new_freq)
        return True

    def run(self, tasks=None):
        if tasks is not None:
            self.load_tasks(tasks)

        ready_queue = ReadyQueue()
        for task in self.tasks:
            ready_queue.push(task)

        self.state.reset()
        state = self.state

        while ready_queue:
            task = ready_queue.pop_min_deadline()

            # The dispatched task is still pending here, so it counts toward u
            utilization = system_utilization(self.tasks)
            logger.debug("System utilization before Task %d: %.4f", task.task_id, utilization)
            self.adjust_frequency(self.policy.select_frequency(task, utilization))
            frequency = state.current_frequency_mhz

            logger.info("Executing Task %d (Priority: %d, Burst: %dms, Deadline: %dms) at %d MHz",
                        task.task_id, task.priority, task.burst_time, task.deadline, frequency)

            time_ratio = task.time_ratio
            power = calculate_power(frequency, time_ratio)
            execution_seconds = task.burst_time / 1000.0
            task_energy = power * execution_seconds

            start = state.elapsed
            state.elapsed += execution_seconds
            state.total_energy_j += task_energy

            record = ExecutionRecord(
                task_id=task.task_id,
                priority=task.priority,
                burst_time=task.burst_time,
                deadline=task.deadline,
                frequency=frequency,
                task_energy=task_energy,
                power_w=power,
                utilization=utilization,
                time_ratio=time_ratio,
                start_time=start,
                end_time=state.elapsed,
            )
            state.energy_series.append(record, state.elapsed - state.start_time, state.total_energy_j)
            task.completed = True

            if self.pace_seconds > 0:
                time.sleep(self.pace_seconds)

            logger.info("Completed Task %d. Energy used: %.6f J", task.task_id, task_energy)

        logger.info("Total energy consumed: %.6f J", state.total_energy_j)
        return state.energy_series

    def evaluate(self):
        trace = self.state.energy_series
        num_completed = len(trace)
        makespan = trace.times[-1] if trace.times else 0.0
        total_energy = self.state.total_energy_j

        # Time-weighted mean frequency over the busy interval
        if makespan > 0:
            avg_frequency = sum(r.frequency * (r.end_time - r.start_time) for r in trace) / makespan
            avg_power = total_energy / makespan
        else:
            avg_frequency = 0.0
            avg_power = 0.0

        return {
            "total_energy": total_energy,
            "num_completed": num_completed,
            "makespan": makespan,
            "avg_power": avg_power,
            "avg_frequency": avg_frequency,
            "energy_per_task": total_energy / num_completed if num_completed else 0.0,
            "frequency_histogram": dict(Counter(r.frequency for r in trace)),
        }


# Backward compatibility
Simulator = EDFDVFSScheduler
