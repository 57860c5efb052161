# Open-loop DVFS policy: the frequency depends only on how tight the task is.

LOW_FREQUENCY_MHZ = 800
MID_FREQUENCY_MHZ = 1200
HIGH_FREQUENCY_MHZ = 1800
FREQUENCY_LADDER_MHZ = (LOW_FREQUENCY_MHZ, MID_FREQUENCY_MHZ, HIGH_FREQUENCY_MHZ)

SLACK_THRESHOLD = 0.3   # below: plenty of slack
TIGHT_THRESHOLD = 0.7   # at or above: run fast


def select_frequency(task, system_utilization):
    """Pick a frequency from the ladder using burst_time / deadline.

    system_utilization is accepted but not read by this policy.
    """
    time_ratio = task.burst_time / task.deadline
    if time_ratio < SLACK_THRESHOLD:
        return LOW_FREQUENCY_MHZ
    elif time_ratio < TIGHT_THRESHOLD:
        return MID_FREQUENCY_MHZ
    else:
        return HIGH_FREQUENCY_MHZ


class ThresholdFrequencyPolicy:
    def __init__(self):
        self.decisions = 0

    def select_frequency(self, task, utilization):
        self.decisions += 1
        return select_frequency(task, utilization)
