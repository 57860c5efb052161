from dataclasses import asdict, dataclass, fields
from typing import List, Tuple

import numpy as np
import pandas as pd


@dataclass(frozen=True)
class ExecutionRecord:
    task_id: int
    priority: int
    burst_time: int        # ms
    deadline: int          # ms
    frequency: int         # MHz
    task_energy: float     # J
    power_w: float = 0.0
    utilization: float = 0.0
    time_ratio: float = 0.0
    start_time: float = 0.0  # simulated seconds since batch start
    end_time: float = 0.0


class EnergyTrace:
    """Append-only log of executed tasks and the cumulative energy curve.

    The i-th sample of the series belongs to the i-th record. Sample times and
    cumulative energies never decrease.
    """

    def __init__(self):
        self.records: List[ExecutionRecord] = []
        self.times: List[float] = []
        self.energies: List[float] = []

    def append(self, record, elapsed_seconds, cumulative_energy):
        if self.times and elapsed_seconds < self.times[-1]:
            raise ValueError(
                f"Sample time {elapsed_seconds} precedes previous sample {self.times[-1]}"
            )
        if self.energies and cumulative_energy < self.energies[-1]:
            raise ValueError(
                f"Cumulative energy {cumulative_energy} is below previous sample {self.energies[-1]}"
            )
        self.records.append(record)
        self.times.append(elapsed_seconds)
        self.energies.append(cumulative_energy)

    def samples(self) -> List[Tuple[float, float]]:
        return list(zip(self.times, self.energies))

    @property
    def total_energy(self):
        return self.energies[-1] if self.energies else 0.0

    def executed_ids(self):
        return [r.task_id for r in self.records]

    def as_arrays(self):
        return np.asarray(self.times, dtype=float), np.asarray(self.energies, dtype=float)

    def to_dataframe(self):
        columns = [f.name for f in fields(ExecutionRecord)]
        df = pd.DataFrame([asdict(r) for r in self.records], columns=columns)
        df["cumulative_energy"] = self.energies
        return df

    def __len__(self):
        return len(self.records)

    def __iter__(self):
        return iter(self.records)
