import numpy as np
import pytest

from energy_trace import EnergyTrace, ExecutionRecord


def make_record(task_id, energy=0.01):
    return ExecutionRecord(task_id=task_id, priority=5, burst_time=100, deadline=1000,
                           frequency=800, task_energy=energy)


def test_append_and_accessors():
    trace = EnergyTrace()
    trace.append(make_record(1), 0.1, 0.02)
    trace.append(make_record(2), 0.3, 0.05)
    assert len(trace) == 2
    assert trace.samples() == [(0.1, 0.02), (0.3, 0.05)]
    assert trace.total_energy == 0.05
    assert trace.executed_ids() == [1, 2]
    assert [r.task_id for r in trace] == [1, 2]


def test_empty_trace():
    trace = EnergyTrace()
    assert trace.total_energy == 0.0
    assert trace.samples() == []
    assert trace.to_dataframe().empty


def test_rejects_decreasing_samples():
    trace = EnergyTrace()
    trace.append(make_record(1), 0.2, 0.05)
    with pytest.raises(ValueError):
        trace.append(make_record(2), 0.1, 0.06)
    with pytest.raises(ValueError):
        trace.append(make_record(2), 0.3, 0.04)
    assert len(trace) == 1


def test_arrays_and_dataframe():
    trace = EnergyTrace()
    trace.append(make_record(1, 0.02), 0.1, 0.02)
    trace.append(make_record(2, 0.03), 0.2, 0.05)
    times, energies = trace.as_arrays()
    np.testing.assert_allclose(times, [0.1, 0.2])
    np.testing.assert_allclose(energies, [0.02, 0.05])

    df = trace.to_dataframe()
    assert list(df["task_id"]) == [1, 2]
    assert list(df["cumulative_energy"]) == [0.02, 0.05]
    assert "frequency" in df.columns
