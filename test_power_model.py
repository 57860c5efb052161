import pytest

from power_model import calculate_power, dynamic_power, frequency_in_range, supply_voltage


def test_voltage_endpoints():
    assert supply_voltage(0) == 0.5
    assert supply_voltage(1000) == 0.75
    assert supply_voltage(2000) == 1.0


def test_idle_power_is_static():
    assert calculate_power(1800, 0.0) == 0.2
    assert calculate_power(0, 1.0) == 0.2


def test_known_values():
    assert dynamic_power(800, 0.1) == pytest.approx(3.92e-7)
    assert calculate_power(1800, 0.8) == pytest.approx(0.2 + 1.2996e-5)


def test_monotone_in_frequency_and_utilization():
    freqs = [500, 800, 1000, 1200, 1800, 2000]
    utils = [0.0, 0.1, 0.3, 0.5, 0.9, 1.0]
    for u in utils:
        powers = [calculate_power(f, u) for f in freqs]
        assert powers == sorted(powers)
    for f in freqs:
        powers = [calculate_power(f, u) for u in utils]
        assert powers == sorted(powers)


def test_utilization_is_not_clamped():
    assert calculate_power(2000, 2.0) > calculate_power(2000, 1.0)


def test_frequency_range():
    assert frequency_in_range(500)
    assert frequency_in_range(2000)
    assert not frequency_in_range(499)
    assert not frequency_in_range(2001)
