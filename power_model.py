# CMOS power model for the simulated core.
# Voltage scales linearly from 0.5 V at 0 MHz to 1.0 V at 2000 MHz.

STATIC_POWER_W = 0.2            # Leakage, paid regardless of load
SWITCHED_CAPACITANCE = 1e-8     # Effective switched capacitance C

MIN_FREQUENCY_MHZ = 500
MAX_FREQUENCY_MHZ = 2000
DEFAULT_FREQUENCY_MHZ = 1000


def supply_voltage(frequency_mhz):
    return 0.5 + (frequency_mhz / 2000.0) * 0.5


def dynamic_power(frequency_mhz, utilization):
    voltage = supply_voltage(frequency_mhz)
    return SWITCHED_CAPACITANCE * voltage * voltage * frequency_mhz * utilization


def calculate_power(frequency_mhz, utilization):
    """Instantaneous power in watts: P_static + C * V^2 * f * u.

    Utilization is expected in [0, 1]; callers clamp it, this function does not.
    """
    return STATIC_POWER_W + dynamic_power(frequency_mhz, utilization)


def frequency_in_range(frequency_mhz):
    return MIN_FREQUENCY_MHZ <= frequency_mhz <= MAX_FREQUENCY_MHZ
