"""AC voltage drop per IEEE Std 141, assuming a zero-impedance source."""

from __future__ import annotations

from math import acos, asin, cos, sin, sqrt
from typing import Optional

from .errors import ParameterError
from .tables.conductors import ac_resistance, ac_resistance_total, reactance, reactance_total
from .tables.conduits import OuterMaterial
from .tables.sizes import Metal, Size

# Returned when the load voltage collapses for the given conditions.
NO_SOLUTION = -1.0


def _check(voltage: float, phases: int, current: float, power_factor: float, sets: int) -> None:
    if voltage <= 0:
        raise ParameterError(f"Voltage must be positive, got {voltage}.")
    if phases not in (1, 3):
        raise ParameterError(f"Phases must be 1 or 3, got {phases}.")
    if current < 0:
        raise ParameterError(f"Current cannot be negative, got {current}.")
    if power_factor < 0 or power_factor > 1:
        raise ParameterError(f"Power factor must be in [0, 1], got {power_factor}.")
    if sets <= 0:
        raise ParameterError(f"Number of sets must be positive, got {sets}.")


def _k(phases: int) -> float:
    return 2.0 if phases == 1 else sqrt(3.0)


def _beta(power_factor: float, lagging: bool) -> float:
    angle = acos(power_factor)
    return -angle if lagging else angle


def voltage_drop_percent(
    voltage: float,
    phases: int,
    current: float,
    power_factor: float,
    lagging: bool,
    size: Size,
    length_ft: float,
    sets: int,
    metal: Metal,
    material: Optional[OuterMaterial] = None,
) -> float:
    """Line-to-line voltage drop in percent, or ``NO_SOLUTION``.

    ``material`` is the raceway or cable armor material; ``None`` stands for
    free air and uses the PVC (non-magnetic) values.
    """
    _check(voltage, phases, current, power_factor, sets)
    if length_ft <= 0:
        raise ParameterError(f"Length must be positive, got {length_ft}.")
    material = material or OuterMaterial.PVC
    total_r = ac_resistance_total(size, metal, material, length_ft, sets)
    total_x = reactance_total(size, material.is_magnetic, length_ft, sets)
    beta = _beta(power_factor, lagging)
    ratio = current * (total_x * power_factor + total_r * sin(beta)) / voltage
    if abs(ratio) > 1:
        return NO_SOLUTION
    theta = asin(ratio)
    voltage_at_load = voltage * cos(theta) - current * (total_r * power_factor - total_x * sin(beta))
    if voltage_at_load <= 0:
        return NO_SOLUTION
    return _k(phases) * (voltage - voltage_at_load) / voltage * 100


def minimum_size_for_max_drop(
    voltage: float,
    phases: int,
    current: float,
    power_factor: float,
    lagging: bool,
    max_drop_percent: float,
    length_ft: float,
    sets: int,
    metal: Metal,
    material: Optional[OuterMaterial] = None,
) -> Optional[Size]:
    """Smallest size whose voltage drop does not exceed ``max_drop_percent``."""
    if max_drop_percent <= 0 or max_drop_percent > 100:
        raise ParameterError(f"Maximum voltage drop must be in (0, 100], got {max_drop_percent}.")
    for size in Size:
        drop = voltage_drop_percent(voltage, phases, current, power_factor, lagging, size, length_ft, sets, metal, material)
        if drop != NO_SOLUTION and drop <= max_drop_percent:
            return size
    return None


def max_length_for_drop(
    voltage: float,
    phases: int,
    current: float,
    power_factor: float,
    lagging: bool,
    size: Size,
    max_drop_percent: float,
    sets: int,
    metal: Metal,
    material: Optional[OuterMaterial] = None,
) -> float:
    """Longest run in feet of ``size`` that keeps the drop at ``max_drop_percent``."""
    _check(voltage, phases, current, power_factor, sets)
    if max_drop_percent <= 0 or max_drop_percent > 100:
        raise ParameterError(f"Maximum voltage drop must be in (0, 100], got {max_drop_percent}.")
    if current == 0:
        return float("inf")
    material = material or OuterMaterial.PVC
    r = ac_resistance(size, metal, material)
    x = reactance(size, material.is_magnetic)
    beta = _beta(power_factor, lagging)
    v_load = voltage * (1 - max_drop_percent / (_k(phases) * 100))
    a = current * current * (r * r + x * x)
    b = 2 * v_load * current * (r * cos(beta) - x * sin(beta))
    c = v_load * v_load - voltage * voltage
    per_set = 1000 * (-b + sqrt(b * b - 4 * a * c)) / (2 * a)
    return per_set * sets
