# aquareuse/services/sensors/breakpoints.py
"""
Per-parameter status breakpoints.

Each sensor id owns an ascending list of ``(upper_bound, status)`` pairs.
A reading takes the status of the first bound it falls under; a reading at
or above every bound takes the table's overflow band (``critical`` unless
the table says otherwise, e.g. efficiency where higher is better).

Two-sided parameters (pH) set a ``centre``: the table then scores the
distance from that centre, so acid and alkaline drift are treated alike.

The default tables place the bands at 20 / 50 / 80 % of each instrument's
operating range, which is what the dashboard cards show.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from aquareuse.schemas.common import SensorStatus

Breakpoint = Tuple[float, SensorStatus]

# band edges as fractions of the operating range
RANGE_FRACTIONS: Tuple[Breakpoint, ...] = (
    (0.2, SensorStatus.OPTIMAL),
    (0.5, SensorStatus.GOOD),
    (0.8, SensorStatus.WARNING),
)


@dataclass(frozen=True)
class BreakpointTable:
    breakpoints: Tuple[Breakpoint, ...]
    overflow: SensorStatus = SensorStatus.CRITICAL
    centre: Optional[float] = None

    def classify(self, value: float) -> SensorStatus:
        if self.centre is not None:
            value = abs(value - self.centre)
        for upper_bound, status in self.breakpoints:
            if value < upper_bound:
                return status
        return self.overflow


def _bands(
    optimal: float, good: float, warning: float, centre: Optional[float] = None
) -> BreakpointTable:
    return BreakpointTable(
        (
            (optimal, SensorStatus.OPTIMAL),
            (good, SensorStatus.GOOD),
            (warning, SensorStatus.WARNING),
        ),
        centre=centre,
    )


def range_table(lo: float, hi: float) -> BreakpointTable:
    """Table for an arbitrary ``{min, max}`` range (used for unknown ids)."""
    span = hi - lo
    return BreakpointTable(
        tuple((lo + span * fraction, status) for fraction, status in RANGE_FRACTIONS)
    )


BREAKPOINTS: Dict[str, BreakpointTable] = {
    "turbidity": _bands(20.0, 50.0, 80.0),  # NTU, range 0-100
    "ph": _bands(0.5, 1.0, 1.5, centre=7.0),  # |pH - 7|, critical outside 5.5-8.5
    "cod": _bands(100.0, 250.0, 400.0),  # mg/L, range 0-500
    "tds": _bands(200.0, 500.0, 800.0),  # mg/L, range 0-1000
    "ammonia": _bands(10.0, 25.0, 40.0),  # mg/L, range 0-50
    "nitrate": _bands(4.0, 10.0, 16.0),  # mg/L, range 0-20
    "nitrogen": _bands(4.0, 10.0, 16.0),  # mg/L, range 0-20
    "phosphorus": _bands(2.0, 5.0, 8.0),  # mg/L, range 0-10
    "flow": _bands(940.0, 1150.0, 1360.0),  # L/min, range 800-1500
    "efficiency": BreakpointTable(
        (
            (50.0, SensorStatus.CRITICAL),
            (70.0, SensorStatus.WARNING),
            (85.0, SensorStatus.GOOD),
        ),
        overflow=SensorStatus.OPTIMAL,
    ),  # %
}


def table_for(sensor_id: str, lo: Optional[float] = None, hi: Optional[float] = None) -> BreakpointTable:
    table = BREAKPOINTS.get(sensor_id.strip().lower())
    if table is not None:
        return table
    if lo is None or hi is None:
        raise KeyError(sensor_id)
    return range_table(lo, hi)
