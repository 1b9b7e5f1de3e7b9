# aquareuse/services/sensors/classifier.py
from __future__ import annotations

from typing import List, Sequence

from aquareuse.schemas.common import SensorStatus, SensorTrend
from aquareuse.schemas.sensor import SensorState
from aquareuse.services.sensors.breakpoints import table_for

DEFAULT_WINDOW_SIZE = 5


def push_window(history: Sequence[float], value: float, capacity: int = DEFAULT_WINDOW_SIZE) -> List[float]:
    """Append ``value`` and keep only the newest ``capacity`` readings."""
    window = [*history, value]
    return window[-max(1, capacity):]


def trend_of(window: Sequence[float], epsilon: float) -> SensorTrend:
    """Newest vs oldest reading; deltas within ``epsilon`` are stable."""
    if len(window) < 2:
        return SensorTrend.STABLE
    delta = window[-1] - window[0]
    if delta > epsilon:
        return SensorTrend.UP
    if delta < -epsilon:
        return SensorTrend.DOWN
    return SensorTrend.STABLE


def status_of(state: SensorState, value: float) -> SensorStatus:
    table = table_for(state.id, state.threshold.min, state.threshold.max)
    return table.classify(value)


def classify(
    state: SensorState, new_value: float, capacity: int = DEFAULT_WINDOW_SIZE
) -> SensorState:
    """
    One tick of a sensor: push the reading into the window, then recompute
    trend and status. Returns a new state; ``state`` is left untouched.
    """
    window = push_window(state.history, new_value, capacity)
    return state.model_copy(
        update={
            "value": new_value,
            "history": window,
            "trend": trend_of(window, state.trend_epsilon),
            "status": status_of(state, new_value),
        }
    )
