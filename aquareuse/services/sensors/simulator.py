# aquareuse/services/sensors/simulator.py
# Random-walk reading generator for demo sessions. Scheduling (how often a
# tick happens) belongs to the caller: CLI loop, HTTP request, test.

from __future__ import annotations

import random
from typing import Iterable, List, Optional

from aquareuse.schemas.sensor import SensorState
from aquareuse.services.sensors.classifier import DEFAULT_WINDOW_SIZE, classify

DEFAULT_VARIATION = 5.0


def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def next_reading(
    state: SensorState,
    rng: random.Random,
    variation: float = DEFAULT_VARIATION,
) -> float:
    """Current value +- variation/2, clamped to the instrument range, 0.1 resolution."""
    proposal = state.value + (rng.random() - 0.5) * variation
    clamped = _clamp(proposal, state.threshold.min, state.threshold.max)
    return round(clamped, 1)


def simulate_tick(
    state: SensorState,
    rng: Optional[random.Random] = None,
    variation: float = DEFAULT_VARIATION,
    capacity: int = DEFAULT_WINDOW_SIZE,
) -> SensorState:
    rng = rng or random.Random()
    return classify(state, next_reading(state, rng, variation), capacity=capacity)


def simulate_ticks(
    states: Iterable[SensorState],
    rng: random.Random,
    variation: float = DEFAULT_VARIATION,
    capacity: int = DEFAULT_WINDOW_SIZE,
) -> List[SensorState]:
    """Advance every sensor of a session by one tick."""
    return [simulate_tick(s, rng, variation, capacity) for s in states]
