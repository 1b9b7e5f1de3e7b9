# aquareuse/services/sensors/catalog.py
from __future__ import annotations

from typing import List, Tuple

from aquareuse.schemas.sensor import SensorState, SensorThreshold
from aquareuse.services.sensors.classifier import classify

# high-precision instruments use a tighter trend dead band
PRECISION_TREND_EPSILON = 0.02

# id, name, unit, (min, max), seed history (oldest first), trend epsilon
_CATALOG: Tuple[Tuple[str, str, str, Tuple[float, float], Tuple[float, ...], float], ...] = (
    ("turbidity", "Turbidity Sensor", "NTU", (0.0, 100.0), (50.0, 48.0, 47.0, 46.0, 45.2), 1.0),
    ("ph", "pH Sensor", "", (6.5, 8.5), (7.2, 7.3, 7.2, 7.3, 7.3), PRECISION_TREND_EPSILON),
    ("cod", "COD Analyzer", "mg/L", (0.0, 500.0), (180.0, 165.0, 155.0, 148.0, 142.0), 1.0),
    ("tds", "TDS Meter", "mg/L", (0.0, 1000.0), (450.0, 455.0, 458.0, 454.0, 456.0), 1.0),
    ("ammonia", "Ammonia Sensor", "mg/L", (0.0, 50.0), (12.0, 11.0, 10.0, 9.5, 8.7), 1.0),
    ("nitrate", "Nitrate Sensor", "mg/L", (0.0, 20.0), (3.5, 3.3, 3.2, 3.1, 3.2), 1.0),
    ("phosphorus", "Phosphorus Analyzer", "mg/L", (0.0, 10.0), (2.5, 2.2, 2.0, 1.9, 1.8), 1.0),
    ("flow", "Flow Meter", "L/min", (800.0, 1500.0), (1240.0, 1245.0, 1248.0, 1242.0, 1245.0), 1.0),
)


def default_sensor_states() -> List[SensorState]:
    """Fresh, classified states for the plant's standard instrument set."""
    states: List[SensorState] = []
    for sensor_id, name, unit, (lo, hi), history, epsilon in _CATALOG:
        seed = SensorState(
            id=sensor_id,
            name=name,
            unit=unit,
            value=history[-2],
            history=list(history[:-1]),
            threshold=SensorThreshold(min=lo, max=hi),
            trend_epsilon=epsilon,
        )
        states.append(classify(seed, history[-1], capacity=len(history)))
    return states
