# tests/conftest.py
from __future__ import annotations

from typing import Any, Callable, Dict

import pytest
from fastapi.testclient import TestClient

from aquareuse.main import app
from aquareuse.schemas.sensor import SensorState, SensorThreshold
from aquareuse.schemas.treatment import WaterQualityParameters


# Sample with every stage below its limits (bod given explicitly so the
# COD-based estimate does not kick in).
CLEAN_SAMPLE: Dict[str, Any] = {
    "turbidity": 30.0,
    "pH": 7.0,
    "cod": 100.0,
    "bod": 20.0,
    "nitrogen": 5.0,
    "phosphorus": 0.5,
}


@pytest.fixture(scope="session")
def client() -> TestClient:
    """In-process API client (lifespan is not entered, so no log files)."""
    return TestClient(app)


@pytest.fixture()
def make_params() -> Callable[..., WaterQualityParameters]:
    """
    WaterQualityParameters factory starting from CLEAN_SAMPLE.
    Pass ``bod=None`` / ``tss=None`` to force the estimates.
    """

    def _make(**overrides: Any) -> WaterQualityParameters:
        data = {**CLEAN_SAMPLE, **overrides}
        return WaterQualityParameters(**data)

    return _make


@pytest.fixture()
def make_sensor() -> Callable[..., SensorState]:
    def _make(
        sensor_id: str = "turbidity",
        history=(10.0, 10.0, 10.0, 10.0, 10.0),
        lo: float = 0.0,
        hi: float = 100.0,
        epsilon: float = 1.0,
    ) -> SensorState:
        return SensorState(
            id=sensor_id,
            unit="NTU",
            value=history[-1] if history else 0.0,
            history=list(history),
            threshold=SensorThreshold(min=lo, max=hi),
            trend_epsilon=epsilon,
        )

    return _make
