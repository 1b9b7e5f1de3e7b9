# aquareuse/schemas/sensor.py
from __future__ import annotations

from typing import List, Optional

from pydantic import ConfigDict, Field, model_validator

from .common import AppBaseModel, SensorStatus, SensorTrend

DEFAULT_TREND_EPSILON = 1.0


class SensorThreshold(AppBaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    min: float
    max: float

    @model_validator(mode="after")
    def _check_order(self) -> "SensorThreshold":
        if self.min > self.max:
            raise ValueError(f"threshold min ({self.min}) exceeds max ({self.max})")
        return self


class SensorState(AppBaseModel):
    """
    Live instrument state. Replaced (never mutated) on every tick by the
    classifier; the window holds the last readings, oldest first.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    id: str
    name: str = ""
    unit: str = ""
    value: float
    history: List[float] = Field(default_factory=list)
    threshold: SensorThreshold
    trend: SensorTrend = SensorTrend.STABLE
    status: SensorStatus = SensorStatus.OPTIMAL
    trend_epsilon: float = Field(default=DEFAULT_TREND_EPSILON, ge=0)


class SensorClassifyRequest(AppBaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    state: SensorState
    value: float


class SensorTickRequest(AppBaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    state: SensorState
    seed: Optional[int] = None
    variation: Optional[float] = Field(default=None, ge=0)
