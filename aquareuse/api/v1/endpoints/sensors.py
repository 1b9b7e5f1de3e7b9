# aquareuse/api/v1/endpoints/sensors.py
from __future__ import annotations

import random
from typing import List

from fastapi import APIRouter, Depends
from loguru import logger

from aquareuse.api.v1.schemas import SensorClassifyRequest, SensorState, SensorTickRequest
from aquareuse.core.config import Settings, get_settings
from aquareuse.services.sensors.catalog import default_sensor_states
from aquareuse.services.sensors.classifier import classify
from aquareuse.services.sensors.simulator import simulate_tick

router = APIRouter(tags=["sensors"])


@router.get("", response_model=List[SensorState])
def list_sensors():
    return default_sensor_states()


@router.post("/classify", response_model=SensorState)
def classify_reading(
    request: SensorClassifyRequest, settings: Settings = Depends(get_settings)
):
    state = classify(request.state, request.value, capacity=settings.SENSOR_WINDOW_SIZE)
    logger.info(
        "[Sensor] {} value={} trend={} status={}",
        state.id,
        state.value,
        state.trend.value,
        state.status.value,
    )
    return state


@router.post("/tick", response_model=SensorState)
def tick(request: SensorTickRequest, settings: Settings = Depends(get_settings)):
    rng = random.Random(request.seed)
    variation = (
        request.variation if request.variation is not None else settings.SENSOR_VARIATION
    )
    return simulate_tick(
        request.state, rng, variation=variation, capacity=settings.SENSOR_WINDOW_SIZE
    )
