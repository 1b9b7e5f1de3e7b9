# aquareuse/api/v1/endpoints/treatment.py
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query
from loguru import logger

from aquareuse.api.v1.schemas import (
    ReuseType,
    ThresholdsOut,
    TreatmentSimulationResult,
    WaterQualityParameters,
)
from aquareuse.services.treatment.engine import simulate_treatment
from aquareuse.services.treatment.specs import THRESHOLDS

router = APIRouter(tags=["treatment"])


def _run(params: WaterQualityParameters) -> TreatmentSimulationResult:
    result = simulate_treatment(params)
    logger.info(
        "🚀 [Treatment] stages={} status={}",
        result.total_stages_required,
        result.overall_status.value,
    )
    return result


# -----------------------------------------------------------------------------
# Endpoints
# -----------------------------------------------------------------------------
@router.post("/simulate", response_model=TreatmentSimulationResult)
def simulate_from_body(params: WaterQualityParameters):
    return _run(params)


@router.get("/simulate", response_model=TreatmentSimulationResult)
def simulate_from_query(
    turbidity: float = Query(0.0),
    ph: float = Query(7.0, alias="pH"),
    cod: float = Query(0.0),
    tds: float = Query(0.0),
    nitrogen: float = Query(0.0),
    phosphorus: float = Query(0.0),
    tss: Optional[float] = Query(None),
    bod: Optional[float] = Query(None),
    reuse_type: Optional[ReuseType] = Query(None, alias="reuseType"),
):
    """Dashboard-style entry point: parameters come in the query string."""
    params = WaterQualityParameters(
        turbidity=turbidity,
        ph=ph,
        cod=cod,
        tds=tds,
        nitrogen=nitrogen,
        phosphorus=phosphorus,
        tss=tss,
        bod=bod,
        reuse_type=reuse_type,
    )
    return _run(params)


@router.get("/thresholds", response_model=ThresholdsOut)
def get_thresholds():
    return ThresholdsOut(**THRESHOLDS.as_dict())
