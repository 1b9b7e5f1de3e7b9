# aquareuse/services/treatment/engine.py
from __future__ import annotations

from typing import Dict, Tuple

from loguru import logger

from aquareuse.schemas.common import StageName
from aquareuse.schemas.treatment import (
    TreatmentSimulationResult,
    TreatmentStage,
    WaterQualityParameters,
)
from aquareuse.services.treatment.metrics import aggregate
from aquareuse.services.treatment.modules.base import TreatmentStageModule
from aquareuse.services.treatment.modules.primary import PrimaryModule
from aquareuse.services.treatment.modules.secondary import SecondaryModule
from aquareuse.services.treatment.modules.tertiary import TertiaryModule

StageVerdicts = Tuple[TreatmentStage, TreatmentStage, TreatmentStage]

# 평가 순서 고정: primary -> secondary -> tertiary
STAGE_ORDER = (StageName.PRIMARY, StageName.SECONDARY, StageName.TERTIARY)


class TreatmentEngine:
    """
    Stateless stage decision engine. Module instances hold no state, so one
    engine may serve any number of concurrent callers.
    """

    def __init__(self) -> None:
        self.modules: Dict[StageName, TreatmentStageModule] = {
            StageName.PRIMARY: PrimaryModule(),
            StageName.SECONDARY: SecondaryModule(),
            StageName.TERTIARY: TertiaryModule(),
        }

    def evaluate(self, params: WaterQualityParameters) -> StageVerdicts:
        primary, secondary, tertiary = (
            self.modules[name].evaluate(params) for name in STAGE_ORDER
        )
        return primary, secondary, tertiary

    def run(self, params: WaterQualityParameters) -> TreatmentSimulationResult:
        primary, secondary, tertiary = self.evaluate(params)
        metrics = aggregate(primary.required, secondary.required, tertiary.required)

        logger.debug(
            "Treatment decision: primary={} secondary={} tertiary={} -> {} ({}h, {}%)",
            primary.required,
            secondary.required,
            tertiary.required,
            metrics.overall_status.value,
            metrics.estimated_treatment_time,
            metrics.estimated_efficiency,
        )

        return TreatmentSimulationResult(
            primary_treatment=primary,
            secondary_treatment=secondary,
            tertiary_treatment=tertiary,
            overall_status=metrics.overall_status,
            total_stages_required=metrics.total_stages_required,
            estimated_treatment_time=metrics.estimated_treatment_time,
            estimated_efficiency=metrics.estimated_efficiency,
        )


_default_engine = TreatmentEngine()


def evaluate(params: WaterQualityParameters) -> StageVerdicts:
    return _default_engine.evaluate(params)


def simulate_treatment(params: WaterQualityParameters) -> TreatmentSimulationResult:
    return _default_engine.run(params)
