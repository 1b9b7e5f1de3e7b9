# aquareuse/services/treatment/modules/tertiary.py
# ✅ Tertiary treatment: nutrient removal + pH polishing before discharge/reuse

from __future__ import annotations

from typing import List, Tuple

from aquareuse.schemas.common import StageName
from aquareuse.schemas.treatment import TreatmentStageParameter, WaterQualityParameters
from aquareuse.services.treatment.modules.base import (
    TreatmentStageModule,
    above,
    outside,
)
from aquareuse.services.treatment.specs import THRESHOLDS


class TertiaryModule(TreatmentStageModule):
    """
    [Tertiary Module]
    - nitrogen > 10 mg/L, phosphorus > 1 mg/L, pH 6.5~8.5 범위 이탈
    - pH 기록은 threshold=하한, threshold_max=상한
    """

    stage_name = StageName.TERTIARY
    placeholder = "No tertiary treatment needed"

    def checks(
        self, params: WaterQualityParameters
    ) -> List[Tuple[TreatmentStageParameter, str]]:
        limits = THRESHOLDS.tertiary

        return [
            (
                above("Total Nitrogen", params.nitrogen, limits.nitrogen_mg_l, "mg/L"),
                "High nitrogen levels - nitrification/denitrification required",
            ),
            (
                above("Total Phosphorus", params.phosphorus, limits.phosphorus_mg_l, "mg/L"),
                "High phosphorus levels - chemical precipitation needed",
            ),
            (
                outside("pH Level", params.ph, limits.ph_min, limits.ph_max, ""),
                "pH adjustment required for optimal discharge",
            ),
        ]
