# aquareuse/services/treatment/modules/secondary.py
# ✅ Secondary treatment: biological oxidation of organics
# ✅ BOD 미입력 시 COD 비율(0.5)로 추정

from __future__ import annotations

from typing import List, Tuple

from aquareuse.schemas.common import StageName
from aquareuse.schemas.treatment import TreatmentStageParameter, WaterQualityParameters
from aquareuse.services.treatment.modules.base import TreatmentStageModule, above
from aquareuse.services.treatment.specs import THRESHOLDS, resolve_bod


class SecondaryModule(TreatmentStageModule):
    """
    [Secondary Module]
    - COD > 150 mg/L  또는  BOD > 30 mg/L
    """

    stage_name = StageName.SECONDARY
    placeholder = "No secondary treatment needed"

    def checks(
        self, params: WaterQualityParameters
    ) -> List[Tuple[TreatmentStageParameter, str]]:
        limits = THRESHOLDS.secondary
        bod = resolve_bod(params.bod, params.cod)

        return [
            (
                above("Chemical Oxygen Demand", params.cod, limits.cod_mg_l, "mg/L"),
                "High COD levels - biological treatment required",
            ),
            (
                above("Biological Oxygen Demand", bod, limits.bod_mg_l, "mg/L"),
                "High BOD levels - aerobic/anaerobic digestion needed",
            ),
        ]
