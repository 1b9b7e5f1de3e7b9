# aquareuse/services/treatment/modules/primary.py
# ✅ Primary treatment: physical screening + sedimentation
# ✅ TSS 미입력 시 탁도 상관식으로 추정 (명시값이 항상 우선)

from __future__ import annotations

from typing import List, Tuple

from aquareuse.schemas.common import StageName
from aquareuse.schemas.treatment import TreatmentStageParameter, WaterQualityParameters
from aquareuse.services.treatment.modules.base import TreatmentStageModule, above
from aquareuse.services.treatment.specs import THRESHOLDS, resolve_tss


class PrimaryModule(TreatmentStageModule):
    """
    [Primary Module]
    - turbidity > 50 NTU  또는  TSS > 100 mg/L
    """

    stage_name = StageName.PRIMARY
    placeholder = "No primary treatment needed"

    def checks(
        self, params: WaterQualityParameters
    ) -> List[Tuple[TreatmentStageParameter, str]]:
        limits = THRESHOLDS.primary
        tss = resolve_tss(params.tss, params.turbidity)

        return [
            (
                above("Turbidity", params.turbidity, limits.turbidity_ntu, "NTU"),
                "High turbidity detected - physical screening and sedimentation needed",
            ),
            (
                above("Total Suspended Solids", tss, limits.tss_mg_l, "mg/L"),
                "High suspended solids - requires removal of large particles",
            ),
        ]
