# aquareuse/schemas/treatment.py
# =============================================================================
# AquaReuse Treatment Schemas (Pydantic v2)
#
# Key Policies:
# - Python attributes are snake_case, JSON uses the dashboard's camelCase keys.
# - Input parameters are validated at the boundary (non-negative, pH 0-14,
#   finite). The engine itself never validates.
# - Results are frozen: created fresh per evaluation, never mutated.
# =============================================================================

from __future__ import annotations

from typing import List, Optional

from pydantic import ConfigDict, Field

from .common import AppBaseModel, OverallStatus, ReuseType, StageName


# =============================================================================
# Input
# =============================================================================
class WaterQualityParameters(AppBaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    turbidity: float = Field(..., ge=0, description="Turbidity (NTU)")
    ph: float = Field(..., alias="pH", ge=0, le=14, description="pH (0-14)")
    cod: float = Field(..., ge=0, description="Chemical Oxygen Demand (mg/L)")
    nitrogen: float = Field(..., ge=0, description="Total nitrogen (mg/L)")
    phosphorus: float = Field(..., ge=0, description="Total phosphorus (mg/L)")

    # 없으면 엔진이 추정값 사용 (tss <- turbidity, bod <- cod)
    tss: Optional[float] = Field(default=None, ge=0, description="Total Suspended Solids (mg/L)")
    bod: Optional[float] = Field(default=None, ge=0, description="Biological Oxygen Demand (mg/L)")
    tds: Optional[float] = Field(default=None, ge=0, description="Total Dissolved Solids (mg/L)")
    reuse_type: Optional[ReuseType] = None


# =============================================================================
# Output
# =============================================================================
class TreatmentStageParameter(AppBaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    value: float
    threshold: float
    unit: str
    exceeds_threshold: bool
    # 양방향 비교(pH)에서만 사용하는 상한값
    threshold_max: Optional[float] = None


class TreatmentStage(AppBaseModel):
    model_config = ConfigDict(frozen=True)

    name: StageName
    required: bool
    reasons: List[str] = Field(default_factory=list, alias="reason")
    parameters: List[TreatmentStageParameter] = Field(default_factory=list)


class TreatmentMetrics(AppBaseModel):
    """Aggregate metrics folded from the three stage verdicts."""

    model_config = ConfigDict(frozen=True)

    overall_status: OverallStatus
    total_stages_required: int = Field(..., ge=0, le=3)
    estimated_treatment_time: int = Field(..., ge=0, description="hours")
    estimated_efficiency: int = Field(..., ge=0, le=95, description="percent")


class TreatmentSimulationResult(AppBaseModel):
    model_config = ConfigDict(frozen=True)

    primary_treatment: TreatmentStage
    secondary_treatment: TreatmentStage
    tertiary_treatment: TreatmentStage

    overall_status: OverallStatus
    total_stages_required: int = Field(..., ge=0, le=3)
    estimated_treatment_time: int = Field(..., ge=0, description="hours")
    estimated_efficiency: int = Field(..., ge=0, le=95, description="percent")

    @property
    def stages(self) -> List[TreatmentStage]:
        return [self.primary_treatment, self.secondary_treatment, self.tertiary_treatment]


class ThresholdsOut(AppBaseModel):
    primary: dict[str, float]
    secondary: dict[str, float]
    tertiary: dict[str, float]
