# aquareuse/services/treatment/metrics.py
from __future__ import annotations

from aquareuse.schemas.common import OverallStatus
from aquareuse.schemas.treatment import TreatmentMetrics

# ============================================================
# Per-stage constants
# ============================================================
# processing time (h): sedimentation / biological / advanced polishing
PRIMARY_HOURS = 2
SECONDARY_HOURS = 6
TERTIARY_HOURS = 3

# pollutant removal credit (%)
PRIMARY_REMOVAL_PCT = 30
SECONDARY_REMOVAL_PCT = 50
TERTIARY_REMOVAL_PCT = 15
MAX_EFFICIENCY_PCT = 95


def treatment_time_hours(primary: bool, secondary: bool, tertiary: bool) -> int:
    hours = 0
    if primary:
        hours += PRIMARY_HOURS
    if secondary:
        hours += SECONDARY_HOURS
    if tertiary:
        hours += TERTIARY_HOURS
    return hours


def efficiency_pct(primary: bool, secondary: bool, tertiary: bool) -> int:
    efficiency = 0
    if primary:
        efficiency += PRIMARY_REMOVAL_PCT
    if secondary:
        efficiency += SECONDARY_REMOVAL_PCT
    if tertiary:
        efficiency += TERTIARY_REMOVAL_PCT
    return min(efficiency, MAX_EFFICIENCY_PCT)


def status_from_stage_count(stages_required: int) -> OverallStatus:
    if stages_required == 0:
        return OverallStatus.SAFE
    if stages_required <= 2:
        return OverallStatus.NEEDS_TREATMENT
    return OverallStatus.CRITICAL


def aggregate(primary: bool, secondary: bool, tertiary: bool) -> TreatmentMetrics:
    """Fold the three stage flags into time, efficiency, count and status."""
    stages_required = sum(1 for flag in (primary, secondary, tertiary) if flag)

    return TreatmentMetrics(
        overall_status=status_from_stage_count(stages_required),
        total_stages_required=stages_required,
        estimated_treatment_time=treatment_time_hours(primary, secondary, tertiary),
        estimated_efficiency=efficiency_pct(primary, secondary, tertiary),
    )
