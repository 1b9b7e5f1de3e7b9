# tests/test_treatment_engine.py
# Stage decision engine: threshold sets, derived estimates, audit trail.

from __future__ import annotations

import pytest

from aquareuse.schemas.common import OverallStatus, StageName
from aquareuse.services.treatment.engine import TreatmentEngine, evaluate, simulate_treatment
from aquareuse.services.treatment.specs import (
    THRESHOLDS,
    estimate_bod,
    estimate_tss,
    resolve_bod,
    resolve_tss,
)


def _param(stage, name):
    return next(p for p in stage.parameters if p.name == name)


# -----------------------------------------------------------------------------
# 1) scenarios
# -----------------------------------------------------------------------------
def test_clean_sample_needs_no_treatment(make_params):
    r = simulate_treatment(make_params())

    assert [s.required for s in r.stages] == [False, False, False]
    assert r.primary_treatment.reasons == ["No primary treatment needed"]
    assert r.secondary_treatment.reasons == ["No secondary treatment needed"]
    assert r.tertiary_treatment.reasons == ["No tertiary treatment needed"]
    assert r.estimated_efficiency == 0
    assert r.estimated_treatment_time == 0
    assert r.overall_status == OverallStatus.SAFE


def test_cod_100_without_bod_triggers_secondary_via_estimate(make_params):
    # bod = 100 * 0.5 = 50 > 30
    r = simulate_treatment(make_params(bod=None))

    assert r.primary_treatment.required is False
    assert r.secondary_treatment.required is True
    assert r.tertiary_treatment.required is False
    assert r.secondary_treatment.reasons == [
        "High BOD levels - aerobic/anaerobic digestion needed"
    ]
    assert _param(r.secondary_treatment, "Biological Oxygen Demand").value == pytest.approx(50.0)
    assert r.overall_status == OverallStatus.NEEDS_TREATMENT
    assert r.estimated_treatment_time == 6
    assert r.estimated_efficiency == 50


def test_all_stages_needed(make_params):
    r = simulate_treatment(
        make_params(turbidity=80, cod=200, bod=None, nitrogen=15, phosphorus=2, pH=9.0)
    )

    assert [s.required for s in r.stages] == [True, True, True]
    assert r.estimated_efficiency == 95
    assert r.estimated_treatment_time == 11
    assert r.total_stages_required == 3
    assert r.overall_status == OverallStatus.CRITICAL


def test_estimated_tss_below_limit_turbidity_alone_requires_primary(make_params):
    primary, _, _ = evaluate(make_params(turbidity=60))

    tss = _param(primary, "Total Suspended Solids")
    assert tss.value == pytest.approx(90.0)
    assert tss.exceeds_threshold is False
    assert _param(primary, "Turbidity").exceeds_threshold is True
    assert primary.required is True
    assert primary.reasons == [
        "High turbidity detected - physical screening and sedimentation needed"
    ]


def test_explicit_tss_overrides_estimate(make_params):
    primary, _, _ = evaluate(make_params(turbidity=10, tss=150))

    assert primary.required is True
    assert _param(primary, "Turbidity").exceeds_threshold is False
    assert _param(primary, "Total Suspended Solids").value == 150
    assert primary.reasons == ["High suspended solids - requires removal of large particles"]


def test_explicit_zero_is_not_treated_as_missing(make_params):
    primary, secondary, _ = evaluate(make_params(turbidity=80, tss=0, cod=100, bod=0))

    assert _param(primary, "Total Suspended Solids").value == 0
    assert _param(secondary, "Biological Oxygen Demand").value == 0
    assert secondary.required is False


# -----------------------------------------------------------------------------
# 2) strict comparisons
# -----------------------------------------------------------------------------
@pytest.mark.parametrize(
    "overrides",
    [
        {"turbidity": 50.0},
        {"tss": 100.0},
        {"cod": 150.0},
        {"bod": 30.0},
        {"nitrogen": 10.0},
        {"phosphorus": 1.0},
        {"pH": 6.5},
        {"pH": 8.5},
    ],
)
def test_values_at_threshold_do_not_exceed(make_params, overrides):
    r = simulate_treatment(make_params(**overrides))
    assert r.total_stages_required == 0
    assert all(not p.exceeds_threshold for s in r.stages for p in s.parameters)


@pytest.mark.parametrize("ph", [6.49, 8.51, 0.0, 14.0])
def test_ph_out_of_range_on_either_side(make_params, ph):
    _, _, tertiary = evaluate(make_params(pH=ph))
    assert tertiary.required is True
    assert tertiary.reasons == ["pH adjustment required for optimal discharge"]


# -----------------------------------------------------------------------------
# 3) audit trail
# -----------------------------------------------------------------------------
def test_audit_trail_lists_every_parameter(make_params):
    primary, secondary, tertiary = evaluate(make_params())

    assert primary.name == StageName.PRIMARY
    assert secondary.name == StageName.SECONDARY
    assert tertiary.name == StageName.TERTIARY

    assert [(p.name, p.threshold, p.unit) for p in primary.parameters] == [
        ("Turbidity", 50.0, "NTU"),
        ("Total Suspended Solids", 100.0, "mg/L"),
    ]
    assert [(p.name, p.threshold, p.unit) for p in secondary.parameters] == [
        ("Chemical Oxygen Demand", 150.0, "mg/L"),
        ("Biological Oxygen Demand", 30.0, "mg/L"),
    ]
    assert [(p.name, p.threshold, p.unit) for p in tertiary.parameters] == [
        ("Total Nitrogen", 10.0, "mg/L"),
        ("Total Phosphorus", 1.0, "mg/L"),
        ("pH Level", 6.5, ""),
    ]


def test_ph_record_reports_both_bounds(make_params):
    _, _, tertiary = evaluate(make_params(pH=9.0))
    ph = _param(tertiary, "pH Level")

    assert ph.threshold == THRESHOLDS.tertiary.ph_min
    assert ph.threshold_max == THRESHOLDS.tertiary.ph_max
    assert ph.exceeds_threshold is True
    assert _param(tertiary, "Total Nitrogen").threshold_max is None


def test_reasons_follow_parameter_order(make_params):
    _, _, tertiary = evaluate(make_params(nitrogen=12, phosphorus=3, pH=5.0))
    assert tertiary.reasons == [
        "High nitrogen levels - nitrification/denitrification required",
        "High phosphorus levels - chemical precipitation needed",
        "pH adjustment required for optimal discharge",
    ]


@pytest.mark.parametrize(
    "overrides",
    [
        {},
        {"turbidity": 51},
        {"cod": 151, "bod": None},
        {"pH": 4.0, "tss": 500},
        {"turbidity": 999, "cod": 999, "bod": None, "nitrogen": 99, "phosphorus": 9},
    ],
)
def test_required_iff_real_reason(make_params, overrides):
    for stage in simulate_treatment(make_params(**overrides)).stages:
        exceeded = [p for p in stage.parameters if p.exceeds_threshold]
        assert stage.required == bool(exceeded)
        if stage.required:
            assert len(stage.reasons) == len(exceeded)
            assert not any(r.startswith("No ") for r in stage.reasons)
        else:
            assert len(stage.reasons) == 1
            assert stage.reasons[0].endswith("treatment needed")


# -----------------------------------------------------------------------------
# 4) misc
# -----------------------------------------------------------------------------
def test_estimates():
    assert estimate_tss(60) == pytest.approx(90.0)
    assert estimate_bod(200) == pytest.approx(100.0)
    assert resolve_tss(None, 60) == pytest.approx(90.0)
    assert resolve_tss(12.0, 60) == 12.0
    assert resolve_bod(None, 80) == pytest.approx(40.0)
    assert resolve_bod(5.0, 80) == 5.0


def test_engine_is_deterministic_and_input_is_untouched(make_params):
    params = make_params(turbidity=75, tss=None)
    engine = TreatmentEngine()

    first = engine.run(params)
    second = engine.run(params)

    assert first == second
    assert first is not second
    assert params.tss is None
