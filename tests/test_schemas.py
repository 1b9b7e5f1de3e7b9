# tests/test_schemas.py
# Boundary validation: bad input is rejected before the engine ever runs.

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from aquareuse.schemas.common import ReuseType
from aquareuse.schemas.sensor import SensorState, SensorThreshold
from aquareuse.schemas.treatment import WaterQualityParameters

BASE = {"turbidity": 1.0, "pH": 7.0, "cod": 1.0, "nitrogen": 1.0, "phosphorus": 1.0}


@pytest.mark.parametrize(
    "field, value",
    [
        ("turbidity", -0.01),
        ("cod", -5),
        ("nitrogen", -1),
        ("phosphorus", -1),
        ("pH", -0.1),
        ("pH", 14.01),
        ("tss", -1),
        ("bod", -1),
        ("tds", -1),
        ("turbidity", math.nan),
        ("cod", math.inf),
    ],
)
def test_out_of_domain_values_are_rejected(field, value):
    with pytest.raises(ValidationError):
        WaterQualityParameters(**{**BASE, field: value})


def test_ph_alias_and_field_name():
    a = WaterQualityParameters(**BASE)
    b = WaterQualityParameters(turbidity=1.0, ph=7.0, cod=1.0, nitrogen=1.0, phosphorus=1.0)
    assert a == b
    assert a.model_dump(by_alias=True)["pH"] == 7.0


def test_optional_fields_default_to_none():
    p = WaterQualityParameters(**BASE)
    assert p.tss is None
    assert p.bod is None
    assert p.tds is None
    assert p.reuse_type is None


def test_reuse_type_tag():
    p = WaterQualityParameters(**BASE, reuseType="potable")
    assert p.reuse_type == ReuseType.POTABLE


def test_parameters_are_frozen():
    p = WaterQualityParameters(**BASE)
    with pytest.raises(ValidationError):
        p.turbidity = 99.0


def test_sensor_threshold_order():
    with pytest.raises(ValidationError):
        SensorThreshold(min=5, max=1)
    assert SensorThreshold(min=1, max=1).max == 1


def test_sensor_state_rejects_non_finite_value():
    with pytest.raises(ValidationError):
        SensorState(id="x", value=math.nan, threshold=SensorThreshold(min=0, max=1))
