# aquareuse/schemas/common.py
from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class AppBaseModel(BaseModel):
    """모든 모델의 부모 클래스: V2 설정 적용 (JSON은 camelCase, 입력은 양쪽 허용)"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        from_attributes=True,
    )


class OverallStatus(str, Enum):
    SAFE = "safe"
    NEEDS_TREATMENT = "needs-treatment"
    CRITICAL = "critical"


class StageName(str, Enum):
    PRIMARY = "Primary Treatment"
    SECONDARY = "Secondary Treatment"
    TERTIARY = "Tertiary Treatment"


class ReuseType(str, Enum):
    IRRIGATION = "irrigation"
    INDUSTRIAL = "industrial"
    POTABLE = "potable"
    LANDSCAPE = "landscape"
    COOLING = "cooling"
    TOILET = "toilet"


class SensorTrend(str, Enum):
    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class SensorStatus(str, Enum):
    OPTIMAL = "optimal"
    GOOD = "good"
    WARNING = "warning"
    CRITICAL = "critical"
