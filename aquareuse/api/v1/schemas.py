# aquareuse/api/v1/schemas.py
# (Barrel File: 엔드포인트에서 사용하는 스키마를 한 곳에서 다시 내보냅니다)

from aquareuse.schemas.common import (
    AppBaseModel,
    OverallStatus,
    ReuseType,
    SensorStatus,
    SensorTrend,
    StageName,
)

from aquareuse.schemas.treatment import (
    WaterQualityParameters,
    TreatmentStageParameter,
    TreatmentStage,
    TreatmentMetrics,
    TreatmentSimulationResult,
    ThresholdsOut,
)

from aquareuse.schemas.sensor import (
    SensorThreshold,
    SensorState,
    SensorClassifyRequest,
    SensorTickRequest,
)
