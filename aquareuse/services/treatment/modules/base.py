# aquareuse/services/treatment/modules/base.py
from abc import ABC, abstractmethod
from typing import List, Tuple

from aquareuse.schemas.common import StageName
from aquareuse.schemas.treatment import (
    TreatmentStage,
    TreatmentStageParameter,
    WaterQualityParameters,
)


class TreatmentStageModule(ABC):
    """
    모든 처리 단계(Primary/Secondary/Tertiary) 모듈의 공통 부모 클래스.
    Strategy 패턴의 Interface 역할을 합니다.
    """

    stage_name: StageName
    placeholder: str

    @abstractmethod
    def checks(
        self, params: WaterQualityParameters
    ) -> List[Tuple[TreatmentStageParameter, str]]:
        """
        입력: 수질 파라미터
        출력: (감사 기록, 초과 시 사유) 목록 - 평가한 모든 파라미터 포함
        """

    def evaluate(self, params: WaterQualityParameters) -> TreatmentStage:
        checks = self.checks(params)
        parameters = [record for record, _ in checks]
        reasons = [reason for record, reason in checks if record.exceeds_threshold]
        required = bool(reasons)

        return TreatmentStage(
            name=self.stage_name,
            required=required,
            reasons=reasons if required else [self.placeholder],
            parameters=parameters,
        )


def above(name: str, value: float, threshold: float, unit: str) -> TreatmentStageParameter:
    """Audit record for a strict upper-limit check (value > threshold)."""
    return TreatmentStageParameter(
        name=name,
        value=value,
        threshold=threshold,
        unit=unit,
        exceeds_threshold=value > threshold,
    )


def outside(
    name: str, value: float, lo: float, hi: float, unit: str
) -> TreatmentStageParameter:
    """Audit record for a two-sided check (value < lo or value > hi)."""
    return TreatmentStageParameter(
        name=name,
        value=value,
        threshold=lo,
        unit=unit,
        exceeds_threshold=value < lo or value > hi,
        threshold_max=hi,
    )
