# aquareuse/core/config.py
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, List, Union

from pydantic import Field, AnyHttpUrl, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 환경 설정."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    # =========================================================
    # 1. 프로젝트 기본 정보
    # =========================================================
    PROJECT_NAME: str = Field(
        default="AquaReuse API", description="Swagger UI 등에 표시될 프로젝트 이름"
    )
    API_V1_STR: str = Field(default="/api/v1", description="API 버전 Prefix")

    APP_ENV: Literal["local", "dev", "test", "prod"] = Field(
        default="local",
        description="애플리케이션 실행 환경 (local/dev/test/prod)",
    )

    # =========================================================
    # 2. CORS (대시보드 프론트엔드 연동)
    # =========================================================
    BACKEND_CORS_ORIGINS: List[AnyHttpUrl] = Field(
        default=[], description="CORS 허용 도메인 목록 (예: http://localhost:3000)"
    )

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        """문자열로 들어온 CORS 설정을 리스트로 변환"""
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, (list, str)):
            return v
        raise ValueError(v)

    # =========================================================
    # 3. 로그
    # =========================================================
    LOG_DIR: str = Field(
        default=".logs", description="loguru 파일 로그 디렉터리 (상대/절대 경로 모두 허용)"
    )

    # =========================================================
    # 4. 센서 시뮬레이션
    # =========================================================
    SENSOR_WINDOW_SIZE: int = Field(
        default=5, ge=1, description="센서 히스토리 윈도우 크기 (FIFO)"
    )
    SENSOR_TICK_SEC: float = Field(
        default=3.0, gt=0, description="CLI 센서 루프의 tick 간격 (초)"
    )
    SENSOR_VARIATION: float = Field(
        default=5.0, ge=0, description="tick 당 랜덤 워크 변동폭 (±variation/2)"
    )

    # =========================================================
    # 5. Path 편의 프로퍼티
    # =========================================================
    @property
    def log_dir_path(self) -> Path:
        """로그 디렉터리 절대 경로 (Path 객체)."""
        return Path(self.LOG_DIR).resolve()


@lru_cache
def get_settings() -> Settings:
    """FastAPI Depends용 싱글톤 Settings 인스턴스."""
    return Settings()


# 전역 설정 객체
settings = get_settings()
