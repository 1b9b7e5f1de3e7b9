# aquareuse/api/v1/endpoints/health.py
from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

from aquareuse.core.config import settings

router = APIRouter(prefix="/health")


class HealthOut(BaseModel):
    status: str
    env: str


@router.get("", response_model=HealthOut)
def health_simple():
    return HealthOut(status="ok", env=settings.APP_ENV)
