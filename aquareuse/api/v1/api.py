from fastapi import APIRouter

from aquareuse.api.v1.endpoints import health, sensors, treatment

api_router = APIRouter()

# ==============================================================================
# 1. Core Engine (처리 단계 판정)
# ==============================================================================
api_router.include_router(treatment.router, prefix="/treatment", tags=["Treatment"])

# ==============================================================================
# 2. Live Sensors (센서 상태 분류)
# ==============================================================================
api_router.include_router(sensors.router, prefix="/sensors", tags=["Sensors"])

# ==============================================================================
# 3. System (헬스 체크)
# ==============================================================================
api_router.include_router(health.router, tags=["Health"])
