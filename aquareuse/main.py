# aquareuse/main.py
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Dict, List

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from aquareuse.api.v1.api import api_router
from aquareuse.core.config import settings
from aquareuse.core.errors import register_exception_handlers
from aquareuse.core.logger import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    log_path = setup_logging()
    logger.info(f"AquaReuse API up (env={settings.APP_ENV}, log={log_path})")
    yield
    logger.info("AquaReuse API stopped")


def _cors_origins() -> List[str]:
    # 출처 목록이 비어 있으면 대시보드 개발용으로 전체 허용
    return [str(o).rstrip("/") for o in settings.BACKEND_CORS_ORIGINS] or ["*"]


app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    lifespan=lifespan,
)
register_exception_handlers(app)
app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(api_router, prefix=settings.API_V1_STR)


@app.get("/", include_in_schema=False)
def root() -> Dict[str, str]:
    """API 안내: 문서 경로와 주요 엔드포인트."""
    return {
        "service": settings.PROJECT_NAME,
        "docs": "/docs",
        "simulate": f"{settings.API_V1_STR}/treatment/simulate",
        "sensors": f"{settings.API_V1_STR}/sensors",
    }


@app.get("/health", include_in_schema=False)
def liveness() -> Dict[str, str]:
    return {"status": "ok"}
