# aquareuse/core/logger.py
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from aquareuse.core.config import settings

LOG_FILE_NAME = "aquareuse_server.log"


def setup_logging(log_dir: Optional[Path] = None, console_level: str = "INFO") -> str:
    """
    Loguru를 사용하여 로그 설정을 초기화합니다.
    - Console: INFO 레벨 이상 (stderr)
    - File: DEBUG 레벨 이상 (aquareuse_server.log에 통합 기록)
    """
    target_dir = log_dir or settings.log_dir_path
    target_dir.mkdir(parents=True, exist_ok=True)
    log_file = target_dir / LOG_FILE_NAME

    # 1. 기존 핸들러 제거 (중복 방지)
    logger.remove()

    # 2. 콘솔 출력
    logger.add(
        sys.stderr,
        level=console_level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
    )

    # 3. 파일 출력
    # - 매일 자정(00:00)에 파일 회전, 10일치 보관, zip 압축
    logger.add(
        str(log_file),
        rotation="00:00",
        retention="10 days",
        compression="zip",
        level="DEBUG",
        enqueue=True,
        encoding="utf-8",
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{line} - {message}",
    )

    return str(log_file)
