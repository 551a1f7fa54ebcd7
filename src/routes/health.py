import logging
import os
import platform
import sys
import time
from collections.abc import Awaitable, Callable
from datetime import datetime, timezone

import psutil
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.config import settings
from src.database import check_database_health

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/health", tags=["health"])

DatabaseProbe = Callable[[], Awaitable[bool]]

# Дефолты конфигурации, которые отдаем, если переменная не задана
DEFAULT_MAX_FILE_SIZE = "5242880"
DEFAULT_CORS_ORIGIN = "http://localhost:5173"
DEFAULT_RATE_LIMIT_WINDOW = "900000"
DEFAULT_RATE_LIMIT_MAX = "100"

API_ENDPOINTS = ["/questions", "/health"]

# Dependency: в тестах подменяется через app.dependency_overrides
def get_database_probe() -> DatabaseProbe:
    return check_database_health

def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

def _elapsed_ms(start: float) -> str:
    return f"{round((time.perf_counter() - start) * 1000)}ms"

def _process_uptime(proc: psutil.Process) -> float:
    return time.time() - proc.create_time()

def _to_mb(value: int) -> str:
    return f"{round(value / 1024 / 1024)}MB"

def _error_response(start: float, error: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "success": False,
            "data": {
                "status": "unhealthy",
                "timestamp": _timestamp(),
                "error": str(error) or "Unknown error",
                "responseTime": _elapsed_ms(start),
            },
        },
    )

# GET /api/health: базовая проверка
@router.get("")
@router.get("/", include_in_schema=False)
async def health(probe: DatabaseProbe = Depends(get_database_probe)):
    start = time.perf_counter()

    try:
        db_healthy = await probe()

        health_data = {
            "status": "healthy" if db_healthy else "unhealthy",
            "timestamp": _timestamp(),
            "uptime": _process_uptime(psutil.Process(os.getpid())),
            "responseTime": _elapsed_ms(start),
            "version": settings.APP_VERSION,
            "services": {
                "database": "up" if db_healthy else "down",
                # Живы, раз сервер отвечает
                "fileParser": "up",
                "nlpService": "up",
                "scoringService": "up",
            },
            "configuration": {
                "maxFileSize": settings.MAX_FILE_SIZE or DEFAULT_MAX_FILE_SIZE,
                "corsOrigin": settings.CORS_ORIGIN or DEFAULT_CORS_ORIGIN,
                "rateLimitWindow": settings.RATE_LIMIT_WINDOW_MS or DEFAULT_RATE_LIMIT_WINDOW,
                "rateLimitMax": settings.RATE_LIMIT_MAX_REQUESTS or DEFAULT_RATE_LIMIT_MAX,
            },
            "environment": {
                "hasJwtSecret": bool(settings.JWT_SECRET),
                "hasDatabaseUrl": bool(settings.DATABASE_URL),
                "nodeEnv": settings.ENVIRONMENT,
            },
        }

        return JSONResponse(
            status_code=status.HTTP_200_OK if db_healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"success": db_healthy, "data": health_data},
        )
    except Exception as e:
        logger.error(f"Health check error: {e}")
        return _error_response(start, e)

# GET /api/health/detailed: расширенная диагностика
@router.get("/detailed")
async def health_detailed(probe: DatabaseProbe = Depends(get_database_probe)):
    start = time.perf_counter()

    try:
        db_start = time.perf_counter()
        db_healthy = await probe()
        db_response_time = _elapsed_ms(db_start)

        proc = psutil.Process(os.getpid())
        memory = proc.memory_info()
        cpu = proc.cpu_times()

        detailed = {
            "status": "healthy" if db_healthy else "unhealthy",
            "timestamp": _timestamp(),
            "responseTime": _elapsed_ms(start),
            "services": {
                "database": {
                    "status": "up" if db_healthy else "down",
                    "responseTime": db_response_time,
                },
                "api": {
                    "status": "up",
                    "endpoints": API_ENDPOINTS,
                },
            },
            "system": {
                "platform": sys.platform,
                "pythonVersion": platform.python_version(),
                "pid": proc.pid,
                "uptime": f"{round(_process_uptime(proc))}s",
                # Микросекунды
                "cpuUsage": {
                    "user": int(cpu.user * 1_000_000),
                    "system": int(cpu.system * 1_000_000),
                },
            },
            "memory": {
                "rss": _to_mb(memory.rss),
                "vms": _to_mb(memory.vms),
            },
            "environment": {
                "nodeEnv": settings.ENVIRONMENT,
                "port": str(settings.API_PORT),
                "hasRequiredEnvVars": {
                    "JWT_SECRET": bool(settings.JWT_SECRET),
                    "DATABASE_URL": bool(settings.DATABASE_URL),
                    "CORS_ORIGIN": bool(settings.CORS_ORIGIN),
                },
            },
        }

        return JSONResponse(
            status_code=status.HTTP_200_OK if db_healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"success": db_healthy, "data": detailed},
        )
    except Exception as e:
        logger.error(f"Detailed health check error: {e}")
        return _error_response(start, e)

# GET /api/health/ready: readiness probe для Kubernetes/Docker
@router.get("/ready")
async def health_ready(probe: DatabaseProbe = Depends(get_database_probe)):
    try:
        db_healthy = await probe()
    except Exception as e:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not ready", "reason": str(e) or "unknown error"},
        )

    if db_healthy:
        return JSONResponse(status_code=status.HTTP_200_OK, content={"status": "ready"})
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not ready", "reason": "database unavailable"},
    )

# GET /api/health/live: liveness: если сервер ответил, значит жив
@router.get("/live")
async def health_live():
    return {"status": "alive"}
