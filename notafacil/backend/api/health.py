"""
Health Check Endpoints.

Provides liveness, readiness, and detailed health checks.

Endpoints:
- /health: Liveness check (process running)
- /health/ready: Readiness check (database reachable)
- /health/detailed: Component status plus application info (for debugging)
"""

import asyncio
from typing import Any

from fastapi import APIRouter, HTTPException
from sqlalchemy import text

from notafacil.backend.core.config import get_app_config
from notafacil.backend.core.logging import get_logger
from notafacil.backend.core.utils import utc_now

router = APIRouter()
logger = get_logger(__name__)


async def check_database() -> dict[str, Any]:
    """
    Check database connectivity.

    Returns:
        Dict with status, latency, and optional error message
    """
    from notafacil.backend.core.database import get_db_session

    try:
        start = utc_now()
        async for session in get_db_session():
            await session.execute(text("SELECT 1"))
            break

        latency_ms = int((utc_now() - start).total_seconds() * 1000)
        return {
            "status": "healthy",
            "latency_ms": latency_ms,
        }

    except Exception as e:
        logger.warning("Database health check failed", extra={"error": str(e)})
        return {
            "status": "unhealthy",
            "error": str(e),
        }


async def _run_checks(timeout: float) -> dict[str, dict[str, Any]]:
    try:
        async with asyncio.timeout(timeout):
            db_result = await check_database()
    except TimeoutError:
        logger.warning("Database health check timed out", extra={"timeout_seconds": timeout})
        db_result = {"status": "unhealthy", "error": f"timed out after {timeout}s"}

    return {"database": db_result}


@router.get("/health")
async def health_check() -> dict[str, str]:
    """
    Liveness check.

    Returns 200 if the process is running. No dependency checks.
    """
    return {"status": "healthy"}


@router.get("/health/ready")
async def readiness_check() -> dict[str, Any]:
    """
    Readiness check.

    Returns 200 if the database answers within the configured timeout,
    503 otherwise.
    """
    timeout = get_app_config().observability.health_checks.ready_timeout_seconds
    checks = await _run_checks(timeout)

    unhealthy_checks = [
        name for name, check in checks.items()
        if check.get("status") == "unhealthy"
    ]

    if unhealthy_checks:
        logger.warning(
            "Readiness check failed",
            extra={"unhealthy": unhealthy_checks, "checks": checks},
        )
        raise HTTPException(
            status_code=503,
            detail={
                "status": "unhealthy",
                "checks": checks,
                "timestamp": utc_now().isoformat(),
            },
        )

    return {
        "status": "healthy",
        "checks": checks,
        "timestamp": utc_now().isoformat(),
    }


@router.get("/health/detailed")
async def detailed_health_check() -> dict[str, Any]:
    """Component-by-component status plus application info. Always 200."""
    app_config = get_app_config()
    app_settings = app_config.application
    checks = await _run_checks(app_config.observability.health_checks.ready_timeout_seconds)

    statuses = [check.get("status") for check in checks.values()]
    overall_status = "unhealthy" if "unhealthy" in statuses else "healthy"

    return {
        "status": overall_status,
        "application": {
            "name": app_settings.name,
            "environment": app_settings.environment,
            "debug": app_settings.debug,
            "version": app_settings.version,
        },
        "checks": checks,
        "timestamp": utc_now().isoformat(),
    }
