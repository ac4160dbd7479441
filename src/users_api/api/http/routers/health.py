"""Health check endpoints router for monitoring service availability."""

from typing import Any

from fastapi import APIRouter, Request, status
from starlette.responses import JSONResponse

from src.users_api.api.http.app_data import ApplicationDependencies
from src.users_api.runtime.context import get_config

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health() -> dict[str, str]:
    """Liveness probe: 200 as long as the process is serving requests."""
    return {"status": "healthy", "service": get_config().app.name}


@router.get("/ready", response_model=None)
async def readiness(request: Request) -> dict[str, Any] | JSONResponse:
    """Readiness probe: 200 when user storage is reachable, 503 otherwise."""
    app_deps: ApplicationDependencies | None = getattr(
        request.app.state, "app_dependencies", None
    )

    checks: dict[str, dict[str, Any]] = {}
    all_healthy = True

    if app_deps is None:
        checks["storage"] = {"status": "unhealthy", "error": "application not started"}
        all_healthy = False
    elif app_deps.database_service is not None:
        try:
            db_healthy = app_deps.database_service.health_check()
            checks["storage"] = {
                "status": "healthy" if db_healthy else "unhealthy",
                "type": app_deps.database_service.engine.dialect.name,
            }
            all_healthy = db_healthy
        except Exception as e:
            checks["storage"] = {"status": "unhealthy", "error": str(e)}
            all_healthy = False
    else:
        checks["storage"] = {"status": "healthy", "type": "memory"}

    body = {"status": "ready" if all_healthy else "not_ready", "checks": checks}
    if not all_healthy:
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=body)
    return body
