from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

router = APIRouter()


@router.get("/health")
async def health() -> dict[str, str]:
    """
    Liveness probe.
    Returns 200 OK while the process is alive; the service holds no state
    that could go bad, so there is nothing else to check.
    """
    return {"status": "ok"}


@router.get("/ready")
async def ready(request: Request):
    """
    Readiness probe.
    Returns 200 once the app lifespan has started, 503 otherwise.
    """
    ready_flag = getattr(request.app.state, "ready_flag", None)
    if ready_flag and ready_flag():
        return {"status": "ready"}
    return JSONResponse({"status": "not ready"}, status_code=HTTP_503_SERVICE_UNAVAILABLE)
