import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from tsanalyzer import config
from tsanalyzer.api import health, series
from tsanalyzer.observability.logging import setup_logging
from tsanalyzer.observability.metrics import MetricsMiddleware, metrics_router

logger = logging.getLogger(__name__)

# True between lifespan startup and shutdown
READY_FLAG = False


@asynccontextmanager
async def app_lifespan(app: FastAPI):
    global READY_FLAG
    READY_FLAG = True
    logger.info("%s %s ready", config.SERVICE_TITLE, config.SERVICE_VERSION)
    yield
    READY_FLAG = False
    logger.info("%s shutting down", config.SERVICE_TITLE)


def _serialize_error(err):
    # Validation error contexts may hold exception instances
    if isinstance(err, Exception):
        return str(err)
    if isinstance(err, dict):
        return {k: _serialize_error(v) for k, v in err.items()}
    if isinstance(err, list):
        return [_serialize_error(e) for e in err]
    return err


def create_app() -> FastAPI:
    setup_logging()
    app = FastAPI(
        title=config.SERVICE_TITLE,
        version=config.SERVICE_VERSION,
        lifespan=app_lifespan,
    )
    app.add_middleware(MetricsMiddleware)
    app.include_router(metrics_router)  # /metrics
    app.include_router(health.router)   # /health, /ready
    app.include_router(series.router)   # /series/*
    app.state.ready_flag = lambda: READY_FLAG

    # Malformed input is always a 400, never FastAPI's default 422
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning("Invalid request to %s: %d validation error(s)", request.url.path, len(exc.errors()))
        return JSONResponse(
            status_code=400,
            content={"detail": _serialize_error(exc.errors())},
        )

    return app


app = create_app()
