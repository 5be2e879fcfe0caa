"""Standard Python logging configuration."""
from __future__ import annotations

import logging
import sys

from tsanalyzer import config

LEVEL = logging.getLevelName(config.LOG_LEVEL)
if not isinstance(LEVEL, int):
    LEVEL = logging.INFO


def setup_logging() -> None:
    """Configure standard Python logging.

    Call **exactly once** at app startup; later calls are no-ops.
    """
    if getattr(setup_logging, "_configured", False):  # type: ignore[attr-defined]
        return

    formatter = logging.Formatter(
        fmt='[%(asctime)s] [%(process)d] [%(levelname)s] %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S %z'
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(LEVEL)

    # Let uvicorn logs go through the root handler
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logger = logging.getLogger(name)
        logger.handlers.clear()
        logger.propagate = True
        logger.setLevel(LEVEL)

    logging.getLogger(__name__).debug("Logging configured at level %s", logging.getLevelName(LEVEL))
    setup_logging._configured = True  # type: ignore[attr-defined]
