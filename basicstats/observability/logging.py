"""Standard Python logging configuration."""
from __future__ import annotations

import logging
import sys
from typing import IO, Optional

from basicstats.config import LOG_LEVEL

def setup_logging(stream: Optional[IO[str]] = None, level: Optional[str] = None) -> None:
    """Configure standard Python logging.

    The HTTP service logs to stdout at ``LOG_LEVEL``. The CLI passes stderr and
    its own level so the report on stdout stays clean. Calling again with the
    same arguments is a no-op.
    """
    stream = sys.stdout if stream is None else stream
    level = (level or LOG_LEVEL).upper()
    if getattr(setup_logging, "_configured", None) == (id(stream), level):  # type: ignore[attr-defined]
        return

    # Create a standard formatter with gunicorn-like brackets
    formatter = logging.Formatter(
        fmt='[%(asctime)s] [%(process)d] [%(levelname)s] %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S %z'
    )

    handler = logging.StreamHandler(stream)
    handler.setFormatter(formatter)

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    # Configure uvicorn loggers to propagate to root logger
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logger = logging.getLogger(name)
        logger.handlers.clear()  # Remove any existing handlers
        logger.propagate = True  # Propagate logs to root logger
        logger.setLevel(level)

    setup_logging._configured = (id(stream), level)  # type: ignore[attr-defined]
