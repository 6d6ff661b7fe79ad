"""Logging setup for the API process."""

import logging
import os

_CONFIGURED = False

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Attach a stream handler to the root logger once and set levels.

    The level comes from the argument, then APP_LOG_LEVEL, then LOG_LEVEL,
    defaulting to INFO.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    level_name = (
        level or os.getenv("APP_LOG_LEVEL") or os.getenv("LOG_LEVEL") or "INFO"
    ).upper()
    resolved_level = getattr(logging, level_name, logging.INFO)

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    root.setLevel(resolved_level)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).setLevel(resolved_level)

    _CONFIGURED = True
