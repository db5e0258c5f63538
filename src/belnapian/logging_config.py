from __future__ import annotations

import os
import sys
from datetime import datetime, timezone
from pathlib import Path

from loguru import logger

# file name -> levels it records
_FILE_SINKS = {
    "debug.json": ("DEBUG",),
    "info.json": ("INFO", "WARNING"),
    "error.json": ("ERROR", "CRITICAL"),
}


def configure_logging(
    service: str = "belnapian",
    version: str | None = None,
    environment: str | None = None,
) -> None:
    """Route belnapian logs for a command-line run.

    Records always reach stderr. Unless BELNAPIAN_DISABLE_FILE_LOGS=1,
    they are also written as JSON lines to
    ``$BELNAPIAN_LOG_DIR/YYYY-MM-DD/{debug,info,error}.json``
    (default directory: ./logs). Calling it again replaces the sinks.
    """
    logger.remove()
    logger.configure(
        extra={
            "service": service,
            "version": version or os.getenv("BELNAPIAN_VERSION", "0.1.0"),
            "env": environment or os.getenv("BELNAPIAN_ENV", "dev"),
        }
    )
    logger.add(sys.stderr, level="INFO", colorize=sys.stderr.isatty())

    if os.getenv("BELNAPIAN_DISABLE_FILE_LOGS") == "1":
        return

    day_dir = Path(os.getenv("BELNAPIAN_LOG_DIR", "logs")) / datetime.now(timezone.utc).strftime("%Y-%m-%d")
    day_dir.mkdir(parents=True, exist_ok=True)
    for filename, levels in _FILE_SINKS.items():
        logger.add(
            day_dir / filename,
            level=levels[0],
            filter=lambda record, levels=levels: record["level"].name in levels,
            serialize=True,
            rotation="10 MB",
            retention="30 days",
        )
