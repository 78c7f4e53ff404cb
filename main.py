"""
Compass Capacity Engine entry point.

    python main.py                     # reads COMPASS_HOST / COMPASS_PORT
    uvicorn main:app --port 8000       # behind a process manager
"""

from __future__ import annotations

import os

import structlog
import uvicorn

from src.api import create_app
from src.lib.logging import setup_logging

setup_logging()
app = create_app()

log = structlog.get_logger("compass.main")


def run() -> None:
    host = os.getenv("COMPASS_HOST", "127.0.0.1")
    port = int(os.getenv("COMPASS_PORT", "8000"))
    dev_mode = os.getenv("COMPASS_DEV_MODE") == "1"

    log.info("starting", host=host, port=port, dev_mode=dev_mode)
    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=dev_mode,
        log_config=None,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    run()
