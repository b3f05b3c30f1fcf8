#!/usr/bin/env python3
"""Run the comment board API under uvicorn.

Logfire is configured before the server starts so that import and
startup failures are reported too.
"""

import sys

import logfire
import uvicorn

from board.config import Settings
from board.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    configure_logfire(settings)

    logfire.info("Starting comment board API", public_url=settings.api.base_url)
    try:
        uvicorn.run(
            "board.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.exception("Comment board API failed to start", error_type=type(e).__name__)
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
