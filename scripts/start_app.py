#!/usr/bin/env python3
"""Serve the API with uvicorn.

Logging and Logfire are configured here, before the app module is
imported, so startup failures are reported too.
"""

import sys

import logfire
import uvicorn

from persona.config import Settings
from persona.util.logging import setup_logging
from persona.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Starting API server",
        host=settings.host,
        port=settings.port,
        environment=settings.environment,
    )
    try:
        uvicorn.run(
            "persona.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            # Voter identity reads X-Forwarded-For from the fronting proxy
            proxy_headers=True,
        )
    except Exception as e:
        logfire.error(
            "API server failed to start",
            error=str(e),
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
