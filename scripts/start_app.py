#!/usr/bin/env python3
"""Start the engagement API with Logfire error tracking for startup errors."""

import sys
import logfire
import uvicorn

from devconnect.config import Settings
from devconnect.util.logging import setup_logging
from devconnect.util.observability import configure_logfire


def main() -> int:
    """Start the API server and log any startup errors to Logfire."""
    settings = Settings()

    # Logfire first so configuration errors raised by the app are captured
    configure_logfire(settings)
    setup_logging(settings)

    try:
        logfire.info(
            "Starting DevConnect engagement API",
            host=settings.host,
            port=settings.port,
            environment=settings.environment,
        )

        # uvicorn imports the app module, which configures Logfire again (no-op)
        uvicorn.run(
            "devconnect.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Engagement API startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
