#!/usr/bin/env python3
"""Start the FastAPI application with Logfire error tracking for startup errors."""

import sys

import logfire
import uvicorn

from stance.config import Settings
from stance.util.error import ConfigurationError
from stance.util.logging import setup_logging
from stance.util.observability import configure_logfire

DEFAULT_ADMIN_SECRET = "CHANGE_ME_IN_PRODUCTION_0123456789abcdef"


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        if (
            settings.environment in ("staging", "production")
            and settings.admin.token_secret == DEFAULT_ADMIN_SECRET
        ):
            raise ConfigurationError("ADMIN__TOKEN_SECRET must be set outside development")

        logfire.info("Starting FastAPI application", port=settings.port)

        uvicorn.run(
            "stance.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
