"""Entry point for the Coaster API.

Loads settings from the environment, builds the application and serves
it with Uvicorn on port 8080.  ``ADMIN_PASSWORD`` must be set; when it
is missing the process exits before the listener is bound.

Usage:
    ADMIN_PASSWORD=secret python run.py
"""
import logging
import sys

from uvicorn import Config, Server

from coaster_api.app.core.config import ConfigurationError, Settings
from coaster_api.app.main import create_app


def main() -> int:
    """Start the server.  Returns the process exit code."""
    try:
        settings = Settings.from_env()
    except ConfigurationError as exc:
        logging.basicConfig(level=logging.ERROR)
        logging.error("Cannot start: %s", exc)
        return 1

    app = create_app(settings)
    logging.getLogger(__name__).info(
        "Server running on http://localhost:%s", settings.port
    )
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level="info")
    Server(config).run()
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        pass
