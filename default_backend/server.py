"""
Server bootstrap.

Loads configuration, builds the application and serves it with uvicorn
on the fixed listen address. Start-up failures are fatal: they are
logged and the process exits non-zero.
"""

import logging
import sys

import uvicorn

from default_backend.core.config import LISTEN_HOST, LISTEN_PORT, load_settings
from default_backend.domain.pages.errors import EnvironmentLoadError
from default_backend.main import create_app
from default_backend.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    configure_logging()

    try:
        settings = load_settings()
    except EnvironmentLoadError as exc:
        logger.critical("%s", exc.message)
        sys.exit(1)

    app = create_app(settings)

    logger.info("Listening on %s:%d", LISTEN_HOST, LISTEN_PORT)
    try:
        # uvicorn logs a failed bind itself and exits with status 1
        uvicorn.run(app, host=LISTEN_HOST, port=LISTEN_PORT, log_config=None)
    except OSError as exc:
        logger.critical("Could not listen on %s:%d: %s", LISTEN_HOST, LISTEN_PORT, exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
