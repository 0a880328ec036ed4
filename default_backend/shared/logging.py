"""
Logging configuration for the error pages service.

One line per resolution step (defaults taken, file served or missing),
in a single format on stdout so the proxy's pod logs can be grepped by
status code or file name. Logging must not change what a client
receives. Document bytes and mirrored header values are never logged.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> None:
    """Route the root logger to stdout at ``level``.

    Called once at start-up and again by ``create_app`` with the
    configured ``LOG_LEVEL``; ``force`` replaces the earlier handler.
    Unknown level names fall back to INFO.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    # uvicorn's access log would duplicate the responder's own line
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.WARNING)
