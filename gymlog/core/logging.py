"""
Logging setup.

Every module logs through ``logging.getLogger(__name__)``; this only
configures the root handler once at application start.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger with a single stream handler."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)

    # uvicorn installs its own handlers; keep its access log at our level
    logging.getLogger("uvicorn.access").setLevel(level.upper())
