"""Logging setup for programs embedding the reading tracker."""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once, using the application's format."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
