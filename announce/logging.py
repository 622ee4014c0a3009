"""Basic logging configuration."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(debug: bool = False) -> None:
    """Configure logging for the application."""
    # Uvicorn keeps its own config for access logs
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    # Store activity (clears, new categories) is only interesting when debugging
    logging.getLogger("announce").setLevel(logging.DEBUG if debug else logging.INFO)
