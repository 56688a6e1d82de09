"""Root logger configuration.

The package itself only creates module loggers; the application embedding
``AuctionService`` calls ``setup_logging()`` once at startup.
"""

import logging

from carauction.config import settings


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger once, from settings unless a level is given."""
    if level is None:
        level = "DEBUG" if settings.DEBUG else settings.LOG_LEVEL

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=settings.LOG_FORMAT,
    )
