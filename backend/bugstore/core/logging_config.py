"""
Logging setup

Modules log through ``logging.getLogger(__name__)``; this only wires the
root handler, once, from the configured level and format.
"""
import logging
from typing import Optional

from dotenv import load_dotenv

from bugstore.core.config import settings


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging for scripts and local runs

    Args:
        level: Overrides settings.LOG_LEVEL (e.g. "DEBUG")
    """
    load_dotenv()

    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=settings.LOG_FORMAT
    )
