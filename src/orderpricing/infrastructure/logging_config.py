"""Centralized logging configuration.

Library modules only ever call ``logging.getLogger(__name__)``; the CLI
is the one place that decides levels and handlers.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(level: int = logging.WARNING) -> None:
    """Send log records to stderr so they never mix with command output."""
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
