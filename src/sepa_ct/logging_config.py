"""Logging setup for command-line entry points."""

from __future__ import annotations

import logging
import sys

from sepa_config import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str | None = None) -> None:
    """Configure console logging.

    - Console output with timestamps and module names
    - Log level for sepa_ct modules from settings unless given explicitly
    """
    level_name = (level or get_settings().log_level).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stderr,
        force=True,  # Override any existing config
    )

    logging.getLogger("sepa_ct").setLevel(log_level)
    logging.getLogger("sepa_config").setLevel(log_level)
