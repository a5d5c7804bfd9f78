"""
Process-wide logging setup (stdlib `logging`).
"""

from __future__ import annotations

import logging

from . import config

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str | None = None) -> None:
    name = (level or config.log_level()).upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        numeric = logging.INFO
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    # asyncpg is chatty at DEBUG.
    logging.getLogger("asyncpg").setLevel(max(numeric, logging.INFO))
