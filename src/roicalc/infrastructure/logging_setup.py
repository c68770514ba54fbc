from __future__ import annotations

import logging
from typing import Optional

from roicalc.infrastructure.config import SETTINGS

LOG_FORMAT = "%(asctime)s [roicalc] %(levelname)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    log_level = (level or SETTINGS.LOG_LEVEL or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format=LOG_FORMAT,
    )


__all__ = ["LOG_FORMAT", "configure_logging"]
