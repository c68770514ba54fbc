# roicalc/infrastructure/config.py
from __future__ import annotations
from dataclasses import dataclass
import os


def _env_bool(name: str, default: bool) -> bool:
    """Read a boolean environment variable tolerantly."""
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() not in {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class Settings:
    LOG_LEVEL: str = os.getenv("ROI_LOG_LEVEL", "INFO")

    PAGE_TITLE: str = os.getenv(
        "ROI_PAGE_TITLE", "Legacy App Modernization ROI Calculator"
    )

    # Target of the "Get Free Consultation" button; empty hides the link.
    CONSULTATION_URL: str = os.getenv("ROI_CONSULTATION_URL", "")

    # Show the uncapped math next to the display figures.
    SHOW_RAW_METRICS: bool = _env_bool("ROI_SHOW_RAW_METRICS", True)


SETTINGS = Settings()
