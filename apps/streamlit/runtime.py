"""Process setup for the Streamlit entrypoint, run before any `roicalc` import."""
from __future__ import annotations

import os
import sys
from importlib import import_module
from pathlib import Path

from dotenv import load_dotenv


def _project_root() -> Path:
    return Path(__file__).resolve().parents[2]


def prepare_runtime() -> Path:
    """Put `src/` on sys.path via `bootstrap`, read `.env` and return the root.

    `.env` has to be loaded here because `roicalc.infrastructure.config`
    reads the ROI_* variables once, at import time.
    """
    root = _project_root()
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    bootstrap = import_module("bootstrap")
    load_dotenv(bootstrap.ROOT / ".env")
    return bootstrap.ROOT


def chdir_to_root(root: Path) -> Path:
    """Run from the project root so `Assets/` resolves; returns the old cwd."""
    previous = Path.cwd()
    if previous != root:
        os.chdir(root)
    return previous


__all__ = ["chdir_to_root", "prepare_runtime"]
