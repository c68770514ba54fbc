"""Puts the project root and src/ on sys.path for `streamlit run app.py` without an install."""
from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
ASSETS = ROOT / "Assets"

for _path in (ROOT, SRC):
    if _path.exists() and str(_path) not in sys.path:
        sys.path.insert(0, str(_path))

__all__ = ["ROOT", "SRC", "ASSETS"]
