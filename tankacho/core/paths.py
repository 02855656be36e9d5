#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants for the Tankachō project.

The project structure:
    ROOT/
    ├── tankacho/      # Package code
    ├── data/          # Personal data (store database, exports)
    └── logs/          # Application logs

Every CLI command accepts ``--store`` and ``--log-dir`` to override these
defaults for a single invocation.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path


def _get_project_root() -> Path:
    """
    Determine project root directory.

    Assumes this file is at ROOT/tankacho/core/paths.py.

    Returns:
        Path object for project root
    """
    return Path(__file__).resolve().parent.parent.parent


# ----- Project directory -----
ROOT: Path = _get_project_root()
DATA_DIR = ROOT / "data"

# --- Store ---
STORE_PATH = DATA_DIR / "tankacho.db"

# --- Interchange ---
EXPORT_DIR = DATA_DIR / "exports"
DEFAULT_EXPORT_NAME = "tanka_entries.csv"

# ---- Logs ----
LOG_DIR = ROOT / "logs"
