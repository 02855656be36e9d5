#!/usr/bin/env python3
"""
parsers.py
--------------------
Tag parsing for every way tags enter the system.

Each source uses its own separator convention:
    - Native CSV: ``;``-joined (``spring;haru``)
    - Legacy entry CSV labels: any run of ``,`` ``;`` whitespace or ``、``
    - Form input: comma-separated (``spring, haru``)

All parsers trim each tag and drop empties, preserving input order and
duplicates.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from typing import Iterable, List, Optional

NATIVE_TAG_SEPARATOR = ";"
_LEGACY_LABEL_RE = re.compile(r"[,;\s、]+")


def _clean(parts: Iterable[str]) -> List[str]:
    return [p.strip() for p in parts if p and p.strip()]


def parse_native_tags(cell: Optional[str]) -> List[str]:
    """
    Split a native-CSV tags cell.

    Examples:
        >>> parse_native_tags("spring; haru ;;")
        ['spring', 'haru']
    """
    if not cell:
        return []
    return _clean(cell.split(NATIVE_TAG_SEPARATOR))


def parse_legacy_labels(cell: Optional[str]) -> List[str]:
    """
    Split a legacy labels cell on commas, semicolons, whitespace or ``、``.

    Examples:
        >>> parse_legacy_labels("春、恋 旅,夏")
        ['春', '恋', '旅', '夏']
    """
    if not cell:
        return []
    return _clean(_LEGACY_LABEL_RE.split(cell))


def parse_form_tags(text: Optional[str]) -> List[str]:
    """Split comma-separated tags typed into the entry form."""
    if not text:
        return []
    return _clean(text.split(","))


def join_native_tags(tags: Iterable[str]) -> str:
    """Inverse of parse_native_tags for export."""
    return NATIVE_TAG_SEPARATOR.join(tags)
