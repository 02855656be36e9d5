#!/usr/bin/env python3
"""
dates.py
--------------------
Normalization of the date strings found in legacy CSV exports.

Two textual formats are recognized:
    - Era style, as written by the old entry export: ``2023年4月5日``
    - Dashed with optional padding, from the old series export: ``2023-4-5``

Both normalizers are total functions. Anything they do not recognize is
returned unchanged; a non-matching date is never an error.

Functions:
    normalize_era: ``<Y>年<M>月<D>日`` -> ``YYYY-MM-DD``
    normalize_dashed: ``<Y>-<M>-<D>`` -> ``YYYY-MM-DD``
    today_prefix: ``YYYY-MM-DD`` prefix used to match entries on a day
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from datetime import date, datetime
from typing import Union

_ERA_RE = re.compile(r"(\d{4})年(\d{1,2})月(\d{1,2})日")
_DASHED_RE = re.compile(r"(\d{4})-(\d{1,2})-(\d{1,2})")


def _format_match(match: "re.Match[str]") -> str:
    year, month, day = match.groups()
    return f"{year}-{month.zfill(2)}-{day.zfill(2)}"


def normalize_era(value: str) -> str:
    """
    Convert ``<year>年<month>月<day>日`` into ``YYYY-MM-DD``.

    Month and day may be unpadded. The pattern is searched for anywhere in
    the string, so a trailing time of day is dropped.

    Args:
        value: Raw date cell

    Returns:
        Zero-padded ISO date, or ``value`` unchanged if it does not match

    Examples:
        >>> normalize_era("2023年4月5日")
        '2023-04-05'
        >>> normalize_era("not a date")
        'not a date'
    """
    if not value:
        return value
    match = _ERA_RE.search(value)
    return _format_match(match) if match else value


def normalize_dashed(value: str) -> str:
    """
    Re-emit ``<year>-<month>-<day>`` with zero-padded month and day.

    Examples:
        >>> normalize_dashed("2023-4-5")
        '2023-04-05'
        >>> normalize_dashed("2023-04-05")
        '2023-04-05'
        >>> normalize_dashed("yesterday")
        'yesterday'
    """
    if not value:
        return value
    match = _DASHED_RE.search(value)
    return _format_match(match) if match else value


def today_prefix(day: Union[date, datetime, str]) -> str:
    """``YYYY-MM-DD`` for a date, datetime or ISO string."""
    if isinstance(day, datetime):
        return day.date().isoformat()
    if isinstance(day, date):
        return day.isoformat()
    return str(day)[:10]
