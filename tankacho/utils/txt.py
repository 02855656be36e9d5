"""
txt.py
-------------------
Poem text and CSV row helpers shared by the record mapper and the store.
"""
from __future__ import annotations

# --- Standard library imports ---
import re
from typing import List, Optional, Sequence

POEM_LINE_COUNT = 5

_LINE_BREAK_RE = re.compile(r"\r?\n")


def split_poem_lines(text: Optional[str]) -> List[str]:
    """
    input: a full poem as one string, lines separated by line breaks
    output: exactly POEM_LINE_COUNT strings
    process: split on \\n or \\r\\n, pad with "" and drop lines beyond the fifth
    """
    return pad_lines(_LINE_BREAK_RE.split(text or ""))


def pad_lines(lines: Sequence[Optional[str]]) -> List[str]:
    """
    input: any number of lines (None counts as empty)
    output: exactly POEM_LINE_COUNT strings
    """
    padded = [line or "" for line in list(lines)[:POEM_LINE_COUNT]]
    while len(padded) < POEM_LINE_COUNT:
        padded.append("")
    return padded


def is_blank_row(row: Sequence[str]) -> bool:
    """True for an empty row or one whose cells are all empty strings."""
    return not row or all(c == "" for c in row)


def cell(row: Sequence[str], index: int, default: str = "") -> str:
    """Positional cell lookup tolerant of short rows."""
    if index < len(row):
        return row[index]
    return default


def split_form_text(text: Optional[str]) -> List[str]:
    """
    input: the poem textarea contents as typed
    output: trimmed lines, not yet padded (so blank submissions can be detected)
    """
    return [line.strip() for line in _LINE_BREAK_RE.split(text or "")]
