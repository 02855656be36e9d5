#!/usr/bin/env python3
"""
csv_codec.py
------------
Tokenizer and serializer for the notebook's CSV files.

Decoding is deliberately lenient and matches what earlier tools produced:

    1. The text is split into physical lines on ``\\n`` or ``\\r\\n``.
    2. Physical lines are joined with ``\\n`` into one logical row until the
       row holds an even number of ``"`` characters, so a quoted cell may
       span several physical lines.
    3. Each logical row is split into cells. ``"`` opens or closes quoting,
       ``""`` inside quotes is a literal quote, ``,`` outside quotes ends a
       cell.
    4. An unterminated quote at end of input still yields a final row.

Encoding quotes only the cells that need it (comma, quote or line break),
so ``decode(encode(rows)) == rows`` for any cell text using ``\\n`` breaks,
as long as no row is empty: ``[]`` encodes to an empty line, which decodes
as ``['']``.

Usage:
    from tankacho.pipeline.csv_codec import decode, encode

    rows = decode(path.read_text(encoding="utf-8"))
    text = encode([["id", "memo"], ["a", "has, comma"]])
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import csv
import io
import re
from typing import Iterable, Iterator, List, Sequence

_PHYSICAL_LINE_RE = re.compile(r"\r?\n")

QUOTE = '"'
DELIMITER = ","


def decode(text: str) -> List[List[str]]:
    r'''
    Parse CSV text into rows of cells.

    An empty line decodes as ``['']``, the same as a row holding one empty
    cell, so empty rows do not survive ``decode(encode(rows))``.

    Args:
        text: Full CSV file contents

    Returns:
        List of rows, each a list of cell strings

    Examples:
        >>> decode('"line1\nline2",b')
        [['line1\nline2', 'b']]
        >>> decode('"He said ""hi"""')
        [['He said "hi"']]
        >>> decode('a\n\nb')
        [['a'], [''], ['b']]
    '''
    return [split_cells(row) for row in logical_rows(text)]


def logical_rows(text: str) -> Iterator[str]:
    """
    Group physical lines into logical rows by quote parity.

    Yields:
        Each logical row with embedded line breaks joined by ``\\n``
    """
    buffer = None
    for line in _PHYSICAL_LINE_RE.split(text):
        buffer = line if not buffer else f"{buffer}\n{line}"
        if buffer.count(QUOTE) % 2 == 0:
            yield buffer
            buffer = None
    # Unterminated quote: emit what we have
    if buffer:
        yield buffer


def split_cells(row: str) -> List[str]:
    """
    Split one logical row into cells.

    A ``"`` seen inside quotes and immediately followed by another ``"`` is
    a literal quote; any other ``"`` toggles quoting.
    """
    cells: List[str] = []
    current: List[str] = []
    inside_quote = False
    i = 0
    length = len(row)
    while i < length:
        ch = row[i]
        if ch == QUOTE:
            if inside_quote and i + 1 < length and row[i + 1] == QUOTE:
                current.append(QUOTE)
                i += 1
            else:
                inside_quote = not inside_quote
        elif ch == DELIMITER and not inside_quote:
            cells.append("".join(current))
            current = []
        else:
            current.append(ch)
        i += 1
    cells.append("".join(current))
    return cells


def needs_quoting(value: str) -> bool:
    """True when a cell must be quoted to survive a round trip."""
    return any(ch in value for ch in (DELIMITER, QUOTE, "\n", "\r"))


def encode(rows: Iterable[Sequence[str]]) -> str:
    """
    Serialize rows of cells to CSV text.

    Cells are joined with ``,`` and rows with ``\\n``; there is no trailing
    newline. Cells containing a comma, a double quote or a line break are
    wrapped in quotes with inner quotes doubled.

    Args:
        rows: Rows of cell strings (None is written as an empty cell)

    Returns:
        CSV text
    """
    buffer = io.StringIO()
    writer = csv.writer(
        buffer,
        delimiter=DELIMITER,
        quotechar=QUOTE,
        doublequote=True,
        quoting=csv.QUOTE_MINIMAL,
        lineterminator="\n",
    )
    for row in rows:
        writer.writerow(["" if value is None else str(value) for value in row])
    text = buffer.getvalue()
    return text[:-1] if text.endswith("\n") else text
