"""
Utilities package for Tankachō.

- dates: Legacy date-string normalization
- parsers: Tag/label splitting for the different input sources
- txt: Poem line splitting and row helpers

Import commonly-used utilities directly from this package:
    from tankacho.utils import normalize_era, split_poem_lines
"""

from .dates import (
    normalize_era,
    normalize_dashed,
    today_prefix,
)

from .parsers import (
    parse_native_tags,
    parse_legacy_labels,
    parse_form_tags,
    join_native_tags,
)

from .txt import (
    split_poem_lines,
    pad_lines,
    is_blank_row,
    cell,
    split_form_text,
)

__all__ = [
    # Dates
    "normalize_era",
    "normalize_dashed",
    "today_prefix",
    # Parsers
    "parse_native_tags",
    "parse_legacy_labels",
    "parse_form_tags",
    "join_native_tags",
    # Text
    "split_poem_lines",
    "pad_lines",
    "is_blank_row",
    "cell",
    "split_form_text",
]
