#!/usr/bin/env python3
"""
csv_configs.py
-------------------------

Declarative layout of the three CSV schemas the notebook understands.

Native:
    id,date,line1..line5,tags,category,seriesId,memo,status

Legacy entry export (import only):
    短歌,メモ,ラベル,作成日,更新日,完成日
    Dates are written as ``2023年4月5日``; an incomplete poem has
    ``(未完成)`` in the completion column.

Legacy series export (import only):
    連作名,説明,作成日,更新日,<poem 1>,<poem 2>,...
    Dates are written as ``2023-4-5``; one trailing column per poem slot.
"""

# ----- Native -----
NATIVE_HEADER = [
    "id",
    "date",
    "line1",
    "line2",
    "line3",
    "line4",
    "line5",
    "tags",
    "category",
    "seriesId",
    "memo",
    "status",
]


class NativeColumns:
    ID = 0
    DATE = 1
    FIRST_LINE = 2
    LAST_LINE = 6
    TAGS = 7
    CATEGORY = 8
    SERIES_ID = 9
    MEMO = 10
    STATUS = 11


# ----- Legacy entry export -----
LEGACY_ENTRY_FIRST_LABEL = "短歌"
LEGACY_ENTRY_MARKER_LABEL = "メモ"
INCOMPLETE_MARKER = "(未完成)"
LEGACY_ENTRY_ID_TEMPLATE = "import-{batch}-{row}"


class LegacyEntryColumns:
    POEM = 0
    MEMO = 1
    LABELS = 2
    CREATED = 3
    UPDATED = 4
    COMPLETED = 5


# ----- Legacy series export -----
LEGACY_SERIES_FIRST_LABEL = "連作名"
LEGACY_SERIES_MARKER_LABEL = "説明"
LEGACY_SERIES_ID_TEMPLATE = "series-{batch}-{row}"
LEGACY_SERIES_ENTRY_ID_TEMPLATE = "import-{series_id}-{offset}"


class LegacySeriesColumns:
    NAME = 0
    DESCRIPTION = 1
    CREATED = 2
    UPDATED = 3
    FIRST_POEM = 4
