"""
CSV interchange pipeline.

text -> csv_codec.decode -> format_detector.detect_format
     -> record_mapper.map_rows -> TankaStore.import_merge

TankaStore.entries -> csv_export.entries_to_rows -> csv_codec.encode -> text
"""
