#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the Tankachō project.

This module defines a hierarchy of exceptions used throughout the project
to handle specific error conditions in different subsystems.

Exception Hierarchy:
    Exception (built-in)
    ├── StoreError - Store operations that would break entry/series links
    ├── PersistenceError - Blob store read/write failures
    ├── ValidationError - Data validation failures
    │   └── EntryValidationError - Entry-specific validation failures
    ├── CsvImportError - CSV import input errors
    └── ExportError - CSV export output errors

Lenient cases are deliberately NOT exceptions: malformed quoting, blank
rows, id collisions on import and unknown series ids in native CSV are all
handled in place and reported through ImportStats.

Usage:
    from tankacho.core.exceptions import PersistenceError, StoreError

    try:
        store.set_deck_membership("series-1", ids)
        store.save()
    except StoreError as e:
        logger.log_error(e)
    except PersistenceError as e:
        logger.log_error(e, {"operation": "save"})
"""


class StoreError(Exception):
    """
    Exception for store operations that cannot be applied consistently.

    Raised when a mutation would leave entries and series out of sync:
    - Editing an entry that does not exist
    - Linking an entry to a series id that does not exist
    - Deck edits on an unknown series

    Examples:
        >>> raise StoreError("Unknown series: series-1700000000000")
        >>> raise StoreError("Entry not found: tanka-1700000000000")
    """

    pass


class PersistenceError(Exception):
    """
    Exception for blob store failures.

    Raised when loading or saving the persisted collections fails:
    - Database connection or write errors
    - Corrupt (non-JSON) blobs
    - Blobs with an unexpected shape

    Examples:
        >>> raise PersistenceError("Failed to write blob 'tankaEntries'")
        >>> raise PersistenceError("Blob 'seriesList' is not valid JSON")
    """

    pass


class ValidationError(Exception):
    """
    Exception for data validation failures.

    Raised when input data fails validation checks:
    - Missing required fields
    - Type mismatches
    - Negative plan counts

    Examples:
        >>> raise ValidationError("Required field 'name' missing or empty")
        >>> raise ValidationError("Plan count must be non-negative")
    """

    pass


class EntryValidationError(ValidationError):
    """
    Exception for entry-specific validation failures.

    Raised when a submitted poem cannot become an entry:
    - Every poem line is blank
    - Unknown status value on manual input

    Examples:
        >>> raise EntryValidationError("At least one poem line is required")
    """

    pass


class CsvImportError(Exception):
    """
    Exception for CSV import input errors.

    Raised only for problems with the input as a whole:
    - File not found or not readable
    - Undecodable text encoding

    Row-level problems never raise; they are skipped and counted.

    Examples:
        >>> raise CsvImportError("Cannot read import file: tanka.csv")
    """

    pass


class ExportError(Exception):
    """
    Exception for CSV export failures.

    Raised when writing the native CSV export fails:
    - Output directory not writable
    - Disk full

    Examples:
        >>> raise ExportError("Failed to write export: permission denied")
    """

    pass
