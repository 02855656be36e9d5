#!/usr/bin/env python3
"""
validators.py
--------------------
Data validation and normalization utilities.

Used at the form boundary (manual entry and series creation) and by the
CLI. Import paths are lenient by design and do not go through these checks.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from .exceptions import EntryValidationError, ValidationError


class DataValidator:
    """Centralized validation for user-supplied entry and series data."""

    @staticmethod
    def validate_required_fields(
        data: Dict[str, Any], required_fields: List[str], allow_falsy: bool = False
    ) -> None:
        """
        Validate that required fields are present (and non-empty).

        Args:
            data: Data dictionary to validate
            required_fields: List of required field names
            allow_falsy: Accept 0, "" and False as present values

        Raises:
            ValidationError: Listing every missing field
        """
        missing = []
        for name in required_fields:
            if name not in data or data[name] is None:
                missing.append(name)
            elif not allow_falsy and not data[name]:
                missing.append(name)
        if missing:
            raise ValidationError(
                f"Required field(s) missing or empty: {', '.join(missing)}"
            )

    @staticmethod
    def is_empty_submission(lines: Iterable[Optional[str]]) -> bool:
        """
        Check whether a submitted poem has no content at all.

        Args:
            lines: Poem lines as entered

        Returns:
            True if every line is blank after trimming
        """
        return all(not (line or "").strip() for line in lines)

    @staticmethod
    def validate_poem_lines(lines: Iterable[Optional[str]]) -> None:
        """
        Reject an all-blank poem submission.

        Raises:
            EntryValidationError: If every line is blank
        """
        if DataValidator.is_empty_submission(lines):
            raise EntryValidationError("At least one poem line is required")

    @staticmethod
    def normalize_string(value: Any) -> str:
        """Trimmed string, or "" for None."""
        if value is None:
            return ""
        return str(value).strip()

    @staticmethod
    def normalize_plan_count(value: Any) -> int:
        """
        Convert a plan count input to a non-negative integer.

        Blank or non-numeric input means "no target" and becomes 0.

        Args:
            value: Raw plan count (int, str or None)

        Returns:
            Non-negative integer

        Raises:
            ValidationError: If the value is a negative number
        """
        if value is None or isinstance(value, bool):
            return 0
        if isinstance(value, int):
            count = value
        else:
            try:
                count = int(str(value).strip())
            except ValueError:
                return 0
        if count < 0:
            raise ValidationError(f"Plan count must be non-negative, got {count}")
        return count
