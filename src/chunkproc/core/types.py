"""Enums shared across the chunk processor."""

from __future__ import annotations

from enum import StrEnum


class RecordKind(StrEnum):
    """Value of the EventType attribute on a state record."""

    COUNT = "Count"
    REPORT = "Report"
