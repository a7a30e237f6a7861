"""
Search module for term matching and scan data models.

Provides the search request, result and event models, and the
regex-based term matcher used per extracted file.
"""

from .models import (
    SearchRequest,
    TermStatus,
    ScanEvent,
    NoFilesFound,
    FileStarted,
    TermResult,
    FileError,
    ScanComplete,
    ScanStats,
    ScanState
)
from .term_matcher import count_occurrences, compile_term, validate_pattern, status_for

__all__ = [
    "SearchRequest",
    "TermStatus",
    "ScanEvent",
    "NoFilesFound",
    "FileStarted",
    "TermResult",
    "FileError",
    "ScanComplete",
    "ScanStats",
    "ScanState",
    "count_occurrences",
    "compile_term",
    "validate_pattern",
    "status_for"
]
