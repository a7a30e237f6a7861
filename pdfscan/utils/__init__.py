"""
Utility module providing shared helper functions.

Contains file and text helpers used across the application.
Depends only on the standard library.
"""

from .file_utils import (
    is_directory,
    get_relative_path,
    has_extension
)
from .text_utils import (
    truncate_text,
    split_terms
)

__all__ = [
    "is_directory",
    "get_relative_path",
    "has_extension",
    "truncate_text",
    "split_terms"
]
