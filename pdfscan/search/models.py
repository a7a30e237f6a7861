"""
Data models for term scanning.

Defines the search request, per-term results and the events a scan
emits to its result sinks.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple, Union

from ..utils import split_terms


class TermStatus(str, Enum):
    """Outcome of matching one term against one file."""
    FOUND = "found"
    NOT_FOUND = "not_found"
    EXTRACTION_ERROR = "extraction_error"


@dataclass(frozen=True)
class SearchRequest:
    """
    A single scan request.

    Attributes:
        root_folder: Directory to search recursively.
        terms: Ordered, non-empty search terms.
        case_sensitive: Match with exact case when True.
        literal: Escape regex metacharacters in terms when True.
    """
    root_folder: Path
    terms: Tuple[str, ...]
    case_sensitive: bool = False
    literal: bool = False

    @classmethod
    def from_raw(
        cls,
        root_folder: Union[str, Path],
        raw_terms: str,
        case_sensitive: bool = False,
        literal: bool = False,
        separator: str = ";"
    ) -> "SearchRequest":
        """
        Build a request from a delimited term string.

        Args:
            root_folder: Directory to search.
            raw_terms: Terms separated by `separator`, e.g. "cat; dog".
            case_sensitive: Match with exact case.
            literal: Escape regex metacharacters.
            separator: Term delimiter.

        Returns:
            SearchRequest with trimmed, non-empty terms.
        """
        return cls(
            root_folder=Path(root_folder),
            terms=tuple(split_terms(raw_terms, separator)),
            case_sensitive=case_sensitive,
            literal=literal
        )


@dataclass(frozen=True)
class NoFilesFound:
    """Terminal event: the root folder holds no matching files."""
    root_folder: Path


@dataclass(frozen=True)
class FileStarted:
    """A file's extraction is about to begin. `index` is 1-based."""
    file_path: Path
    index: int = 0
    total: int = 0


@dataclass(frozen=True)
class TermResult:
    """Occurrence count of one term in one file."""
    file_path: Path
    term: str
    occurrences: int
    status: TermStatus


@dataclass(frozen=True)
class FileError:
    """Text extraction failed for one file."""
    file_path: Path
    error_summary: str
    status: TermStatus = TermStatus.EXTRACTION_ERROR


@dataclass(frozen=True)
class ScanComplete:
    """Every file of the scan has been processed."""
    pass


ScanEvent = Union[NoFilesFound, FileStarted, TermResult, FileError, ScanComplete]


@dataclass
class ScanStats:
    """Statistics from a scan run."""
    files_found: int = 0
    files_processed: int = 0
    files_failed: int = 0
    terms_found: int = 0
    total_occurrences: int = 0
    cancelled: bool = False
    errors: List[str] = field(default_factory=list)


@dataclass
class ScanState:
    """
    Mutable progress of the running scan, owned by ScanController.

    Attributes:
        request: The request being served.
        files: Files to process, fixed at scan start.
        generation: Scan generation this state belongs to.
        current_index: Index of the next file to process.
        finished: Set once the last file has been handled.
    """
    request: SearchRequest
    files: Tuple[Path, ...]
    generation: int
    current_index: int = 0
    finished: bool = False

    @property
    def remaining(self) -> Tuple[Path, ...]:
        """Files not yet processed."""
        return self.files[self.current_index:]

    @property
    def current_file(self) -> Optional[Path]:
        """File at the current index, or None when exhausted."""
        if self.current_index < len(self.files):
            return self.files[self.current_index]
        return None
