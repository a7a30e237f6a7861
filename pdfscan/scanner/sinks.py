"""
Result sinks subscribing to ScanController events.

CollectingSink keeps every event for later inspection; ConsoleSink prints
progress and per-term results as they arrive.
"""

import sys
from collections import OrderedDict
from pathlib import Path
from typing import Dict, List, Optional, TextIO

from ..search import (
    ScanEvent,
    NoFilesFound,
    FileStarted,
    TermResult,
    FileError,
    ScanComplete,
    TermStatus
)
from ..utils import get_relative_path


class CollectingSink:
    """Records events in emission order."""

    def __init__(self):
        self.events: List[ScanEvent] = []

    def __call__(self, event: ScanEvent) -> None:
        self.events.append(event)

    def clear(self) -> None:
        self.events.clear()

    def of_type(self, event_type: type) -> List[ScanEvent]:
        """Events that are instances of `event_type`."""
        return [event for event in self.events if isinstance(event, event_type)]

    @property
    def term_results(self) -> List[TermResult]:
        return self.of_type(TermResult)

    @property
    def file_errors(self) -> List[FileError]:
        return self.of_type(FileError)

    @property
    def completed(self) -> bool:
        """True once the scan finished, with or without files."""
        return any(isinstance(event, (ScanComplete, NoFilesFound)) for event in self.events)

    def results_by_file(self) -> Dict[Path, Optional[List[TermResult]]]:
        """
        Group term results per file in processing order.

        Returns:
            Mapping of file path to its term results, or to None when the
            file failed extraction.
        """
        grouped: Dict[Path, Optional[List[TermResult]]] = OrderedDict()

        for event in self.events:
            if isinstance(event, FileStarted):
                grouped[event.file_path] = []
            elif isinstance(event, TermResult):
                grouped.setdefault(event.file_path, []).append(event)
            elif isinstance(event, FileError):
                grouped[event.file_path] = None

        return grouped


class ConsoleSink:
    """
    Prints scan progress in the style of a command line report.

    Args:
        root_folder: Paths are shown relative to this folder when given.
        stream: Output stream, stdout by default.
        show_progress: Print a header line per file.
    """

    def __init__(
        self,
        root_folder: Path = None,
        stream: TextIO = None,
        show_progress: bool = True
    ):
        self.root_folder = root_folder
        self.stream = stream or sys.stdout
        self.show_progress = show_progress

    def __call__(self, event: ScanEvent) -> None:
        if isinstance(event, NoFilesFound):
            self._write(f"No files found in folder {event.root_folder}")
        elif isinstance(event, FileStarted):
            if self.show_progress:
                percent = (event.index / event.total) * 100 if event.total > 0 else 0
                self._write(
                    f"[{percent:5.1f}%] ({event.index}/{event.total}) {self._display(event.file_path)}"
                )
        elif isinstance(event, TermResult):
            if event.status is TermStatus.FOUND:
                outcome = f"{event.occurrences} occurrences"
            else:
                outcome = "not found"
            self._write(f"    {event.term}: {outcome}")
        elif isinstance(event, FileError):
            self._write(f"    Error: {event.error_summary}")
        elif isinstance(event, ScanComplete):
            self._write("Scan complete")

    def _display(self, file_path: Path) -> str:
        if self.root_folder is None:
            return str(file_path)
        return get_relative_path(file_path, self.root_folder)

    def _write(self, line: str) -> None:
        print(line, file=self.stream)
