"""
Results list component for displaying scan results.

StreamlitSink renders events live while a scan runs; render_results
redraws the stored events on later reruns.
"""

import streamlit as st
from pathlib import Path
from typing import Dict, List

from ...search import (
    ScanEvent,
    NoFilesFound,
    FileStarted,
    TermResult,
    FileError,
    ScanComplete,
    TermStatus
)
from ...scanner import CollectingSink


def _format_term(result: TermResult) -> str:
    if result.status is TermStatus.FOUND:
        return f"- {result.term}: :green[{result.occurrences} occurrences]"
    return f"- {result.term}: :red[not found]"


class StreamlitSink:
    """
    Scan listener drawing each file as it is processed.

    A file header shows a running marker until the file's results or
    error arrive.
    """

    def __init__(self, container=None):
        self.container = container or st.container()
        self._header = None
        self._lines: List[str] = []
        self._body = None

    def __call__(self, event: ScanEvent) -> None:
        if isinstance(event, NoFilesFound):
            self.container.markdown(f"#### No files found in folder {event.root_folder}")
        elif isinstance(event, FileStarted):
            self._header = self.container.empty()
            self._header.markdown(f"#### {event.file_path} ⏳")
            self._body = self.container.empty()
            self._lines = []
        elif isinstance(event, TermResult):
            self._lines.append(_format_term(event))
            self._body.markdown("\n".join(self._lines))
            self._header.markdown(f"#### {event.file_path}")
        elif isinstance(event, FileError):
            self._header.markdown(f"#### {event.file_path} :red[Error]")
            self._body.caption(event.error_summary)
        elif isinstance(event, ScanComplete):
            self.container.success("Scan complete")


def render_results(events: List[ScanEvent]) -> None:
    """
    Render stored scan events.

    Args:
        events: Events of the last scan, in emission order.
    """
    if not events:
        return

    no_files = [event for event in events if isinstance(event, NoFilesFound)]
    if no_files:
        st.markdown(f"#### No files found in folder {no_files[0].root_folder}")
        return

    sink = CollectingSink()
    sink.events.extend(events)
    errors: Dict[Path, str] = {event.file_path: event.error_summary for event in sink.file_errors}

    for file_path, results in sink.results_by_file().items():
        if results is None:
            st.markdown(f"#### {file_path} :red[Error]")
            st.caption(errors.get(file_path, ""))
            continue

        st.markdown(f"#### {file_path}")
        if results:
            st.markdown("\n".join(_format_term(result) for result in results))
