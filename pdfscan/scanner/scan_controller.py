"""
Scan controller driving the term scan pipeline.

Lists the PDF files of a folder once, then walks that list strictly one file
at a time: extract page texts, count every term, emit result events to the
registered sinks. A failing file produces a FileError event and the scan
moves on.

Each start() or cancel() bumps a generation counter. A scan whose
generation is no longer current stops at its next step and emits nothing
further, so a superseded scan cannot write into the results of a newer one.
"""

import asyncio
from enum import Enum
from typing import Callable, Iterable, List, Optional

from ..core import get_logger, ExtractionError, InvalidRequestError
from ..core.config_loader import get_config_or_defaults
from ..extraction import FileScanner, TextExtractor, AsyncPDFExtractor
from ..search import (
    SearchRequest,
    ScanEvent,
    ScanState,
    ScanStats,
    NoFilesFound,
    FileStarted,
    TermResult,
    FileError,
    ScanComplete,
    count_occurrences,
    status_for,
    validate_pattern
)
from ..utils import is_directory, truncate_text

logger = get_logger(__name__)


ScanListener = Callable[[ScanEvent], None]


class ScanStatus(str, Enum):
    """Lifecycle state of a ScanController."""
    IDLE = "idle"
    SCANNING = "scanning"


def validate_request(request: SearchRequest) -> None:
    """
    Reject a request that cannot be scanned.

    Args:
        request: The request to check.

    Raises:
        InvalidRequestError: If the root folder is not an existing directory,
            the term list is empty, or a term is not a valid pattern.
    """
    if not is_directory(request.root_folder):
        raise InvalidRequestError(
            f"Not a directory: {request.root_folder}",
            field="root_folder",
            details={"root_folder": str(request.root_folder)}
        )

    if not request.terms:
        raise InvalidRequestError("At least one search term is required", field="terms")

    for term in request.terms:
        validate_pattern(term, literal=request.literal)


class ScanController:
    """
    Owns the state of one scan at a time and publishes its events.

    The UI or CLI subscribes with add_listener() and triggers scans with
    start(). Callers must not start a scan while status is SCANNING unless
    they mean to abandon the running one.
    """

    def __init__(
        self,
        extractor: TextExtractor = None,
        extensions: List[str] = None,
        error_summary_length: int = None,
        listeners: Iterable[ScanListener] = ()
    ):
        """
        Initialize the controller.

        Args:
            extractor: Asynchronous page-text extractor. Defaults to
                       AsyncPDFExtractor built from config.
            extensions: File extensions to collect. Defaults to config value.
            error_summary_length: Maximum length of FileError summaries.
            listeners: Initial event listeners.
        """
        config = get_config_or_defaults()

        self.extractor = extractor or AsyncPDFExtractor()
        self.extensions = extensions or config.extraction.supported_extensions
        self.error_summary_length = error_summary_length or config.scan.error_summary_length

        self._listeners: List[ScanListener] = list(listeners)
        self._generation = 0
        self._state: Optional[ScanState] = None

    @property
    def status(self) -> ScanStatus:
        """SCANNING while a current-generation scan has files left."""
        state = self._state
        if state is not None and not state.finished and state.generation == self._generation:
            return ScanStatus.SCANNING
        return ScanStatus.IDLE

    @property
    def state(self) -> Optional[ScanState]:
        """State of the most recent scan, or None before the first one."""
        return self._state

    @property
    def generation(self) -> int:
        return self._generation

    def add_listener(self, listener: ScanListener) -> None:
        """Subscribe a callable to every emitted event."""
        self._listeners.append(listener)

    def remove_listener(self, listener: ScanListener) -> None:
        """Unsubscribe a listener added with add_listener()."""
        self._listeners.remove(listener)

    def cancel(self) -> None:
        """Abandon the running scan, if any."""
        if self.status is ScanStatus.SCANNING:
            logger.info("Scan cancelled")
        self._generation += 1

    async def start(
        self,
        request: SearchRequest,
        on_complete: Callable[[], None] = None
    ) -> ScanStats:
        """
        Run a complete scan.

        Args:
            request: What to scan and which terms to count.
            on_complete: Called once, without arguments, after the last file
                         has been processed. Not called for a scan that was
                         superseded or cancelled.

        Returns:
            ScanStats summarising the run.

        Raises:
            InvalidRequestError: If the request is rejected. Nothing is
                emitted and the previous state is left untouched.
        """
        validate_request(request)

        self._generation += 1
        generation = self._generation

        files = tuple(FileScanner(request.root_folder, extensions=self.extensions).scan())
        stats = ScanStats(files_found=len(files))

        self._state = ScanState(request=request, files=files, generation=generation)

        logger.info(
            f"Starting scan of {request.root_folder}: {len(files)} files, "
            f"{len(request.terms)} terms, case_sensitive={request.case_sensitive}"
        )

        if not files:
            self._state.finished = True
            self._emit(NoFilesFound(root_folder=request.root_folder))
            if on_complete:
                on_complete()
            return stats

        state = self._state

        while state.current_file is not None:
            if self._is_stale(generation):
                stats.cancelled = True
                return stats

            file_path = state.current_file
            self._emit(FileStarted(
                file_path=file_path,
                index=state.current_index + 1,
                total=len(state.files)
            ))

            try:
                pages = await self.extractor.extract_page_texts(file_path)
            except ExtractionError as e:
                if self._is_stale(generation):
                    stats.cancelled = True
                    return stats
                logger.warning(f"Failed to extract {file_path}: {e.message}")
                self._record_failure(stats, file_path, e.message)
            except Exception as e:
                if self._is_stale(generation):
                    stats.cancelled = True
                    return stats
                logger.error(f"Unexpected error extracting {file_path}: {e}")
                self._record_failure(stats, file_path, str(e))
            else:
                if self._is_stale(generation):
                    stats.cancelled = True
                    return stats
                self._emit_term_results(request, file_path, pages, stats)
                stats.files_processed += 1

            state.current_index += 1

        state.finished = True

        logger.info(
            f"Scan complete: {stats.files_processed} files processed, "
            f"{stats.files_failed} failed, {stats.total_occurrences} occurrences"
        )

        self._emit(ScanComplete())
        if on_complete:
            on_complete()

        return stats

    def _is_stale(self, generation: int) -> bool:
        if generation != self._generation:
            logger.debug(f"Discarding results of superseded scan {generation}")
            return True
        return False

    def _emit_term_results(
        self,
        request: SearchRequest,
        file_path,
        pages: List[str],
        stats: ScanStats
    ) -> None:
        """Count each term in request order and emit its TermResult."""
        for term in request.terms:
            occurrences = count_occurrences(
                pages,
                term,
                case_sensitive=request.case_sensitive,
                literal=request.literal
            )

            if occurrences > 0:
                stats.terms_found += 1
                stats.total_occurrences += occurrences

            self._emit(TermResult(
                file_path=file_path,
                term=term,
                occurrences=occurrences,
                status=status_for(occurrences)
            ))

    def _record_failure(self, stats: ScanStats, file_path, message: str) -> None:
        summary = truncate_text(message, self.error_summary_length)
        stats.files_failed += 1
        stats.errors.append(f"{file_path}: {summary}")
        self._emit(FileError(file_path=file_path, error_summary=summary))

    def _emit(self, event: ScanEvent) -> None:
        for listener in list(self._listeners):
            listener(event)


def run_scan(
    request: SearchRequest,
    listeners: Iterable[ScanListener] = (),
    extractor: TextExtractor = None,
    on_complete: Callable[[], None] = None
) -> ScanStats:
    """
    Run one scan to completion from synchronous code.

    Args:
        request: What to scan.
        listeners: Event listeners for this run.
        extractor: Optional extractor override.
        on_complete: Optional completion callback.

    Returns:
        ScanStats of the run.
    """
    controller = ScanController(extractor=extractor, listeners=listeners)
    return asyncio.run(controller.start(request, on_complete=on_complete))
