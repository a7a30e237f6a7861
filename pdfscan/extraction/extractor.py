"""
Unified PDF extraction interface with automatic fallback.

Wraps multiple extraction backends and attempts fallback when
the primary backend fails or returns no text. AsyncPDFExtractor exposes
the same extraction as a coroutine for the scan controller.
"""

import asyncio
from pathlib import Path
from typing import List, Union

from ..core import get_logger, ExtractionError
from ..core.config_loader import get_config_or_defaults
from .pypdf_backend import PyPDFBackend
from .pdfplumber_backend import PDFPlumberBackend

logger = get_logger(__name__)


BACKENDS = {
    "pypdf": PyPDFBackend,
    "pdfplumber": PDFPlumberBackend
}


def _has_text(pages: List[str]) -> bool:
    return any(text.strip() for text in pages)


class PDFExtractor:
    """
    Unified PDF extraction with automatic backend fallback.

    Tries the primary backend first, falls back to secondary
    if extraction fails or produces no text.
    """

    def __init__(
        self,
        primary_backend: str = None,
        fallback_backend: str = None
    ):
        """
        Initialize the extractor with configured backends.

        Args:
            primary_backend: Name of primary backend ("pypdf" or "pdfplumber").
            fallback_backend: Name of fallback backend.
        """
        config = get_config_or_defaults()

        primary_name = primary_backend or config.extraction.primary_backend
        fallback_name = fallback_backend or config.extraction.fallback_backend

        if primary_name not in BACKENDS:
            raise ExtractionError(f"Unknown backend: {primary_name}")

        self.primary = BACKENDS[primary_name]()
        self.fallback = BACKENDS[fallback_name]() if fallback_name in BACKENDS else None

        logger.debug(
            f"Initialized extractor: primary={primary_name}, fallback={fallback_name}"
        )

    def extract(self, filepath: Union[str, Path]) -> List[str]:
        """
        Extract page texts from a PDF using available backends.

        Args:
            filepath: Path to the PDF file.

        Returns:
            One text string per page, in page order.

        Raises:
            ExtractionError: If all backends fail or none finds any text.
        """
        filepath = Path(filepath)
        primary_error = None

        try:
            results = self.primary.extract(filepath)

            if _has_text(results):
                return results

            logger.debug(f"Primary backend returned no text: {filepath.name}")

        except ExtractionError as e:
            primary_error = e
            logger.debug(f"Primary backend failed: {e.message}")

        if self.fallback:
            try:
                logger.debug(f"Trying fallback backend for: {filepath.name}")
                results = self.fallback.extract(filepath)

                if _has_text(results):
                    return results

            except ExtractionError as e:
                logger.debug(f"Fallback backend also failed: {e.message}")

        if primary_error:
            raise primary_error

        raise ExtractionError(
            "All backends returned empty results",
            filepath=str(filepath)
        )


class AsyncPDFExtractor:
    """
    Coroutine front end for PDFExtractor.

    Runs the blocking backends in a worker thread so the event loop stays
    free while a file is being read.
    """

    def __init__(self, extractor: PDFExtractor = None):
        """
        Args:
            extractor: Synchronous extractor to wrap. Built from config if omitted.
        """
        self.extractor = extractor or PDFExtractor()

    async def extract_page_texts(self, file_path: Path) -> List[str]:
        """
        Extract page texts without blocking the event loop.

        Args:
            file_path: Path to the PDF file.

        Returns:
            Page texts in page order.

        Raises:
            ExtractionError: If extraction fails.
        """
        try:
            return await asyncio.to_thread(self.extractor.extract, file_path)
        except ExtractionError:
            raise
        except Exception as e:
            raise ExtractionError(
                f"Unexpected extraction failure: {e}",
                filepath=str(file_path),
                details={"cause": repr(e)}
            ) from e


if __name__ == "__main__":
    import sys

    if len(sys.argv) < 2:
        print("Usage: python extractor.py <pdf_file>")
        sys.exit(1)

    pdf_path = Path(sys.argv[1])
    if not pdf_path.exists():
        print(f"File not found: {pdf_path}")
        sys.exit(1)

    try:
        pages = asyncio.run(AsyncPDFExtractor().extract_page_texts(pdf_path))
        print(f"Extracted {len(pages)} pages from {pdf_path.name}")
        print(f"Total characters: {sum(len(text) for text in pages):,}")
    except ExtractionError as e:
        print(f"Extraction failed: {e.message}")
