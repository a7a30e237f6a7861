"""TextExtractor interface consumed by the scan controller."""

from pathlib import Path
from typing import List, Protocol


class TextExtractor(Protocol):
    """Protocol for asynchronous page-text extraction.

    Implementations may use a PDF text layer, OCR or a remote service.
    The scan controller awaits exactly one call per file and never looks
    at file content itself.
    """

    async def extract_page_texts(self, file_path: Path) -> List[str]:
        """Extract the text of every page of a file.

        Args:
            file_path: Path to the PDF file.

        Returns:
            Page texts in page order.

        Raises:
            ExtractionError: If the file's text cannot be extracted.
        """
        ...
