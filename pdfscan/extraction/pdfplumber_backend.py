"""
pdfplumber-based text extraction backend.

Better handling of complex layouts, tables, and multi-column documents.
Slower than pypdf but more accurate for difficult PDFs.
"""

from pathlib import Path
from typing import List, Union

import pdfplumber

from ..core import get_logger, ExtractionError

logger = get_logger(__name__)


class PDFPlumberBackend:
    """
    PDF text extraction using pdfplumber library.

    Provides more accurate extraction for complex layouts
    at the cost of slower processing.
    """

    name = "pdfplumber"

    def extract(self, filepath: Union[str, Path]) -> List[str]:
        """
        Extract text from all pages of a PDF.

        Args:
            filepath: Path to the PDF file.

        Returns:
            One text string per page, in page order.

        Raises:
            ExtractionError: If the document cannot be opened.
        """
        filepath = Path(filepath)
        results = []

        try:
            with pdfplumber.open(filepath) as pdf:
                logger.debug(f"Processing {len(pdf.pages)} pages: {filepath.name}")

                for page_num, page in enumerate(pdf.pages, start=1):
                    try:
                        results.append(page.extract_text() or "")
                    except Exception as e:
                        logger.warning(
                            f"Failed to extract page {page_num} from {filepath.name}: {e}"
                        )
                        results.append("")

        except Exception as e:
            raise ExtractionError(
                f"pdfplumber extraction failed: {e}",
                filepath=str(filepath),
                details={"backend": self.name, "cause": repr(e)}
            )

        return results
