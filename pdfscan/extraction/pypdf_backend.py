"""
pypdf-based text extraction backend.

Fast extraction suitable for most standard PDF files.
Handles encryption detection and empty password decryption.
"""

from pathlib import Path
from typing import List, Union

from pypdf import PdfReader

from ..core import get_logger, ExtractionError

logger = get_logger(__name__)


class PyPDFBackend:
    """
    PDF text extraction using the pypdf library.

    Provides fast extraction for standard PDFs with basic
    encryption handling.
    """

    name = "pypdf"

    def extract(self, filepath: Union[str, Path]) -> List[str]:
        """
        Extract text from all pages of a PDF.

        Args:
            filepath: Path to the PDF file.

        Returns:
            One text string per page, in page order. Pages without
            extractable text yield an empty string.

        Raises:
            ExtractionError: If the document cannot be opened or decrypted.
        """
        filepath = Path(filepath)
        results = []

        try:
            reader = PdfReader(filepath)

            if reader.is_encrypted:
                try:
                    reader.decrypt("")
                except Exception:
                    raise ExtractionError(
                        "PDF is encrypted and cannot be decrypted",
                        filepath=str(filepath)
                    )

            total_pages = len(reader.pages)
            logger.debug(f"Processing {total_pages} pages: {filepath.name}")

            for page_num, page in enumerate(reader.pages, start=1):
                try:
                    results.append(page.extract_text() or "")
                except Exception as e:
                    logger.warning(
                        f"Failed to extract page {page_num} from {filepath.name}: {e}"
                    )
                    results.append("")

        except ExtractionError:
            raise
        except Exception as e:
            raise ExtractionError(
                f"pypdf extraction failed: {e}",
                filepath=str(filepath),
                details={"backend": self.name, "cause": repr(e)}
            )

        return results


if __name__ == "__main__":
    import sys

    if len(sys.argv) < 2:
        print("Usage: python pypdf_backend.py <pdf_file>")
        sys.exit(1)

    pdf_path = Path(sys.argv[1])
    backend = PyPDFBackend()

    try:
        pages = backend.extract(pdf_path)
        print(f"Extracted {len(pages)} pages from {pdf_path.name}")
        for page_num, text in enumerate(pages[:2], start=1):
            preview = text[:500] + "..." if len(text) > 500 else text
            print(f"\n=== Page {page_num} ===")
            print(preview)
    except ExtractionError as e:
        print(f"Extraction error: {e.message}")
