"""
Pytest fixtures and configuration for the test suite.

Provides temporary directories, sample PDFs, mock configurations and a
scripted page-text extractor so scan tests never depend on real parsing.
"""

import asyncio
import json
import pytest
import tempfile
import shutil
from pathlib import Path
from typing import Dict, Generator, List, Union

import sys
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from pdfscan.core.exceptions import ExtractionError  # noqa: E402


class FakeExtractor:
    """
    Asynchronous extractor returning scripted page texts by file name.

    A value that is an Exception instance is raised instead of returned.
    Every call is recorded, along with how many calls were in flight.
    """

    def __init__(self, pages_by_name: Dict[str, Union[List[str], Exception]], default=None):
        self.pages_by_name = pages_by_name
        self.default = default if default is not None else []
        self.calls: List[Path] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def extract_page_texts(self, file_path: Path) -> List[str]:
        self.calls.append(Path(file_path))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(0)
            result = self.pages_by_name.get(Path(file_path).name, self.default)
            if isinstance(result, Exception):
                raise result
            return list(result)
        finally:
            self.in_flight -= 1


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.

    Yields:
        Path to temporary directory, cleaned up after test.
    """
    tmp = tempfile.mkdtemp(prefix="pdf_scan_test_")
    yield Path(tmp)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def temp_config(temp_dir: Path) -> Generator[Path, None, None]:
    """
    Create a temporary config.json for testing.

    Args:
        temp_dir: Temporary directory fixture.

    Yields:
        Path to temporary config file.
    """
    config_dir = temp_dir / "config"
    config_dir.mkdir()

    logs_dir = temp_dir / "output" / "logs"
    logs_dir.mkdir(parents=True)

    config_data = {
        "paths": {
            "logs_directory": str(logs_dir)
        },
        "extraction": {
            "primary_backend": "pypdf",
            "fallback_backend": "pdfplumber",
            "supported_extensions": [".pdf"]
        },
        "scan": {
            "case_sensitive": False,
            "literal_terms": False,
            "term_separator": ";",
            "error_summary_length": 80
        },
        "gui": {
            "page_title": "Test PDF Term Scan"
        },
        "logging": {
            "level": "DEBUG",
            "format": "%(levelname)s - %(message)s",
            "max_file_size_mb": 1,
            "backup_count": 1
        }
    }

    config_path = config_dir / "config.json"
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(config_data, f)

    yield config_path


@pytest.fixture
def sample_pdf_content() -> bytes:
    """
    Create minimal valid PDF content for testing.

    Returns:
        Bytes representing a minimal PDF with text.
    """
    # Minimal PDF with "Hello World" text
    pdf_content = b"""%PDF-1.4
1 0 obj
<< /Type /Catalog /Pages 2 0 R >>
endobj
2 0 obj
<< /Type /Pages /Kids [3 0 R] /Count 1 >>
endobj
3 0 obj
<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792]
   /Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>
endobj
4 0 obj
<< /Length 44 >>
stream
BT /F1 12 Tf 100 700 Td (Hello World) Tj ET
endstream
endobj
5 0 obj
<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>
endobj
xref
0 6
0000000000 65535 f
0000000009 00000 n
0000000058 00000 n
0000000115 00000 n
0000000266 00000 n
0000000359 00000 n
trailer
<< /Size 6 /Root 1 0 R >>
startxref
434
%%EOF"""
    return pdf_content


@pytest.fixture
def sample_pdf(temp_dir: Path, sample_pdf_content: bytes) -> Path:
    """
    Create a sample PDF file for testing.

    Returns:
        Path to the created PDF file.
    """
    pdf_path = temp_dir / "sample.pdf"
    pdf_path.write_bytes(sample_pdf_content)
    return pdf_path


@pytest.fixture
def sample_pdf_collection(temp_dir: Path, sample_pdf_content: bytes) -> Path:
    """
    Create PDF files in a nested directory structure.

    Layout:
        data/root_doc.pdf
        data/SHOUTING.PDF
        data/readme.txt
        data/notes.pdf.bak
        data/folder1/doc1.pdf
        data/folder1/doc2.Pdf
        data/folder1/deeper/doc3.pdf
        data/folder1/deeper/image.png
        data/folder2/ (empty)

    Returns:
        Path to the data directory containing PDFs.
    """
    data_dir = temp_dir / "data"
    data_dir.mkdir(exist_ok=True)

    deeper = data_dir / "folder1" / "deeper"
    deeper.mkdir(parents=True)
    (data_dir / "folder2").mkdir()

    (data_dir / "root_doc.pdf").write_bytes(sample_pdf_content)
    (data_dir / "SHOUTING.PDF").write_bytes(sample_pdf_content)
    (data_dir / "folder1" / "doc1.pdf").write_bytes(sample_pdf_content)
    (data_dir / "folder1" / "doc2.Pdf").write_bytes(sample_pdf_content)
    (deeper / "doc3.pdf").write_bytes(sample_pdf_content)

    # Non-PDF files (should be ignored)
    (data_dir / "readme.txt").write_text("Not a PDF")
    (data_dir / "notes.pdf.bak").write_text("Not a PDF either")
    (deeper / "image.png").write_bytes(b"\x89PNG")

    return data_dir


@pytest.fixture
def fake_extractor_factory():
    """Build FakeExtractor instances from a name -> pages mapping."""
    return FakeExtractor


@pytest.fixture
def extraction_failure():
    """An ExtractionError as a scripted extractor would raise it."""
    return ExtractionError("Cannot read document", filepath="b.pdf")


@pytest.fixture
def reset_config_singleton():
    """
    Reset the config singleton between tests.

    This ensures each test gets a fresh config instance.
    """
    from pdfscan.core import config_loader
    config_loader._config_instance = None
    yield
    config_loader._config_instance = None


@pytest.fixture
def reset_logger_singleton():
    """
    Reset the logger initialization flag between tests.
    """
    from pdfscan.core import logger
    logger._logger_initialized = False
    yield
    logger._logger_initialized = False
