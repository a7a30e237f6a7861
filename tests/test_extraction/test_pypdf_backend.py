"""
Tests for the pypdf-based extraction backend.

Tests text extraction, encryption handling, and error cases
using sample PDF fixtures and a mocked PdfReader.
"""

import pytest
from unittest.mock import patch, Mock

from pdfscan.extraction.pypdf_backend import PyPDFBackend
from pdfscan.core.exceptions import ExtractionError


@pytest.fixture
def backend():
    """Create a PyPDFBackend instance."""
    return PyPDFBackend()


def _page(text):
    page = Mock()
    page.extract_text.return_value = text
    return page


class TestPyPDFBackend:
    """Tests for PyPDFBackend class."""

    def test_backend_name(self, backend):
        """Test that backend has correct name identifier."""
        assert backend.name == "pypdf"

    def test_extract_returns_list_of_strings(self, backend, sample_pdf):
        """Test that extract returns page strings."""
        try:
            result = backend.extract(sample_pdf)
            assert isinstance(result, list)
            assert all(isinstance(text, str) for text in result)
        except ExtractionError:
            pass  # Minimal PDF may not be parseable

    def test_extract_nonexistent_file_raises(self, backend, temp_dir):
        """Test that extracting nonexistent file raises ExtractionError."""
        with pytest.raises(ExtractionError) as exc_info:
            backend.extract(temp_dir / "nonexistent.pdf")

        assert exc_info.value.filepath.endswith("nonexistent.pdf")
        assert "cause" in exc_info.value.details

    def test_extract_invalid_pdf_raises(self, backend, temp_dir):
        """Test that invalid PDF content raises ExtractionError."""
        invalid_pdf = temp_dir / "invalid.pdf"
        invalid_pdf.write_bytes(b"Not a valid PDF")

        with pytest.raises(ExtractionError):
            backend.extract(invalid_pdf)


class TestPyPDFBackendEncryption:
    """Tests for encrypted PDF handling."""

    @patch("pdfscan.extraction.pypdf_backend.PdfReader")
    def test_encrypted_pdf_attempts_empty_password(self, mock_reader_cls, backend, sample_pdf):
        """Test that encrypted PDF is decrypted with empty password."""
        mock_reader = Mock()
        mock_reader.is_encrypted = True
        mock_reader.pages = []
        mock_reader_cls.return_value = mock_reader

        backend.extract(sample_pdf)

        mock_reader.decrypt.assert_called_once_with("")

    @patch("pdfscan.extraction.pypdf_backend.PdfReader")
    def test_encrypted_pdf_decrypt_failure_raises(self, mock_reader_cls, backend, sample_pdf):
        """Test that undecryptable PDF raises ExtractionError."""
        mock_reader = Mock()
        mock_reader.is_encrypted = True
        mock_reader.decrypt.side_effect = Exception("Bad password")
        mock_reader_cls.return_value = mock_reader

        with pytest.raises(ExtractionError, match="encrypted"):
            backend.extract(sample_pdf)


class TestPyPDFBackendWithMock:
    """Tests using mocked PdfReader for deterministic behavior."""

    @patch("pdfscan.extraction.pypdf_backend.PdfReader")
    def test_extract_multiple_pages_in_order(self, mock_reader_cls, backend, sample_pdf):
        """Test extraction of multiple pages keeps page order."""
        mock_reader = Mock()
        mock_reader.is_encrypted = False
        mock_reader.pages = [_page("Page one"), _page("Page two"), _page("Page three")]
        mock_reader_cls.return_value = mock_reader

        assert backend.extract(sample_pdf) == ["Page one", "Page two", "Page three"]

    @patch("pdfscan.extraction.pypdf_backend.PdfReader")
    def test_extract_keeps_empty_pages(self, mock_reader_cls, backend, sample_pdf):
        """Test that empty pages are kept as empty strings."""
        mock_reader = Mock()
        mock_reader.is_encrypted = False
        mock_reader.pages = [_page("Real content"), _page("   "), _page(None)]
        mock_reader_cls.return_value = mock_reader

        assert backend.extract(sample_pdf) == ["Real content", "   ", ""]

    @patch("pdfscan.extraction.pypdf_backend.PdfReader")
    def test_extract_continues_on_page_error(self, mock_reader_cls, backend, sample_pdf):
        """Test that a failing page doesn't stop extraction of others."""
        bad_page = Mock()
        bad_page.extract_text.side_effect = Exception("Page corrupted")

        mock_reader = Mock()
        mock_reader.is_encrypted = False
        mock_reader.pages = [_page("Good"), bad_page, _page("Also good")]
        mock_reader_cls.return_value = mock_reader

        assert backend.extract(sample_pdf) == ["Good", "", "Also good"]
