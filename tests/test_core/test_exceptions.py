"""
Tests for custom exception classes.

Tests exception creation, message formatting, and details handling.
"""

import pytest

from pdfscan.core.exceptions import (
    PDFScanError,
    ConfigurationError,
    ExtractionError,
    InvalidRequestError
)


class TestPDFScanError:
    """Tests for base PDFScanError."""

    def test_basic_creation(self):
        """Test creating exception with just a message."""
        error = PDFScanError("Something went wrong")

        assert error.message == "Something went wrong"
        assert error.details == {}
        assert str(error) == "Something went wrong"

    def test_creation_with_details(self):
        """Test creating exception with details dict."""
        error = PDFScanError("File error", {"filename": "test.pdf", "size": 1024})

        assert error.details["filename"] == "test.pdf"
        assert error.details["size"] == 1024


class TestConfigurationError:
    """Tests for ConfigurationError."""

    def test_can_be_caught_as_base(self):
        """Test that ConfigurationError can be caught as PDFScanError."""
        with pytest.raises(PDFScanError):
            raise ConfigurationError("Test error")


class TestInvalidRequestError:
    """Tests for InvalidRequestError."""

    def test_with_field(self):
        """Test that the offending field is kept."""
        error = InvalidRequestError("No terms", field="terms")

        assert error.field == "terms"
        assert error.message == "No terms"
        assert isinstance(error, PDFScanError)

    def test_field_defaults_to_none(self):
        """Test creation without a field."""
        error = InvalidRequestError("Bad request", details={"x": 1})

        assert error.field is None
        assert error.details["x"] == 1


class TestExtractionError:
    """Tests for ExtractionError."""

    def test_with_filepath(self):
        """Test ExtractionError with filepath parameter."""
        error = ExtractionError("Failed to extract text", filepath="/path/to/file.pdf")

        assert error.filepath == "/path/to/file.pdf"
        assert error.message == "Failed to extract text"

    def test_with_filepath_and_details(self):
        """Test ExtractionError with filepath and details."""
        error = ExtractionError(
            "Failed to extract",
            filepath="/test.pdf",
            details={"backend": "pypdf"}
        )

        assert error.filepath == "/test.pdf"
        assert error.details["backend"] == "pypdf"
