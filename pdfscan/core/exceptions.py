"""
Custom exception hierarchy for PDF Term Scan.

Provides specific exception types for the failure modes of a scan:
configuration errors, rejected search requests and per-file extraction failures.
"""


class PDFScanError(Exception):
    """Base exception for all PDF Term Scan errors."""

    def __init__(self, message: str, details: dict = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(PDFScanError):
    """Raised when configuration is invalid or missing."""
    pass


class InvalidRequestError(PDFScanError):
    """Raised when a search request is rejected before scanning starts."""

    def __init__(self, message: str, field: str = None, details: dict = None):
        """
        Initialize invalid request error.

        Args:
            message: Error description.
            field: Name of the offending request field ("root_folder", "terms").
            details: Additional context.
        """
        super().__init__(message, details)
        self.field = field


class ExtractionError(PDFScanError):
    """Raised when PDF text extraction fails."""

    def __init__(self, message: str, filepath: str = None, details: dict = None):
        """
        Initialize extraction error.

        Args:
            message: Error description.
            filepath: Path to the problematic PDF file.
            details: Additional context.
        """
        super().__init__(message, details)
        self.filepath = filepath


if __name__ == "__main__":
    try:
        raise InvalidRequestError("No search terms given", field="terms")
    except PDFScanError as e:
        print(f"Caught: {e.__class__.__name__}: {e.message} (field={e.field})")

    try:
        raise ExtractionError("Failed to extract text", filepath="/docs/test.pdf")
    except ExtractionError as e:
        print(f"Extraction failed for: {e.filepath}")
