"""
PDF extraction module for PDF Term Scan.

Provides file discovery and text extraction with multiple backends
(pypdf and pdfplumber) with automatic fallback support, plus the
asynchronous TextExtractor contract used by the scan controller.
"""

from .file_scanner import FileScanner, list_pdf_files
from .interface import TextExtractor
from .pypdf_backend import PyPDFBackend
from .pdfplumber_backend import PDFPlumberBackend
from .extractor import PDFExtractor, AsyncPDFExtractor

__all__ = [
    "FileScanner",
    "list_pdf_files",
    "TextExtractor",
    "PyPDFBackend",
    "PDFPlumberBackend",
    "PDFExtractor",
    "AsyncPDFExtractor"
]
