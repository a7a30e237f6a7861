"""
Core module providing foundational components.

This module contains the configuration loader, centralized logging setup,
and custom exception hierarchy. It has no internal dependencies.
"""

from .config_loader import get_config, Config, ScanConfig
from .logger import get_logger
from .exceptions import (
    PDFScanError,
    ConfigurationError,
    ExtractionError,
    InvalidRequestError
)

__all__ = [
    "get_config",
    "Config",
    "ScanConfig",
    "get_logger",
    "PDFScanError",
    "ConfigurationError",
    "ExtractionError",
    "InvalidRequestError"
]
