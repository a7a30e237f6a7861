"""
Scanner module orchestrating the term scan pipeline.

Coordinates file discovery, per-file text extraction and term counting,
and publishes progress and result events to subscribed sinks.
"""

from .scan_controller import ScanController, ScanStatus, validate_request, run_scan
from .sinks import CollectingSink, ConsoleSink

__all__ = [
    "ScanController",
    "ScanStatus",
    "validate_request",
    "run_scan",
    "CollectingSink",
    "ConsoleSink"
]
