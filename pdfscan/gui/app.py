"""
Main Streamlit application for PDF Term Scan.

Entry point that assembles the scan form and result views into the
web interface. The app is a pure subscriber of ScanController events.

Note: This file is run directly by Streamlit, so it needs to
set up the Python path before importing other modules.
"""

import asyncio
import sys
from pathlib import Path

# Add project root to path for imports when run directly by Streamlit
_project_root = Path(__file__).parent.parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import streamlit as st  # noqa: E402

from pdfscan.core import get_logger, InvalidRequestError  # noqa: E402
from pdfscan.core.config_loader import get_config_or_defaults  # noqa: E402
from pdfscan.search import SearchRequest  # noqa: E402
from pdfscan.scanner import ScanController, CollectingSink  # noqa: E402

from pdfscan.gui.state import init_state, get_state, set_state, clear_scan_state  # noqa: E402
from pdfscan.gui.components import render_search_form, render_results, StreamlitSink  # noqa: E402

logger = get_logger(__name__)


def main():
    """Main application entry point."""
    config = get_config_or_defaults()

    st.set_page_config(
        page_title=config.gui.page_title,
        page_icon="📄",
        layout="wide"
    )

    init_state()

    st.title(config.gui.page_title)

    request = render_search_form(separator=config.scan.term_separator)

    st.divider()

    if request is not None:
        _execute_scan(request)
    else:
        render_results(get_state("scan_events", []))


def _execute_scan(request: SearchRequest) -> None:
    """
    Run a scan, drawing results live and storing them in state.

    Args:
        request: Validated search request from the form.
    """
    clear_scan_state()

    collector = CollectingSink()
    controller = ScanController(listeners=[collector, StreamlitSink()])

    try:
        stats = asyncio.run(controller.start(request))
    except InvalidRequestError as e:
        st.error(e.message)
        return

    set_state("scan_events", list(collector.events))
    set_state("scan_stats", stats)

    logger.info(
        f"Scan of '{request.root_folder}': {stats.files_found} files, "
        f"{stats.files_failed} failed"
    )


if __name__ == "__main__":
    main()
