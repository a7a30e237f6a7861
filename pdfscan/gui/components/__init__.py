"""
Reusable UI components for the Streamlit application.

Contains the scan form and the live and stored result views.
"""

from .search_form import render_search_form
from .results_list import render_results, StreamlitSink

__all__ = [
    "render_search_form",
    "render_results",
    "StreamlitSink"
]
