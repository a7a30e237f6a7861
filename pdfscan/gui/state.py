"""
Streamlit session state management.

Provides helpers for initializing, reading, and updating
session state values used across the application.
"""

import streamlit as st
from typing import Any


DEFAULT_STATE = {
    "folder_path": "",
    "raw_terms": "",
    "case_sensitive": False,
    "literal_terms": False,
    "scan_events": [],
    "scan_stats": None,
}


def init_state() -> None:
    """
    Initialize session state with default values.

    Only sets values that don't already exist, preserving
    state across reruns.
    """
    for key, default_value in DEFAULT_STATE.items():
        if key not in st.session_state:
            st.session_state[key] = default_value


def get_state(key: str, default: Any = None) -> Any:
    """
    Get a value from session state.

    Args:
        key: State key to retrieve.
        default: Default value if key doesn't exist.

    Returns:
        The stored value or default.
    """
    return st.session_state.get(key, default)


def set_state(key: str, value: Any) -> None:
    """
    Set a value in session state.

    Args:
        key: State key to set.
        value: Value to store.
    """
    st.session_state[key] = value


def clear_scan_state() -> None:
    """Reset scan results to defaults."""
    set_state("scan_events", [])
    set_state("scan_stats", None)
