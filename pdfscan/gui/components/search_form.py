"""
Scan form component for PDF Term Scan.

Collects the folder, the `;`-separated terms and the matching options,
and only enables the scan button once the inputs are usable.
"""

import streamlit as st
from typing import Optional

from ...core import InvalidRequestError
from ...search import SearchRequest
from ...scanner import validate_request
from ..state import get_state, set_state


def render_search_form(separator: str = ";") -> Optional[SearchRequest]:
    """
    Render the scan inputs.

    Args:
        separator: Term delimiter shown in the placeholder and used to split.

    Returns:
        The SearchRequest when the scan button was pressed, else None.
    """
    folder_path = st.text_input(
        "Folder",
        value=get_state("folder_path", ""),
        placeholder="Folder containing PDF files",
        key="folder_input"
    )
    set_state("folder_path", folder_path)

    raw_terms = st.text_input(
        "Search terms",
        value=get_state("raw_terms", ""),
        placeholder=f"term one{separator} term two",
        key="terms_input",
        help="Each term is matched as a regular expression unless literal matching is enabled"
    )
    set_state("raw_terms", raw_terms)

    col1, col2 = st.columns(2)

    with col1:
        case_sensitive = st.checkbox(
            "Case sensitive",
            value=get_state("case_sensitive", False),
            key="case_sensitive_checkbox"
        )
        set_state("case_sensitive", case_sensitive)

    with col2:
        literal = st.checkbox(
            "Literal terms",
            value=get_state("literal_terms", False),
            key="literal_checkbox",
            help="Treat characters such as . ( * as plain text"
        )
        set_state("literal_terms", literal)

    request = SearchRequest.from_raw(
        folder_path.strip(),
        raw_terms,
        case_sensitive=case_sensitive,
        literal=literal,
        separator=separator
    )

    problem = _input_problem(folder_path, request)
    if problem and folder_path and raw_terms:
        st.caption(problem)

    submitted = st.button(
        "Search",
        type="primary",
        disabled=problem is not None
    )

    return request if submitted else None


def _input_problem(folder_path: str, request: SearchRequest) -> Optional[str]:
    """Describe why the inputs cannot be scanned, or None when they can."""
    if not folder_path.strip():
        return "Choose a folder"

    try:
        validate_request(request)
    except InvalidRequestError as e:
        return e.message

    return None
