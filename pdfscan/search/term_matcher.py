"""
Term matching for extracted page text.

A term is compiled as a regular expression as typed, so metacharacters such
as `.` or `(` keep their regex meaning. Literal mode escapes them instead.
Without case sensitivity both the term and the page text are lowercased
before matching.
"""

import re
from typing import Iterable, Pattern

from ..core import InvalidRequestError
from .models import TermStatus


def compile_term(term: str, case_sensitive: bool, literal: bool = False) -> Pattern:
    """
    Compile a term into a pattern.

    Args:
        term: Raw user term.
        case_sensitive: Keep the term's case when True, lowercase it otherwise.
        literal: Escape regex metacharacters.

    Returns:
        Compiled pattern.

    Raises:
        re.error: If the term is not a valid pattern.
    """
    if not case_sensitive:
        term = term.lower()

    if literal:
        term = re.escape(term)

    return re.compile(term)


def validate_pattern(term: str, literal: bool = False) -> None:
    """
    Check that a term compiles in both case modes.

    Args:
        term: Raw user term.
        literal: Whether the term will be escaped.

    Raises:
        InvalidRequestError: If the term is not a valid pattern.
    """
    for case_sensitive in (True, False):
        try:
            compile_term(term, case_sensitive, literal)
        except re.error as e:
            raise InvalidRequestError(
                f"Invalid search pattern '{term}': {e}",
                field="terms",
                details={"term": term}
            )


def count_occurrences(
    page_texts: Iterable[str],
    term: str,
    case_sensitive: bool,
    literal: bool = False
) -> int:
    """
    Count non-overlapping matches of a term across all pages.

    Args:
        page_texts: Ordered page texts of one file.
        term: Raw user term.
        case_sensitive: Match with exact case when True.
        literal: Escape regex metacharacters.

    Returns:
        Total match count, summed over pages.
    """
    pattern = compile_term(term, case_sensitive, literal)

    occurrences = 0
    for page_text in page_texts:
        if not case_sensitive:
            page_text = page_text.lower()
        occurrences += sum(1 for _ in pattern.finditer(page_text))

    return occurrences


def status_for(occurrences: int) -> TermStatus:
    """Map an occurrence count to FOUND or NOT_FOUND."""
    return TermStatus.FOUND if occurrences > 0 else TermStatus.NOT_FOUND


if __name__ == "__main__":
    pages = ["The cat sat.", "A CAT ran."]
    print(f"'cat' (insensitive): {count_occurrences(pages, 'cat', False)}")
    print(f"'cat' (sensitive):   {count_occurrences(pages, 'cat', True)}")
    print(f"'c.t' (regex):       {count_occurrences(pages, 'c.t', False)}")
    print(f"'c.t' (literal):     {count_occurrences(pages, 'c.t', False, literal=True)}")
