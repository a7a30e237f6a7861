"""
Text utility functions for PDF Term Scan.

Provides term-string splitting and message truncation.
"""

from typing import List


def split_terms(raw: str, separator: str = ";") -> List[str]:
    """
    Split a delimited term string into individual terms.

    Each piece is trimmed and empty pieces are discarded. Order is kept
    and duplicates are not removed.

    Args:
        raw: User input such as "cat; dog ;;bird".
        separator: Delimiter between terms.

    Returns:
        List of non-empty terms.
    """
    if not raw:
        return []

    terms = [term.strip() for term in raw.split(separator)]
    return [term for term in terms if term]


def truncate_text(text: str, max_length: int, suffix: str = "...") -> str:
    """
    Truncate text to maximum length with ellipsis.

    Args:
        text: Text to truncate.
        max_length: Maximum length including suffix.
        suffix: String to append when truncated.

    Returns:
        Truncated text or original if within limit.
    """
    if not text or len(text) <= max_length:
        return text

    truncate_at = max_length - len(suffix)
    if truncate_at <= 0:
        return suffix[:max_length]

    # Try to break at word boundary
    truncated = text[:truncate_at]
    last_space = truncated.rfind(" ")

    if last_space > truncate_at * 0.7:
        truncated = truncated[:last_space]

    return truncated + suffix


if __name__ == "__main__":
    print(split_terms("aviation; civile ;; règlement"))
    print(truncate_text("Ceci est une phrase assez longue qui sera tronquée.", 30))
