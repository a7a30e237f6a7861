"""
File utility functions for PDF Term Scan.

Provides directory checks, extension matching and path display helpers.
"""

import os
import stat
from pathlib import Path
from typing import Iterable, Union


def is_directory(path: Union[str, Path, None]) -> bool:
    """
    Check whether a path names an existing directory.

    Symbolic links are not followed, so a link to a directory is not
    treated as one.

    Args:
        path: Path to check. None or an empty string yields False.

    Returns:
        True if the path exists and is a real directory.
    """
    if not path:
        return False

    try:
        mode = os.lstat(path).st_mode
    except OSError:
        return False

    return stat.S_ISDIR(mode)


def has_extension(filename: str, extensions: Iterable[str]) -> bool:
    """
    Check a file name against a list of extensions, ignoring case.

    Args:
        filename: File name or path.
        extensions: Extensions including the dot, e.g. [".pdf"].

    Returns:
        True if the lowercased name ends with one of the extensions.
    """
    lowered = str(filename).lower()
    return any(lowered.endswith(ext.lower()) for ext in extensions)


def get_relative_path(filepath: Union[str, Path], base: Union[str, Path]) -> str:
    """
    Compute relative path from base directory.

    Args:
        filepath: Absolute path to the file.
        base: Base directory to compute relative path from.

    Returns:
        Relative path as string, or absolute path if not relative to base.
    """
    filepath = Path(filepath).resolve()
    base = Path(base).resolve()

    try:
        return str(filepath.relative_to(base))
    except ValueError:
        return str(filepath)
