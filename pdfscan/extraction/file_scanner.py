"""
File scanner for recursive PDF discovery.

Walks the tree depth-first in the order the operating system lists each
directory, without sorting, and keeps files whose lowercased name ends
with a supported extension.
"""

import os
from pathlib import Path
from typing import Iterator, List, Union

from ..core import get_logger
from ..core.config_loader import get_config_or_defaults
from ..utils import has_extension

logger = get_logger(__name__)


class FileScanner:
    """
    Recursively discovers PDF files in a directory tree.

    Uses generator-based iteration so large trees are not held in memory
    until a caller asks for the full list.
    """

    def __init__(
        self,
        root_directory: Union[str, Path],
        extensions: List[str] = None
    ):
        """
        Initialize the file scanner.

        Args:
            root_directory: Directory to scan.
            extensions: List of file extensions to include (e.g., [".pdf"]).
                        Defaults to the configured extensions.
        """
        if extensions is None:
            extensions = get_config_or_defaults().extraction.supported_extensions

        self.root_directory = Path(root_directory)
        self.extensions = [ext.lower() for ext in extensions]

    def scan(self) -> Iterator[Path]:
        """
        Scan directory and yield matching file paths.

        Yields:
            Absolute Path objects for each matching file.

        Raises:
            OSError: If the root directory itself cannot be listed.
        """
        logger.info(f"Scanning directory: {self.root_directory}")

        root = self.root_directory.absolute()
        file_count = 0

        for filepath in self._walk(root, is_root=True):
            file_count += 1

            if file_count % 1000 == 0:
                logger.info(f"Discovered {file_count} files...")

            yield filepath

        logger.info(f"Scan complete: {file_count} files found")

    def _walk(self, directory: Path, is_root: bool = False) -> Iterator[Path]:
        """Yield matching files under a directory, depth-first."""
        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError as e:
            if is_root:
                raise
            logger.warning(f"Cannot read directory {directory}: {e}")
            return

        for entry in entries:
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError as e:
                logger.warning(f"Cannot access {entry.path}: {e}")
                continue

            if is_dir:
                yield from self._walk(Path(entry.path))
            elif has_extension(entry.name, self.extensions):
                yield Path(entry.path)

    def count(self) -> int:
        """
        Count total matching files without loading all paths.

        Returns:
            Number of matching files.
        """
        return sum(1 for _ in self.scan())

    def list_all(self) -> List[Path]:
        """
        Get all matching files as a list.

        Returns:
            List of all matching file paths, in discovery order.
        """
        return list(self.scan())


def list_pdf_files(root_folder: Union[str, Path]) -> List[Path]:
    """
    List every PDF file under a folder.

    Args:
        root_folder: Existing directory to search recursively.

    Returns:
        Ordered list of absolute file paths; empty if none match.
    """
    return FileScanner(root_folder, extensions=[".pdf"]).list_all()


if __name__ == "__main__":
    import sys

    if len(sys.argv) > 1:
        test_dir = Path(sys.argv[1])
    else:
        test_dir = Path(".")

    print(f"Scanning: {test_dir}")
    print("-" * 50)

    for i, filepath in enumerate(FileScanner(test_dir, extensions=[".pdf"]).scan()):
        print(f"  {filepath}")
        if i >= 9:
            print("  ... (showing first 10 only)")
            break
