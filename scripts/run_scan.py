"""
CLI script to scan a folder of PDF files for search terms.

Usage:
    python scripts/run_scan.py FOLDER "cat; dog"
    python scripts/run_scan.py FOLDER "Dog" --case-sensitive
    python scripts/run_scan.py FOLDER "c.t" --literal
    python scripts/run_scan.py FOLDER "cat" --config path/to/config.json
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from pdfscan.core import get_logger, ConfigurationError, InvalidRequestError
from pdfscan.core.config_loader import get_config_or_defaults, reload_config
from pdfscan.search import SearchRequest
from pdfscan.scanner import ConsoleSink, run_scan


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Count search term occurrences in every PDF under a folder"
    )

    parser.add_argument(
        "folder",
        type=str,
        help="Folder to search recursively"
    )

    parser.add_argument(
        "terms",
        type=str,
        help="Search terms separated by ';'"
    )

    parser.add_argument(
        "--case-sensitive",
        action="store_true",
        default=None,
        help="Match terms with exact case"
    )

    parser.add_argument(
        "--literal",
        action="store_true",
        default=None,
        help="Treat regex metacharacters in terms as plain text"
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to custom config.json file"
    )

    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress per-file progress lines"
    )

    return parser.parse_args()


def main():
    """Main entry point for the scan CLI."""
    args = parse_args()

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}")
            sys.exit(2)
        try:
            reload_config(config_path)
        except ConfigurationError as e:
            print(f"Configuration error: {e.message}")
            sys.exit(2)

    config = get_config_or_defaults()
    logger = get_logger(__name__)

    case_sensitive = config.scan.case_sensitive if args.case_sensitive is None else args.case_sensitive
    literal = config.scan.literal_terms if args.literal is None else args.literal

    request = SearchRequest.from_raw(
        args.folder,
        args.terms,
        case_sensitive=case_sensitive,
        literal=literal,
        separator=config.scan.term_separator
    )

    print("=" * 60)
    print("PDF Term Scan")
    print("=" * 60)
    print(f"Folder:          {request.root_folder}")
    print(f"Terms:           {', '.join(request.terms)}")
    print(f"Case sensitive:  {request.case_sensitive}")
    print(f"Literal terms:   {request.literal}")
    print("=" * 60)

    sink = ConsoleSink(root_folder=request.root_folder, show_progress=not args.quiet)

    try:
        stats = run_scan(request, listeners=[sink])
    except InvalidRequestError as e:
        print(f"Invalid request: {e.message}")
        sys.exit(2)

    logger.debug(f"Scan stats: {stats}")

    print("=" * 60)
    print(f"Files found:       {stats.files_found:,}")
    print(f"Files processed:   {stats.files_processed:,}")
    print(f"Files failed:      {stats.files_failed:,}")
    print(f"Total occurrences: {stats.total_occurrences:,}")
    print("=" * 60)

    if stats.errors:
        print(f"\nErrors ({len(stats.errors)}):")
        for error in stats.errors[:20]:
            print(f"  - {error}")
        if len(stats.errors) > 20:
            print(f"  ... and {len(stats.errors) - 20} more errors")

    if stats.files_failed > 0:
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
