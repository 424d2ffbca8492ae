"""
================================================================================
=== [Scan Images] - Report image files and their sizes below a directory
================================================================================

Walks a directory tree, prints every image file with its size, then prints
the total size and the directories holding more than five image files.
Directories named in the ignore list are skipped with everything below them.
"""

from typing import List, Optional

from .argument_parser import (
    ScriptArgumentParser,
    UsageError,
    create_standard_arguments,
    merge_arguments,
)
from .config import MIN_IMAGE_COUNT, load_config
from .report import format_size_summary, report_directories
from .scanner import ImageScanner

# Script metadata
SCRIPT_INFO = {
    "name": "Scan Images",
    "description": "Report image files and their sizes below a directory",
    "examples": [
        "/path/to/photos",
        "--directory /path/to/photos",
        "/path/to/photos --verbose",
    ],
}

SCRIPT_ARGUMENTS = {
    "directory": {
        "positional": True,
        "help": "Root directory to scan for image files",
    },
}

ARGUMENTS = merge_arguments(create_standard_arguments(), SCRIPT_ARGUMENTS)

USAGE = "Usage: scan_images.py <directory>"


def main(argv: Optional[List[str]] = None) -> int:
    """Scan the requested directory and print the report."""
    parser = ScriptArgumentParser(SCRIPT_INFO, ARGUMENTS)
    try:
        resolved_args = parser.resolve_args(parser.parse_args(argv))
    except UsageError as e:
        parser.error(str(e))
        print(USAGE)
        return 0

    root = resolved_args.get("directory")
    if root is None:
        print(USAGE)
        return 0

    config = load_config()
    logger = parser.setup_logging(resolved_args, "scan_images", config=config)

    print(f"Scanning for image files in: {root}")
    scanner = ImageScanner(root, logger=logger, ignore_match=config.ignore_match)
    try:
        result = scanner.scan()
    except OSError as e:
        logger.error(f"Error scanning directory {root}: {e}")
        print(f"Error scanning directory: {e}")
        return 0

    print()
    for line in format_size_summary(result.total_size):
        print(line)

    accepted = report_directories(result.dir_counts, MIN_IMAGE_COUNT)
    for directory in accepted:
        print(directory)

    logger.info(f"{len(accepted)} directories with more than {MIN_IMAGE_COUNT} image files")
    return 0
