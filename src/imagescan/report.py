"""Summaries printed after a scan: total size and busiest image directories."""

from typing import Callable, Dict, List, Tuple

from .config import MIN_IMAGE_COUNT

SIZE_UNITS = (("KB", 1024), ("MB", 1024 ** 2), ("GB", 1024 ** 3))


def format_size_summary(total_size: int) -> List[str]:
    """Render the total size in bytes, KB, MB and GB."""
    lines = [f"Total Size: {total_size} bytes"]
    for unit, divisor in SIZE_UNITS:
        lines.append(f"Total Size: {total_size / divisor:.2f} {unit}")
    return lines


def rank_directories(dir_counts: Dict[str, int]) -> List[Tuple[str, int]]:
    """Return (directory, count) pairs ordered by descending count."""
    return sorted(dir_counts.items(), key=lambda item: item[1], reverse=True)


def report_directories(
    dir_counts: Dict[str, int],
    min_count: int = MIN_IMAGE_COUNT,
    echo: Callable[[str], None] = print,
) -> List[str]:
    """
    Print directories holding more than min_count image files.

    Args:
        dir_counts: Image file count per directory
        min_count: Directories need strictly more files than this
        echo: Receives each output line

    Returns:
        Accepted directory paths, busiest first
    """
    accepted = []
    echo("")
    echo("Directories sorted by number of image files:")
    for directory, count in rank_directories(dir_counts):
        if count > min_count:
            echo(f"Directory: {directory} | Image Files: {count}")
            accepted.append(directory)
    return accepted
