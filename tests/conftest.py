"""Pytest configuration and fixtures."""

import pytest
from pathlib import Path

from imagescan.config import IGNORE_DIRS


def make_file(path: Path, size: int) -> Path:
    """Create a file of exactly size bytes, including parent folders."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    return path


@pytest.fixture
def scan_root(tmp_path):
    """Empty directory to scan.

    Skips when the temp location itself matches the ignore list (for example
    C:\\Users\\... on Windows), since the whole tree would be ignored.
    """
    root = tmp_path / "scan"
    root.mkdir()
    if any(ignored in str(root) for ignored in IGNORE_DIRS):
        pytest.skip(f"temporary directory {root} matches the ignore list")
    return root


@pytest.fixture
def photo_tree(scan_root):
    """Tree with a busy folder, a borderline folder and an ignored folder."""
    for i in range(6):
        make_file(scan_root / "busy" / f"img_{i}.jpg", 100)
    for i in range(5):
        make_file(scan_root / "borderline" / f"img_{i}.png", 10)
    make_file(scan_root / "borderline" / "notes.txt", 50)
    for i in range(8):
        make_file(scan_root / "Program Files" / "app" / f"icon_{i}.png", 1000)
    return scan_root
