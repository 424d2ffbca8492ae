"""
Image Scanner - Walk a directory tree and total up image files.

Every regular file whose lowercased extension is a recognized image format is
reported with its size as it is found. Sizes are summed and matches are counted
per immediate containing directory. Ignored directories are pruned together
with everything below them.
"""

import os
import stat
from pathlib import PurePath
from typing import Callable, Iterable, Optional

from .config import IGNORE_DIRS, IMAGE_EXTENSIONS
from .logging import get_logger
from .models import ScanResult


def _raise(error: OSError) -> None:
    raise error


class ImageScanner:
    """Scan a directory tree for image files."""

    def __init__(
        self,
        root: str,
        logger=None,
        ignore_dirs: Iterable[str] = IGNORE_DIRS,
        extensions: Iterable[str] = IMAGE_EXTENSIONS,
        ignore_match: str = "substring",
        echo: Callable[[str], None] = print,
    ):
        """
        Initialize the ImageScanner.

        Args:
            root: Directory to scan
            logger: Logger instance to use for logging
            ignore_dirs: Substrings marking directories to skip
            extensions: Lowercase image extensions, including the dot
            ignore_match: "substring" matches anywhere in the full path,
                "segment" only matches whole path components
            echo: Receives one line per matched file
        """
        if ignore_match not in ("substring", "segment"):
            raise ValueError(f"Unknown ignore_match mode: {ignore_match}")

        self.root = os.fspath(root)
        self.logger = logger or get_logger(__name__)
        self.ignore_dirs = tuple(ignore_dirs)
        self.extensions = frozenset(extensions)
        self.ignore_match = ignore_match
        self.echo = echo

    def is_ignored(self, dir_path: str) -> bool:
        """Check whether a directory path matches the ignore list."""
        if self.ignore_match == "segment":
            parts = PurePath(dir_path).parts
            return any(ignored in parts for ignored in self.ignore_dirs)
        return any(ignored in dir_path for ignored in self.ignore_dirs)

    def is_image(self, file_name: str) -> bool:
        """Check whether a file name carries a recognized image extension."""
        ext = os.path.splitext(file_name)[1].lower()
        return ext in self.extensions

    def _file_size(self, path: str) -> int:
        return os.lstat(path).st_size

    def _visit_file(self, path: str, result: ScanResult) -> None:
        # Every entry is stat-ed, image or not; a failure aborts the scan
        size = self._file_size(path)
        if not self.is_image(os.path.basename(path)):
            return

        self.echo(f"File: {path} | Size: {size} bytes")
        self.logger.audit(f"Image file: {path} ({size} bytes)")

        result.total_size += size
        result.files_matched += 1
        directory = os.path.dirname(path)
        result.dir_counts[directory] = result.dir_counts.get(directory, 0) + 1

    def scan(self) -> ScanResult:
        """
        Walk the tree and accumulate image sizes and per-directory counts.

        A root that is not a directory is treated as a single file entry.

        Returns:
            ScanResult with the total size and directory counts

        Raises:
            OSError: On the first directory or entry that cannot be read
        """
        result = ScanResult()

        if not stat.S_ISDIR(os.stat(self.root).st_mode):
            self.logger.debug(f"Root is a single file: {self.root}")
            self._visit_file(self.root, result)
            return result

        if self.is_ignored(self.root):
            self.logger.info(f"Root directory is ignored: {self.root}")
            result.dirs_skipped += 1
            return result

        self.logger.debug(f"Scanning {self.root}")
        for dirpath, dirnames, filenames in os.walk(self.root, onerror=_raise):
            kept = []
            for name in sorted(dirnames):
                path = os.path.join(dirpath, name)
                if self.is_ignored(path):
                    self.logger.debug(f"Skipping ignored directory: {path}")
                    result.dirs_skipped += 1
                else:
                    kept.append(name)
            dirnames[:] = kept

            for name in sorted(filenames):
                self._visit_file(os.path.join(dirpath, name), result)

        self.logger.info(
            f"Scan finished: {result.files_matched} image files in "
            f"{len(result.dir_counts)} directories, {result.dirs_skipped} skipped"
        )
        return result
