#!/usr/bin/env python3
"""
Scan a directory tree for image files.

Prints each image file with its size, the total size in bytes, KB, MB and GB,
and the directories holding more than five image files.

Examples:
  scan_images.py /path/to/photos
  scan_images.py --directory /path/to/photos --verbose
"""

import sys
from pathlib import Path

# Standard src import pattern
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from imagescan.cli import main


if __name__ == "__main__":
    sys.exit(main())
