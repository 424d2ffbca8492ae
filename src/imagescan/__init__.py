"""Scan directory trees for image files and report their sizes."""

from .models import ScanResult
from .scanner import ImageScanner
from .report import format_size_summary, rank_directories, report_directories

__all__ = [
    "ImageScanner",
    "ScanResult",
    "format_size_summary",
    "rank_directories",
    "report_directories",
]
