from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict


@dataclass
class ScanResult:
    total_size: int = 0
    dir_counts: Dict[str, int] = field(default_factory=dict)  # dir -> direct image files
    files_matched: int = 0
    dirs_skipped: int = 0
