"""Summary figures about a collection of media files."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Iterable

from visualvault.duplicate import DuplicateStats
from visualvault.media_file import FileType, MediaFile

_TOP_COUNT = 10


@dataclass
class Statistics:
    """Counts and sizes broken down by type, date and extension."""

    total_files: int = 0
    total_size: int = 0
    duplicate_count: int = 0
    media_types: dict[str, int] = field(default_factory=dict)
    type_sizes: dict[str, int] = field(default_factory=dict)
    files_by_date: dict[str, int] = field(default_factory=dict)
    files_by_year: dict[int, int] = field(default_factory=dict)
    files_by_extension: dict[str, int] = field(default_factory=dict)
    largest_files: list[tuple[Path, int]] = field(default_factory=list)
    most_recent_files: list[tuple[Path, datetime]] = field(default_factory=list)
    duplicate_size: int = 0
    file_types: dict[FileType, int] = field(default_factory=dict)

    def update_from_files(self, files: Iterable[MediaFile]) -> None:
        """Recompute totals, breakdowns and top-ten lists from ``files``."""
        files = list(files)
        self.total_files = len(files)
        self.total_size = sum(f.size for f in files)

        media_types: Counter[str] = Counter()
        type_sizes: Counter[str] = Counter()
        by_date: Counter[str] = Counter()
        by_year: Counter[int] = Counter()
        by_extension: Counter[str] = Counter()

        for file in files:
            label = str(file.file_type)
            media_types[label] += 1
            type_sizes[label] += file.size
            by_date[file.modified.strftime("%Y-%m")] += 1
            by_year[file.modified.year] += 1
            suffix = file.path.suffix
            if suffix:
                by_extension[suffix[1:].lower()] += 1

        self.media_types = dict(media_types)
        self.type_sizes = dict(type_sizes)
        self.files_by_date = dict(by_date)
        self.files_by_year = dict(by_year)
        self.files_by_extension = dict(by_extension)

        self.largest_files = [
            (f.path, f.size)
            for f in sorted(files, key=lambda f: f.size, reverse=True)[:_TOP_COUNT]
        ]
        self.most_recent_files = [
            (f.path, f.modified)
            for f in sorted(files, key=lambda f: f.modified, reverse=True)[:_TOP_COUNT]
        ]

    def update_from_scan_results(
        self, files: Iterable[MediaFile], duplicates: DuplicateStats
    ) -> None:
        """Refresh totals and type counts, adding the duplicates found in a scan."""
        files = list(files)
        self.total_files = len(files)
        self.total_size = sum(f.size for f in files)

        for group in duplicates.groups:
            extra = len(group.files) - 1
            if extra > 0:
                self.duplicate_count += extra
                self.duplicate_size += group.files[0].size * extra

        file_types: Counter[FileType] = Counter()
        media_types: Counter[str] = Counter()
        type_sizes: Counter[str] = Counter()
        for file in files:
            file_types[file.file_type] += 1
            media_types[str(file.file_type)] += 1
            type_sizes[str(file.file_type)] += file.size

        self.file_types = dict(file_types)
        self.media_types = dict(media_types)
        self.type_sizes = dict(type_sizes)