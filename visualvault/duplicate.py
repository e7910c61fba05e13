"""Groups of identical files and summary figures about them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from visualvault.media_file import MediaFile


@dataclass
class DuplicateGroup:
    """Files sharing the same content; ``wasted_space`` is what removing all but one would free."""

    files: list[MediaFile]
    wasted_space: int = 0

    def __init__(self, files: Iterable[MediaFile], wasted_space: int = 0) -> None:
        self.files = list(files)
        self.wasted_space = wasted_space


@dataclass
class DuplicateStats:
    """The duplicate groups found in a scan and their totals."""

    total_groups: int = 0
    total_duplicates: int = 0
    total_wasted_space: int = 0
    groups: list[DuplicateGroup] = field(default_factory=list)

    def get_by_hash(self, hash_value: str) -> Optional[DuplicateGroup]:
        """Return the first group whose leading file has the given hash."""
        return next(
            (group for group in self.groups if group.files and group.files[0].hash == hash_value),
            None,
        )

    def __len__(self) -> int:
        return len(self.groups)

    def is_empty(self) -> bool:
        return not self.groups

    def total_size(self) -> int:
        return sum(group.wasted_space for group in self.groups)

    def total_files(self) -> int:
        return sum(len(group.files) for group in self.groups)