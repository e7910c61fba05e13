"""Application states, input modes and the results of long-running operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum, auto
from pathlib import Path


class AppState(Enum):
    """Screen the application is showing; see also :class:`FileDetails`."""

    DASHBOARD = auto()
    SETTINGS = auto()
    SCANNING = auto()
    ORGANIZING = auto()
    SEARCH = auto()
    DUPLICATE_REVIEW = auto()
    FILTERS = auto()


@dataclass(frozen=True)
class FileDetails:
    """State for the details screen of the file at ``index``."""

    index: int


class InputMode(Enum):
    NORMAL = auto()
    INSERT = auto()
    EDITING = auto()


class EditingField(Enum):
    SOURCE_FOLDER = auto()
    DESTINATION_FOLDER = auto()
    WORKER_THREADS = auto()
    BUFFER_SIZE = auto()


class DuplicateFocus(Enum):
    GROUP_LIST = auto()
    FILE_LIST = auto()


class FilterFocus(Enum):
    DATE_RANGE = auto()
    SIZE_RANGE = auto()
    MEDIA_TYPE = auto()
    REGEX_PATTERN = auto()


@dataclass
class ScanResult:
    """Outcome of a directory scan."""

    files_found: int
    duration: timedelta
    timestamp: datetime


@dataclass
class OrganizeResult:
    """Outcome of organizing files into a destination folder."""

    files_organized: int
    files_total: int
    destination: Path
    success: bool
    timestamp: datetime
    skipped_duplicates: int
    errors: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.destination = Path(self.destination)