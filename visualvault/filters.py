"""Filters that narrow a set of media files by date, size, type and name patterns."""

from __future__ import annotations

import json
import math
import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from visualvault.media_file import MediaFile

_U64_MAX = 2**64 - 1
_MEBIBYTE = 1024.0 * 1024.0


class MediaType(Enum):
    """Kind of media a type filter selects."""

    IMAGE = "Image"
    VIDEO = "Video"
    AUDIO = "Audio"
    DOCUMENT = "Document"
    ARCHIVE = "Archive"
    OTHER = "Other"

    def __str__(self) -> str:
        return _MEDIA_TYPE_LABELS[self]


_MEDIA_TYPE_LABELS = {
    MediaType.IMAGE: "Images",
    MediaType.VIDEO: "Videos",
    MediaType.AUDIO: "Audio",
    MediaType.DOCUMENT: "Documents",
    MediaType.ARCHIVE: "Archives",
    MediaType.OTHER: "Other",
}


class RegexTarget(Enum):
    """Which part of a file a regex pattern is matched against."""

    FILE_NAME = "FileName"
    FILE_PATH = "FilePath"
    EXTENSION = "Extension"

    def __str__(self) -> str:
        return _REGEX_TARGET_LABELS[self]


_REGEX_TARGET_LABELS = {
    RegexTarget.FILE_NAME: "File Name",
    RegexTarget.FILE_PATH: "Full Path",
    RegexTarget.EXTENSION: "Extension",
}


@dataclass
class DateRange:
    """Modification-date window; an open end is ``None``."""

    start: Optional[datetime]
    end: Optional[datetime]
    name: str

    def contains(self, moment: datetime) -> bool:
        return (self.start is None or moment >= self.start) and (
            self.end is None or moment <= self.end
        )


@dataclass
class SizeRange:
    """Inclusive file-size window in bytes; an open end is ``None``."""

    min_bytes: Optional[int]
    max_bytes: Optional[int]
    name: str

    def contains(self, size: int) -> bool:
        return (self.min_bytes is None or size >= self.min_bytes) and (
            self.max_bytes is None or size <= self.max_bytes
        )


@dataclass
class MediaTypeFilter:
    """A media type, the extensions belonging to it and whether it is selected."""

    media_type: MediaType
    extensions: list[str]
    enabled: bool


@dataclass
class RegexPattern:
    """A regular expression applied to one part of a file."""

    pattern: str
    target: RegexTarget
    case_sensitive: bool
    enabled: bool = True


def _mb_to_bytes(megabytes: float) -> int:
    """Convert mebibytes to bytes, saturating like an unsigned cast."""
    value = megabytes * _MEBIBYTE
    if math.isnan(value) or value <= 0:
        return 0
    if value >= _U64_MAX:
        return _U64_MAX
    return int(value)


def _file_extension(file: MediaFile) -> str:
    return file.path.suffix[1:]


def _target_text(pattern: RegexPattern, file: MediaFile) -> str:
    if pattern.target is RegexTarget.FILE_NAME:
        return file.name
    if pattern.target is RegexTarget.FILE_PATH:
        return str(file.path)
    return _file_extension(file)


def _matches_regex(pattern: RegexPattern, file: MediaFile) -> bool:
    flags = 0 if pattern.case_sensitive else re.IGNORECASE
    try:
        compiled = re.compile(pattern.pattern, flags)
    except re.error:
        return True  # invalid patterns are ignored
    return compiled.search(_target_text(pattern, file)) is not None


def _field(data: Any, key: str) -> Any:
    if not isinstance(data, dict):
        raise ValueError(f"expected a mapping, got {type(data).__name__}")
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field '{key}'") from None


def _optional_datetime(value: Any) -> Optional[datetime]:
    return None if value is None else datetime.fromisoformat(value)


def _optional_bytes(value: Any, name: str) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= _U64_MAX:
        raise ValueError(f"field '{name}' must be an unsigned integer")
    return value


def _bool(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"field '{name}' must be a boolean")
    return value


def _date_range_to_dict(item: DateRange) -> dict[str, Any]:
    return {
        "from": None if item.start is None else item.start.isoformat(),
        "to": None if item.end is None else item.end.isoformat(),
        "name": item.name,
    }


def _date_range_from_dict(data: Any) -> DateRange:
    return DateRange(
        start=_optional_datetime(_field(data, "from")),
        end=_optional_datetime(_field(data, "to")),
        name=str(_field(data, "name")),
    )


def _size_range_to_dict(item: SizeRange) -> dict[str, Any]:
    return {"min_bytes": item.min_bytes, "max_bytes": item.max_bytes, "name": item.name}


def _size_range_from_dict(data: Any) -> SizeRange:
    return SizeRange(
        min_bytes=_optional_bytes(_field(data, "min_bytes"), "min_bytes"),
        max_bytes=_optional_bytes(_field(data, "max_bytes"), "max_bytes"),
        name=str(_field(data, "name")),
    )


def _media_type_to_dict(item: MediaTypeFilter) -> dict[str, Any]:
    return {
        "media_type": item.media_type.value,
        "extensions": list(item.extensions),
        "enabled": item.enabled,
    }


def _media_type_from_dict(data: Any) -> MediaTypeFilter:
    return MediaTypeFilter(
        media_type=MediaType(_field(data, "media_type")),
        extensions=[str(ext) for ext in _field(data, "extensions")],
        enabled=_bool(_field(data, "enabled"), "enabled"),
    )


def _regex_to_dict(item: RegexPattern) -> dict[str, Any]:
    return {
        "pattern": item.pattern,
        "target": item.target.value,
        "case_sensitive": item.case_sensitive,
        "enabled": item.enabled,
    }


def _regex_from_dict(data: Any) -> RegexPattern:
    return RegexPattern(
        pattern=str(_field(data, "pattern")),
        target=RegexTarget(_field(data, "target")),
        case_sensitive=_bool(_field(data, "case_sensitive"), "case_sensitive"),
        enabled=_bool(_field(data, "enabled"), "enabled"),
    )


@dataclass
class FilterSet:
    """A combination of filters; a file must pass every kind that is in use."""

    date_ranges: list[DateRange] = field(default_factory=list)
    size_ranges: list[SizeRange] = field(default_factory=list)
    media_types: list[MediaTypeFilter] = field(
        default_factory=lambda: FilterSet.default_media_types()
    )
    regex_patterns: list[RegexPattern] = field(default_factory=list)
    is_active: bool = False

    @staticmethod
    def default_media_types() -> list[MediaTypeFilter]:
        """The built-in type filters; images and videos are selected."""
        return [
            MediaTypeFilter(
                MediaType.IMAGE,
                ["jpg", "jpeg", "png", "gif", "bmp", "webp", "tiff", "svg", "ico", "heic"],
                True,
            ),
            MediaTypeFilter(
                MediaType.VIDEO,
                ["mp4", "avi", "mkv", "mov", "wmv", "flv", "webm", "m4v", "mpg", "mpeg"],
                True,
            ),
            MediaTypeFilter(
                MediaType.AUDIO,
                ["mp3", "wav", "flac", "aac", "ogg", "wma", "m4a", "opus"],
                False,
            ),
            MediaTypeFilter(
                MediaType.DOCUMENT,
                ["pdf", "doc", "docx", "txt", "odt", "rtf"],
                False,
            ),
            MediaTypeFilter(
                MediaType.ARCHIVE,
                ["zip", "rar", "7z", "tar", "gz", "bz2", "xz"],
                False,
            ),
        ]

    def matches_file(self, file: MediaFile) -> bool:
        """Whether the file passes the filters; everything passes when inactive."""
        if not self.is_active:
            return True
        return (
            self._matches_date(file)
            and self._matches_size(file)
            and self._matches_media_type(file)
            and all(_matches_regex(p, file) for p in self.regex_patterns if p.enabled)
        )

    def _matches_date(self, file: MediaFile) -> bool:
        if not self.date_ranges:
            return True
        return any(r.contains(file.modified) for r in self.date_ranges)

    def _matches_size(self, file: MediaFile) -> bool:
        if not self.size_ranges:
            return True
        return any(r.contains(file.size) for r in self.size_ranges)

    def _matches_media_type(self, file: MediaFile) -> bool:
        enabled = [mt for mt in self.media_types if mt.enabled]
        if not enabled:
            return True
        file_ext = _file_extension(file).lower()
        return any(ext.lower() == file_ext for mt in enabled for ext in mt.extensions)

    def clear_all(self) -> None:
        """Remove every filter, restore the default types and deactivate."""
        self.date_ranges.clear()
        self.size_ranges.clear()
        self.regex_patterns.clear()
        self.media_types = self.default_media_types()
        self.is_active = False

    def active_filter_count(self) -> int:
        return (
            len(self.date_ranges)
            + len(self.size_ranges)
            + sum(1 for mt in self.media_types if mt.enabled)
            + sum(1 for rp in self.regex_patterns if rp.enabled)
        )

    def add_date_range(
        self, name: str, start: Optional[datetime], end: Optional[datetime]
    ) -> None:
        self.date_ranges.append(DateRange(start=start, end=end, name=name))
        self.is_active = True

    def add_size_range(
        self, name: str, min_mb: Optional[float], max_mb: Optional[float]
    ) -> None:
        """Add a size window given in mebibytes."""
        self.size_ranges.append(
            SizeRange(
                min_bytes=None if min_mb is None else _mb_to_bytes(min_mb),
                max_bytes=None if max_mb is None else _mb_to_bytes(max_mb),
                name=name,
            )
        )
        self.is_active = True

    def add_regex_pattern(
        self, pattern: str, target: RegexTarget, case_sensitive: bool
    ) -> None:
        self.regex_patterns.append(
            RegexPattern(pattern=pattern, target=target, case_sensitive=case_sensitive)
        )
        self.is_active = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "date_ranges": [_date_range_to_dict(r) for r in self.date_ranges],
            "size_ranges": [_size_range_to_dict(r) for r in self.size_ranges],
            "media_types": [_media_type_to_dict(m) for m in self.media_types],
            "regex_patterns": [_regex_to_dict(p) for p in self.regex_patterns],
            "is_active": self.is_active,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FilterSet:
        return cls(
            date_ranges=[_date_range_from_dict(r) for r in _field(data, "date_ranges")],
            size_ranges=[_size_range_from_dict(r) for r in _field(data, "size_ranges")],
            media_types=[_media_type_from_dict(m) for m in _field(data, "media_types")],
            regex_patterns=[_regex_from_dict(p) for p in _field(data, "regex_patterns")],
            is_active=_bool(_field(data, "is_active"), "is_active"),
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str) -> FilterSet:
        return cls.from_dict(json.loads(text))