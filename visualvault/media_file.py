"""Media file records and the metadata extracted from them."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Union

_U64_MAX = 2**64 - 1


class FileType(Enum):
    """Broad category of a media file."""

    IMAGE = "Image"
    VIDEO = "Video"
    DOCUMENT = "Document"
    OTHER = "Other"

    def __str__(self) -> str:
        return "Others" if self is FileType.OTHER else self.value


def _require(data: dict[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field '{key}'") from None
    except TypeError:
        raise ValueError(f"expected a mapping, got {type(data).__name__}") from None


def _unsigned(value: Any, name: str, limit: int = _U64_MAX) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field '{name}' must be an integer")
    if not 0 <= value <= limit:
        raise ValueError(f"field '{name}' out of range: {value}")
    return value


@dataclass
class ImageMetadata:
    """Dimensions and format details of an image."""

    width: int
    height: int
    format: str
    color_type: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "format": self.format,
            "color_type": self.color_type,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ImageMetadata:
        return cls(
            width=_unsigned(_require(data, "width"), "width", 2**32 - 1),
            height=_unsigned(_require(data, "height"), "height", 2**32 - 1),
            format=str(_require(data, "format")),
            color_type=str(_require(data, "color_type")),
        )


@dataclass
class VideoMetadata:
    """Duration, dimensions and encoding details of a video."""

    duration_seconds: float
    width: int
    height: int
    fps: float
    codec: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "duration_seconds": self.duration_seconds,
            "width": self.width,
            "height": self.height,
            "fps": self.fps,
            "codec": self.codec,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> VideoMetadata:
        return cls(
            duration_seconds=float(_require(data, "duration_seconds")),
            width=_unsigned(_require(data, "width"), "width", 2**32 - 1),
            height=_unsigned(_require(data, "height"), "height", 2**32 - 1),
            fps=float(_require(data, "fps")),
            codec=str(_require(data, "codec")),
        )


MediaMetadata = Union[ImageMetadata, VideoMetadata]

_METADATA_KINDS: dict[str, type] = {"Image": ImageMetadata, "Video": VideoMetadata}


def metadata_to_dict(metadata: Optional[MediaMetadata]) -> Optional[dict[str, Any]]:
    """Encode metadata as a single-key mapping tagged with its kind."""
    if metadata is None:
        return None
    if isinstance(metadata, ImageMetadata):
        return {"Image": metadata.to_dict()}
    if isinstance(metadata, VideoMetadata):
        return {"Video": metadata.to_dict()}
    raise TypeError(f"unsupported metadata type: {type(metadata).__name__}")


def metadata_from_dict(data: Optional[dict[str, Any]]) -> Optional[MediaMetadata]:
    """Decode metadata produced by :func:`metadata_to_dict`."""
    if data is None:
        return None
    if not isinstance(data, dict) or len(data) != 1:
        raise ValueError("metadata must be a mapping with exactly one kind")
    ((kind, payload),) = data.items()
    try:
        metadata_cls = _METADATA_KINDS[kind]
    except KeyError:
        raise ValueError(f"unknown metadata kind '{kind}'") from None
    return metadata_cls.from_dict(payload)


@dataclass
class MediaFile:
    """A file found on disk together with what is known about it."""

    path: Path
    name: str
    extension: str
    file_type: FileType
    size: int
    created: datetime
    modified: datetime
    hash: Optional[str] = None
    metadata: Optional[MediaMetadata] = field(default=None)

    def __post_init__(self) -> None:
        self.path = Path(self.path)

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": str(self.path),
            "name": self.name,
            "extension": self.extension,
            "file_type": self.file_type.value,
            "size": self.size,
            "created": self.created.isoformat(),
            "modified": self.modified.isoformat(),
            "hash": self.hash,
            "metadata": metadata_to_dict(self.metadata),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MediaFile:
        hash_value = data.get("hash") if isinstance(data, dict) else None
        return cls(
            path=Path(_require(data, "path")),
            name=str(_require(data, "name")),
            extension=str(_require(data, "extension")),
            file_type=FileType(_require(data, "file_type")),
            size=_unsigned(_require(data, "size"), "size"),
            created=datetime.fromisoformat(_require(data, "created")),
            modified=datetime.fromisoformat(_require(data, "modified")),
            hash=None if hash_value is None else str(hash_value),
            metadata=metadata_from_dict(data.get("metadata")),
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str) -> MediaFile:
        return cls.from_dict(json.loads(text))