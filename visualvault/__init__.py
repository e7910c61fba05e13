"""Data models for organizing media files: files, filters, duplicate groups, statistics and state."""

__version__ = "0.7.0"
__all__ = ["duplicate", "filters", "media_file", "state", "statistics"]