# visualvault

Data models for organizing media files. They describe media files and their
metadata, filter collections of them, hold groups of duplicate files and
compute statistics about a collection. The package has no runtime
dependencies.

## Installation

```
pip install visualvault
```

## Modules

### `visualvault.media_file`

- `FileType`: `IMAGE`, `VIDEO`, `DOCUMENT`, `OTHER`. `str()` gives
  `"Image"`, `"Video"`, `"Document"` and `"Others"`.
- `ImageMetadata` (width, height, format, color_type) and `VideoMetadata`
  (duration_seconds, width, height, fps, codec), each with `to_dict` /
  `from_dict`.
- `metadata_to_dict` / `metadata_from_dict`: encode metadata as a one-key
  mapping tagged `"Image"` or `"Video"`, and back. `None` passes through.
- `MediaFile`: path, name, extension, file type, size, created and modified
  times, optional hash and metadata. `to_dict` / `from_dict` and `to_json` /
  `from_json` round-trip it; datetimes are stored in ISO 8601. `from_dict`
  raises `ValueError` for missing fields, unknown file types or metadata
  kinds, and sizes that are negative or not integers.

### `visualvault.duplicate`

- `DuplicateGroup(files, wasted_space=0)`: files with the same content.
- `DuplicateStats`: `groups` plus the `total_groups`, `total_duplicates` and
  `total_wasted_space` counters. `len()` gives the number of groups.
  `is_empty()` reports whether there are none. `get_by_hash(hash_value)`
  returns the first group whose first file has that hash, or `None`.
  `total_size()` sums the groups' wasted space, and `total_files()` counts
  the files in all groups.

### `visualvault.filters`

- `FilterSet` combines date ranges (`DateRange`, on the modification time),
  size ranges (`SizeRange`, in bytes), media-type filters (`MediaTypeFilter`
  for each `MediaType`) and regular expressions (`RegexPattern`, matched
  against the part of the file that `RegexTarget` names: `FILE_NAME`,
  `FILE_PATH` or `EXTENSION`).
- A file must fall in at least one date range and at least one size range,
  when any are set. Its extension must be listed, ignoring case, under at
  least one enabled media type, when any type is enabled. It must also match
  every enabled pattern. A pattern that does not compile is ignored.
- By default image and video types are enabled, and audio, document and
  archive types are not (`FilterSet.default_media_types()`).
- Filtering takes effect only while `is_active` is true. `add_date_range`,
  `add_size_range` (bounds in mebibytes) and `add_regex_pattern` set it.
  `clear_all()` removes every range and pattern, restores the default media
  types and sets `is_active` back to false.
- `active_filter_count()` counts the date and size ranges, the enabled media
  types and the enabled patterns.
- `to_dict` / `from_dict` and `to_json` / `from_json` round-trip a filter set.

### `visualvault.statistics`

- `Statistics.update_from_files(files)` recomputes the totals and the counts
  by type label, month (`"YYYY-MM"`), year and lower-case extension, along
  with the ten largest and ten most recently modified files.
- `Statistics.update_from_scan_results(files, duplicates)` recomputes the
  totals and the per-type counts and sizes. It also adds each group's extra
  copies to `duplicate_count` and `duplicate_size`. Those two figures add up
  across calls and are not reset.

### `visualvault.state`

- Enums for the screen and input handling: `AppState`, `InputMode`,
  `EditingField`, `DuplicateFocus`, `FilterFocus`. `FileDetails(index)` is
  the state for the details screen of one file.
- Result records `ScanResult` and `OrganizeResult`.

## Example

```python
from datetime import datetime
from pathlib import Path

from visualvault.filters import FilterSet, RegexTarget
from visualvault.media_file import FileType, MediaFile
from visualvault.statistics import Statistics

now = datetime.now().astimezone()
photo = MediaFile(
    path=Path("/photos/beach.jpg"),
    name="beach.jpg",
    extension="jpg",
    file_type=FileType.IMAGE,
    size=5 * 1024 * 1024,
    created=now,
    modified=now,
)

filters = FilterSet()
filters.add_size_range("Medium", 1.0, 10.0)
filters.add_regex_pattern(r"\.jpg$", RegexTarget.FILE_NAME, False)
print(filters.matches_file(photo))      # True
print(filters.active_filter_count())    # 4

stats = Statistics()
stats.update_from_files([photo])
print(stats.total_size, stats.files_by_extension)   # 5242880 {'jpg': 1}
```

## What this package does not do

It holds data models only. It does not scan directories, hash files, detect
duplicates, read image or video metadata, or move and rename files into an
organized folder structure. It has no terminal interface, no settings
storage and no command-line program. You build the `MediaFile`,
`DuplicateGroup` and `DuplicateStats` values that it works on yourself.

## Running the tests

```
pip install -e ".[test]"
pytest
```