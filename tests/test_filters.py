from datetime import datetime, timedelta
from pathlib import Path

import pytest

from visualvault.filters import (
    FilterSet,
    MediaType,
    RegexTarget,
)
from visualvault.media_file import FileType, MediaFile


def make_file() -> MediaFile:
    now = datetime.now()
    return MediaFile(
        path=Path("/test/path/image.jpg"),
        name="image.jpg",
        extension="jpg",
        file_type=FileType.IMAGE,
        size=1024 * 1024 * 5,
        created=now,
        modified=now,
    )


def test_filter_set_default():
    fs = FilterSet()
    assert fs.date_ranges == []
    assert fs.size_ranges == []
    assert fs.regex_patterns == []
    assert not fs.is_active
    assert len(fs.media_types) == 5
    assert [mt.enabled for mt in fs.media_types] == [True, True, False, False, False]


def test_filter_set_new():
    fs = FilterSet()
    assert len(fs.date_ranges) == 0
    assert fs.active_filter_count() == 2


def test_matches_file_inactive_filter():
    assert FilterSet().matches_file(make_file()) is True


def test_matches_file_date_range():
    fs = FilterSet()
    file = make_file()
    yesterday = datetime.now() - timedelta(days=1)
    tomorrow = datetime.now() + timedelta(days=1)
    last_week = datetime.now() - timedelta(days=7)

    fs.add_date_range("Recent", yesterday, tomorrow)
    assert fs.matches_file(file)

    file.modified = last_week
    assert not fs.matches_file(file)

    fs.date_ranges.clear()
    fs.add_date_range("After last month", datetime.now() - timedelta(days=30), None)
    file.modified = datetime.now()
    assert fs.matches_file(file)

    fs.date_ranges.clear()
    fs.add_date_range("Before today", None, datetime.now())
    assert fs.matches_file(file)


def test_matches_file_size_range():
    fs = FilterSet()
    file = make_file()

    fs.add_size_range("Medium files", 1.0, 10.0)
    assert fs.matches_file(file)

    file.size = 1024 * 1024 * 20
    assert not fs.matches_file(file)

    fs.size_ranges.clear()
    fs.add_size_range("Large files", 15.0, None)
    assert fs.matches_file(file)

    fs.size_ranges.clear()
    fs.add_size_range("Small files", None, 30.0)
    assert fs.matches_file(file)


def test_matches_file_media_types():
    fs = FilterSet()
    file = make_file()
    fs.is_active = True
    assert fs.matches_file(file)

    fs.media_types[0].enabled = False
    fs.media_types[1].enabled = True
    assert not fs.matches_file(file)

    file.path = Path("/test/video.mp4")
    file.extension = "mp4"
    assert fs.matches_file(file)

    file.extension = "MP4"
    assert fs.matches_file(file)


def test_uppercase_path_extension_matches():
    fs = FilterSet()
    fs.is_active = True
    file = make_file()
    file.path = Path("/test/IMAGE.JPG")
    assert fs.matches_file(file)


def test_matches_file_regex_patterns():
    fs = FilterSet()
    file = make_file()
    fs.is_active = True

    fs.add_regex_pattern(r"^image.*\.jpg$", RegexTarget.FILE_NAME, False)
    assert fs.matches_file(file)

    fs.regex_patterns.clear()
    fs.add_regex_pattern("IMAGE", RegexTarget.FILE_NAME, True)
    assert not fs.matches_file(file)

    fs.regex_patterns.clear()
    fs.add_regex_pattern("IMAGE", RegexTarget.FILE_NAME, False)
    assert fs.matches_file(file)

    fs.regex_patterns.clear()
    fs.add_regex_pattern("/test/path/", RegexTarget.FILE_PATH, False)
    assert fs.matches_file(file)

    fs.regex_patterns.clear()
    fs.add_regex_pattern("^jpg$", RegexTarget.EXTENSION, False)
    assert fs.matches_file(file)

    fs.regex_patterns[0].enabled = False
    assert fs.matches_file(file)


def test_non_matching_extension_regex_rejects():
    fs = FilterSet()
    fs.add_regex_pattern("^png$", RegexTarget.EXTENSION, False)
    assert fs.matches_file(make_file()) is False


def test_matches_file_combined_filters():
    fs = FilterSet()
    file = make_file()
    fs.add_date_range(
        "Recent", datetime.now() - timedelta(days=1), datetime.now() + timedelta(days=1)
    )
    fs.add_size_range("Medium", 1.0, 10.0)
    fs.add_regex_pattern(r"\.jpg$", RegexTarget.FILE_NAME, False)
    assert fs.matches_file(file)

    fs.size_ranges[0].max_bytes = 1024 * 1024
    assert not fs.matches_file(file)


def test_clear_all():
    fs = FilterSet()
    fs.add_date_range("Test", None, None)
    fs.add_size_range("Test", 1.0, None)
    fs.add_regex_pattern("test", RegexTarget.FILE_NAME, False)
    assert fs.is_active
    assert fs.date_ranges and fs.size_ranges and fs.regex_patterns

    fs.media_types[0].enabled = False
    fs.clear_all()

    assert not fs.is_active
    assert fs.date_ranges == []
    assert fs.size_ranges == []
    assert fs.regex_patterns == []
    assert len(fs.media_types) == 5
    assert fs.media_types[0].enabled
    assert fs.media_types[1].enabled


def test_active_filter_count():
    fs = FilterSet()
    assert fs.active_filter_count() == 2
    fs.add_date_range("Test", None, None)
    assert fs.active_filter_count() == 3
    fs.add_size_range("Test", 1.0, None)
    assert fs.active_filter_count() == 4
    fs.add_regex_pattern("test", RegexTarget.FILE_NAME, False)
    assert fs.active_filter_count() == 5
    fs.media_types[0].enabled = False
    assert fs.active_filter_count() == 4
    fs.regex_patterns[0].enabled = False
    assert fs.active_filter_count() == 3


@pytest.mark.parametrize(
    "media_type, label",
    [
        (MediaType.IMAGE, "Images"),
        (MediaType.VIDEO, "Videos"),
        (MediaType.AUDIO, "Audio"),
        (MediaType.DOCUMENT, "Documents"),
        (MediaType.ARCHIVE, "Archives"),
        (MediaType.OTHER, "Other"),
    ],
)
def test_media_type_display(media_type, label):
    assert str(media_type) == label


@pytest.mark.parametrize(
    "target, label",
    [
        (RegexTarget.FILE_NAME, "File Name"),
        (RegexTarget.FILE_PATH, "Full Path"),
        (RegexTarget.EXTENSION, "Extension"),
    ],
)
def test_regex_target_display(target, label):
    assert str(target) == label


def test_default_media_types():
    media_types = FilterSet.default_media_types()
    assert len(media_types) == 5

    image = media_types[0]
    assert image.media_type is MediaType.IMAGE
    assert {"jpg", "png", "gif"} <= set(image.extensions)
    assert image.enabled

    video = media_types[1]
    assert video.media_type is MediaType.VIDEO
    assert {"mp4", "avi", "mkv"} <= set(video.extensions)
    assert video.enabled

    assert not media_types[2].enabled


def test_default_media_types_are_independent_copies():
    first = FilterSet()
    second = FilterSet()
    first.media_types[0].enabled = False
    assert second.media_types[0].enabled is True


def test_size_range_conversion():
    fs = FilterSet()
    fs.add_size_range("Test", 1.5, 2.5)
    rng = fs.size_ranges[0]
    assert rng.min_bytes == 1024 * 1024 + 512 * 1024
    assert rng.max_bytes == 2 * 1024 * 1024 + 512 * 1024

    fs.size_ranges.clear()
    fs.add_size_range("Test", None, 10.0)
    rng = fs.size_ranges[0]
    assert rng.min_bytes is None
    assert rng.max_bytes == 10 * 1024 * 1024


def test_negative_size_saturates_to_zero():
    fs = FilterSet()
    fs.add_size_range("Neg", -3.0, None)
    assert fs.size_ranges[0].min_bytes == 0


def test_file_with_no_extension():
    fs = FilterSet()
    fs.is_active = True
    file = make_file()
    file.path = Path("/test/noextension")
    file.extension = ""
    assert not fs.matches_file(file)

    for mt in fs.media_types:
        mt.enabled = False
    assert fs.matches_file(file)


def test_invalid_regex_pattern():
    fs = FilterSet()
    fs.add_regex_pattern("[invalid regex", RegexTarget.FILE_NAME, False)
    assert fs.is_active
    assert fs.matches_file(make_file()) is True


def test_edge_cases():
    fs = FilterSet()
    fs.is_active = True
    file = make_file()
    file.path = Path("/test/noextension")
    file.extension = ""
    assert not fs.matches_file(file)

    fs = FilterSet()
    fs.add_regex_pattern("[invalid regex", RegexTarget.FILE_NAME, False)
    assert fs.matches_file(make_file())


def test_serialization():
    fs = FilterSet()
    fs.add_date_range("Test", datetime.now(), None)
    fs.add_size_range("Test", 1.0, 10.0)
    fs.add_regex_pattern("test", RegexTarget.FILE_NAME, True)

    restored = FilterSet.from_json(fs.to_json())

    assert len(restored.date_ranges) == len(fs.date_ranges)
    assert len(restored.size_ranges) == len(fs.size_ranges)
    assert len(restored.regex_patterns) == len(fs.regex_patterns)
    assert restored.is_active == fs.is_active
    assert restored == fs


def test_serialized_field_names():
    fs = FilterSet()
    fs.add_date_range("Window", None, datetime(2024, 1, 2, 3, 4, 5))
    fs.add_regex_pattern("x", RegexTarget.FILE_PATH, False)
    data = fs.to_dict()
    assert data["date_ranges"][0] == {
        "from": None,
        "to": "2024-01-02T03:04:05",
        "name": "Window",
    }
    assert data["regex_patterns"][0]["target"] == "FilePath"
    assert data["media_types"][0]["media_type"] == "Image"
    assert data["is_active"] is True


def test_from_dict_missing_field_raises():
    data = FilterSet().to_dict()
    del data["is_active"]
    with pytest.raises(ValueError):
        FilterSet.from_dict(data)


def test_from_dict_unknown_media_type_raises():
    data = FilterSet().to_dict()
    data["media_types"][0]["media_type"] = "Hologram"
    with pytest.raises(ValueError):
        FilterSet.from_dict(data)