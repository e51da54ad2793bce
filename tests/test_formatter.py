import pytest

from smptetc.formatter import TimecodeParts, compute_parts, format_frames, format_parts, frame_delimiter
from smptetc.framerate import FrameRate


@pytest.mark.parametrize("fps,expected", [
    (24, "00:00:00:00"),
    (23.976, "00:00:00:00"),
    (25, "00:00:00:00"),
    (30, "00:00:00:00"),
    (60, "00:00:00:00"),
    (29.97, "00:00:00;00"),
    (59.94, "00:00:00;00"),
    (1000, "00:00:00.000"),
])
def test_format_zero(fps, expected):
    assert format_frames(FrameRate(fps), 0) == expected


def test_drop_frame_minute_boundary(fps_2997):
    assert format_frames(fps_2997, 1799) == "00:00:59;29"
    assert format_frames(fps_2997, 1800) == "00:01:00;02"
    assert format_frames(fps_2997, 17981) == "00:09:59;29"
    assert format_frames(fps_2997, 17982) == "00:10:00;00"


def test_forced_non_drop_minute_boundary(fps_2997_ndf):
    assert format_frames(fps_2997_ndf, 1799) == "00:00:59:29"
    assert format_frames(fps_2997_ndf, 1800) == "00:01:00:00"


def test_compute_parts(fps_24):
    parts = compute_parts(fps_24, 24 * 3661 + 12)
    assert parts == TimecodeParts(
        hours=1, minutes=1, seconds=1, frames=12, fractional_millis=500, millis=3661500
    )


def test_compute_parts_rolls_over(fps_24):
    assert compute_parts(fps_24, 24 * 86400 + 1).frames == 1


def test_millis_use_integer_fps(fps_2997):
    # ten drop-frame minutes read as exactly 600 seconds
    assert compute_parts(fps_2997, 1800).millis == 60066
    assert compute_parts(fps_2997, 17982).millis == 600000


def test_millisecond_mode(fps_1000):
    assert format_frames(fps_1000, 1234) == "00:00:01.234"
    assert format_frames(fps_1000, 86_399_999) == "23:59:59.999"


def test_forced_fractional_seconds(fps_24):
    assert format_frames(fps_24, 0, force_fractional_seconds=True) == "00:00:00.000"
    assert format_frames(fps_24, 36, force_fractional_seconds=True) == "00:00:01.500"
    assert format_frames(fps_24, 1, force_fractional_seconds=True) == "00:00:00.041"


def test_frame_delimiter_priority(fps_2997, fps_24, fps_1000):
    assert frame_delimiter(fps_2997) == ";"
    assert frame_delimiter(fps_2997, force_fractional_seconds=True) == ";"
    assert frame_delimiter(fps_1000) == "."
    assert frame_delimiter(fps_24, force_fractional_seconds=True) == "."
    assert frame_delimiter(fps_24) == ":"


def test_format_parts_pads_fields(fps_24):
    parts = TimecodeParts(hours=3, minutes=4, seconds=5, frames=6)
    assert format_parts(parts, fps_24) == "03:04:05:06"
