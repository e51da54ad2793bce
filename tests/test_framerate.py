import pytest

from smptetc.framerate import FrameRate, round_half_up, STANDARD_FRAME_RATES


@pytest.mark.parametrize("fps", STANDARD_FRAME_RATES)
def test_drop_frame_detection(fps):
    expected = fps in (29.97, 59.94)
    assert FrameRate(fps).is_drop_frame is expected
    assert FrameRate(fps, force_non_drop_frame=True).is_drop_frame is False


def test_2997_constants(fps_2997):
    assert fps_2997.integer_fps == 30
    assert fps_2997.skipped_frames_per_minute == 2
    assert fps_2997.timecode_frames_per_minute == 1798
    assert fps_2997.real_frames_per_10_minutes == 17982
    assert fps_2997.real_frames_per_hour == 107892
    assert fps_2997.real_frames_per_24_hours == 2589408
    assert fps_2997.timecode_frames_per_24_hours == 2592000


def test_5994_constants(fps_5994):
    assert fps_5994.integer_fps == 60
    assert fps_5994.skipped_frames_per_minute == 4
    assert fps_5994.timecode_frames_per_minute == 3596
    assert fps_5994.real_frames_per_10_minutes == 35964
    assert fps_5994.real_frames_per_24_hours == 5178816


def test_forced_non_drop_keeps_integer_fps(fps_2997_ndf):
    assert fps_2997_ndf.integer_fps == 30
    assert fps_2997_ndf.skipped_frames_per_minute == 0
    assert fps_2997_ndf.timecode_frames_per_minute == 1800


def test_fractional_non_drop_rate():
    fps = FrameRate(23.976)
    assert fps.integer_fps == 24
    assert not fps.is_drop_frame
    assert fps.real_frames_per_24_hours == 2071526


def test_millisecond_mode(fps_1000, fps_24):
    assert fps_1000.is_millis
    assert fps_1000.real_frames_per_24_hours == 86_400_000
    assert not fps_24.is_millis


def test_equality_uses_fps_and_drop_flag():
    assert FrameRate(24) == FrameRate(24, force_non_drop_frame=True)
    assert FrameRate(29.97) != FrameRate(29.97, force_non_drop_frame=True)
    assert hash(FrameRate(29.97)) == hash(FrameRate(29.97))


def test_frame_rate_is_immutable(fps_24):
    with pytest.raises(AttributeError):
        fps_24.fps = 25


@pytest.mark.parametrize("fps", [0, 0.4, -24, float("nan"), float("inf")])
def test_invalid_fps_rejected(fps):
    with pytest.raises(ValueError):
        FrameRate(fps)


def test_real_seconds_to_frames_floors(fps_2997, fps_24):
    assert fps_24.real_seconds_to_frames(10) == 240
    assert fps_2997.real_seconds_to_frames(10) == 299
    assert fps_2997.real_seconds_to_frames(1) == 29


def test_real_seconds_to_frames_exact_decimal_floor(fps_1000):
    assert fps_1000.real_seconds_to_frames(1.001) == 1001
    assert fps_1000.real_seconds_to_frames(0.29) == 290
    assert [fps_1000.real_seconds_to_frames(n / 1000) for n in range(2000)] == list(range(2000))


def test_seconds_roll_over(fps_24):
    assert fps_24.real_seconds_to_frames(86400 + 1) == 24
    assert fps_24.real_seconds_to_frames(-1) == 86399 * 24


def test_timecode_seconds_to_frames(fps_2997, fps_1000):
    assert fps_2997.timecode_seconds_to_frames(60) == 1800
    assert fps_1000.timecode_seconds_to_frames(1.234) == 1234


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(1.4999) == 1


def test_str():
    assert str(FrameRate(29.97)) == "29.97 fps DF"
    assert str(FrameRate(25)) == "25 fps"
