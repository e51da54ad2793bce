"""
Shared fixtures for the timecode tests.
"""

import pytest

from smptetc.framerate import FrameRate, STANDARD_FRAME_RATES


@pytest.fixture
def fps_2997():
    return FrameRate(29.97)


@pytest.fixture
def fps_2997_ndf():
    return FrameRate(29.97, force_non_drop_frame=True)


@pytest.fixture
def fps_5994():
    return FrameRate(59.94)


@pytest.fixture
def fps_24():
    return FrameRate(24)


@pytest.fixture
def fps_1000():
    return FrameRate(1000)


@pytest.fixture(params=STANDARD_FRAME_RATES, ids=lambda fps: f"{fps:g}fps")
def framerate(request):
    """Every standard frame rate, drop-frame where it applies."""
    return FrameRate(request.param)
