"""
Timecode Sequences

Count-up and countdown generators over consecutive real frames. The batch
conversions they build on live in dropframe and formatter
(timecode_frames_array, real_frames_array, format_frames_array).
"""

from typing import List, Optional

import numpy as np

from smptetc.errors import NegativeFrameCountError, TimecodeError
from smptetc.framerate import FrameRate, DEFAULT_FPS
from smptetc.timecode import Timecode


def generate_countup(
    start_frames: int = 0,
    count: int = 1,
    framerate: Optional[FrameRate] = None,
) -> List[Timecode]:
    """
    Generate consecutive timecodes counting up.

    Args:
        start_frames: First real frame
        count: Number of timecodes to generate
        framerate: Frame rate profile (default: 24 fps)

    Returns:
        List of Timecode objects, rolling over after 24 hours
    """
    if framerate is None:
        framerate = FrameRate(DEFAULT_FPS)
    if start_frames < 0:
        raise NegativeFrameCountError(start_frames)
    if count < 0:
        raise TimecodeError(f"Count cannot be negative (got {count})")

    frames = np.arange(start_frames, start_frames + count, dtype=np.int64)
    return [Timecode(framerate=framerate, start_frames=n) for n in frames.tolist()]


def generate_countdown(
    start_frames: int,
    count: int,
    framerate: Optional[FrameRate] = None,
) -> List[Timecode]:
    """
    Generate consecutive timecodes counting down.

    The sequence stops at frame 0, so it may be shorter than count.

    Args:
        start_frames: First real frame
        count: Maximum number of timecodes to generate
        framerate: Frame rate profile (default: 24 fps)

    Returns:
        List of Timecode objects counting down from start_frames
    """
    if framerate is None:
        framerate = FrameRate(DEFAULT_FPS)
    if start_frames < 0:
        raise NegativeFrameCountError(start_frames)
    if count < 0:
        raise TimecodeError(f"Count cannot be negative (got {count})")

    stop = max(start_frames - count, -1)
    frames = np.arange(start_frames, stop, -1, dtype=np.int64)
    return [Timecode(framerate=framerate, start_frames=n) for n in frames.tolist()]
