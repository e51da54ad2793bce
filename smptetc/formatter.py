"""
Timecode Formatting

Turns a real frame count into display fields and the canonical string:

    HH:MM:SS:FF   non-drop
    HH:MM:SS;FF   drop-frame
    HH:MM:SS.mmm  millisecond mode, or any rate with fractional seconds forced
"""

from dataclasses import dataclass
from typing import List

import numpy as np

from smptetc.dropframe import timecode_frames_array, to_timecode_frames
from smptetc.framerate import FrameRate


@dataclass(frozen=True)
class TimecodeParts:
    """Display fields of a timecode, independent of frame rate."""
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    # frame number within the second, honours drop-frame
    frames: int = 0
    # fractional seconds in milliseconds, honours drop-frame
    fractional_millis: int = 0
    # realtime duration in milliseconds
    millis: int = 0


def split_timecode_frames(framerate: FrameRate, timecode_frames):
    """
    Split timecode frame counts into (hours, minutes, seconds, frames,
    fractional_millis, millis). Works on single counts and numpy arrays alike.
    """
    fps = framerate.integer_fps

    total_seconds, frames = divmod(timecode_frames, fps)
    total_minutes, seconds = divmod(total_seconds, 60)
    hours, minutes = divmod(total_minutes, 60)
    millis = (1000 * timecode_frames) // fps

    return hours, minutes, seconds, frames, millis % 1000, millis


def compute_parts(framerate: FrameRate, real_frames: int) -> TimecodeParts:
    """
    Compute display fields for a real frame count.

    The count rolls over after 24 hours and is converted to timecode frames
    first, so the fields are the "corrected" drop-frame values.
    """
    timecode_frames = to_timecode_frames(framerate, real_frames)
    return TimecodeParts(*split_timecode_frames(framerate, timecode_frames))


def compute_parts_array(framerate: FrameRate, real_frames) -> List[TimecodeParts]:
    """Display fields for many real frame counts at once."""
    fields = split_timecode_frames(framerate, timecode_frames_array(framerate, real_frames))
    return [TimecodeParts(*row) for row in zip(*(np.ravel(field).tolist() for field in fields))]


def frame_delimiter(framerate: FrameRate, force_fractional_seconds: bool = False) -> str:
    """Delimiter before the last field: ';' drop-frame, '.' fractional, ':' otherwise."""
    if framerate.is_drop_frame:
        return ";"
    if framerate.is_millis or force_fractional_seconds:
        return "."
    return ":"


def format_parts(
    parts: TimecodeParts,
    framerate: FrameRate,
    force_fractional_seconds: bool = False,
) -> str:
    """Assemble the canonical timecode string from display fields."""
    delimiter = frame_delimiter(framerate, force_fractional_seconds)
    if framerate.is_millis or force_fractional_seconds:
        last = f"{parts.fractional_millis:03d}"
    else:
        last = f"{parts.frames:02d}"
    return f"{parts.hours:02d}:{parts.minutes:02d}:{parts.seconds:02d}{delimiter}{last}"


def format_frames(
    framerate: FrameRate,
    real_frames: int,
    force_fractional_seconds: bool = False,
) -> str:
    """Format a real frame count as a timecode string."""
    return format_parts(compute_parts(framerate, real_frames), framerate, force_fractional_seconds)


def format_frames_array(
    framerate: FrameRate,
    real_frames,
    force_fractional_seconds: bool = False,
) -> List[str]:
    """Format many real frame counts as timecode strings."""
    return [
        format_parts(parts, framerate, force_fractional_seconds)
        for parts in compute_parts_array(framerate, real_frames)
    ]
