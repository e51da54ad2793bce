"""
smptetc - SMPTE Timecode Calculator
Frame-rate-aware conversion between frame counts and SMPTE timecode strings,
with exact drop-frame handling and timecode arithmetic.
"""

__version__ = "0.1.0"

from .errors import TimecodeError, NegativeFrameCountError, FormatMismatchError
from .framerate import FrameRate, DEFAULT_FPS, STANDARD_FRAME_RATES
from .dropframe import to_timecode_frames, to_real_frames
from .parser import parse_to_frames, infer_framerate
from .formatter import TimecodeParts, compute_parts, format_frames
from .timecode import Timecode
from .sequence import generate_countdown, generate_countup

__all__ = [
    "Timecode",
    "FrameRate",
    "TimecodeParts",
    "DEFAULT_FPS",
    "STANDARD_FRAME_RATES",
    "to_timecode_frames",
    "to_real_frames",
    "parse_to_frames",
    "infer_framerate",
    "compute_parts",
    "format_frames",
    "generate_countdown",
    "generate_countup",
    "TimecodeError",
    "NegativeFrameCountError",
    "FormatMismatchError",
]
