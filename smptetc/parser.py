"""
Timecode String Parser

Accepted formats:
- "HH:MM:SS:FF" -> non-drop-frame, integer frame number
- "HH:MM:SS;FF" -> drop-frame (also "HH;MM;SS;FF")
- "HH:MM:SS.mmm" -> fractional seconds, usually millisecond mode (1000 fps)
  but valid at any non-drop rate

Parsing is best effort: non-numeric or missing components count as zero. The
only validated condition is that the drop-frame delimiter matches the frame
rate, since reading a drop-frame string at a non-drop rate (or the reverse)
silently shifts the result by up to several minutes a day.
"""

import logging
import math
from typing import List, Optional

from smptetc.dropframe import to_real_frames
from smptetc.errors import FormatMismatchError
from smptetc.framerate import FrameRate, DEFAULT_FPS, DROP_FRAME_FPS, MILLISECOND_FPS

# Module-level logger
_logger = logging.getLogger(__name__)


def infer_framerate(timecode_string: str) -> FrameRate:
    """
    Pick a frame rate from the delimiters of a timecode string.

    - "00:00:00;00" -> 29.97 (drop-frame)
    - "00:00:00.000" -> 1000 (milliseconds)
    - "00:00:00:00" -> 24
    """
    if ";" in timecode_string:
        return FrameRate(DROP_FRAME_FPS)
    if "." in timecode_string:
        return FrameRate(MILLISECOND_FPS)
    return FrameRate(DEFAULT_FPS)


def _parse_component(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        _logger.debug(f"Non-numeric timecode component {text!r}, using 0")
        return 0.0
    if not math.isfinite(value):
        _logger.debug(f"Non-finite timecode component {text!r}, using 0")
        return 0.0
    return value


def split_components(timecode_string: str) -> List[float]:
    """Split a timecode string on ':' and ';' into numeric components."""
    return [_parse_component(part) for part in timecode_string.strip().replace(";", ":").split(":")]


def parse_to_frames(timecode_string: str, framerate: Optional[FrameRate] = None) -> int:
    """
    Parse a timecode string into a real frame count.

    Args:
        timecode_string: Timecode in one of the accepted formats
        framerate: Frame rate profile (default: inferred from the string)

    Returns:
        Real frame count

    Raises:
        FormatMismatchError: The string's drop-frame delimiter disagrees with the frame rate
    """
    if framerate is None:
        framerate = infer_framerate(timecode_string)

    drop_frame = ";" in timecode_string
    if drop_frame != framerate.is_drop_frame:
        raise FormatMismatchError(timecode_string, framerate.is_drop_frame)

    parts = split_components(timecode_string)

    # "HH:MM:SS.mmm" has three components, anything shorter is not a timecode
    if len(parts) < 3:
        return 0

    hours = int(parts[0])
    minutes = int(parts[1])
    seconds = parts[2]
    frames = int(parts[3]) if len(parts) >= 4 else 0

    # float arithmetic: huge components overflow to inf rather than raising
    total_seconds = seconds + 60.0 * (float(minutes) + 60.0 * float(hours))
    if not math.isfinite(total_seconds):
        _logger.debug(f"Timecode {timecode_string!r} is out of range, using 0 seconds")
        total_seconds = 0.0
    timecode_frames = framerate.timecode_seconds_to_frames(total_seconds) + frames
    return to_real_frames(framerate, timecode_frames)
