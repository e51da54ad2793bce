"""
Drop-Frame Conversion

Drop-frame timecodes report higher frame numbers than really exist so that
29.97 fps timecode stays in step with wall-clock time. At 29.97 the frame
numbers 00 and 01 are skipped at the start of every minute, except minutes
divisible by 10:

    00:00:59;29 -> 00:01:00;02 -> 00:01:00;03 ...
    00:09:59;29 -> 00:10:00;00

Only numbers are skipped, never actual frames. Two counts are therefore kept
apart everywhere in this package:

- real frames: frames that actually elapsed
- timecode frames: the inflated count the displayed timecode stands for

The array functions convert between them element by element and are exact
inverses for every real frame count within 24 hours. to_timecode_frames and
to_real_frames are their single-count forms.

References:
- https://www.davidheidelberger.com/2010/06/10/drop-frame-timecode/
- https://robwomack.com/timecode-calculator/
"""

import logging

import numpy as np

from smptetc.framerate import FrameRate

# Module-level logger
_logger = logging.getLogger(__name__)


def timecode_frames_array(framerate: FrameRate, real_frames) -> np.ndarray:
    """
    Convert real frame counts into the timecode frame counts used for display.

    Real frames roll over after 24 hours. At non-drop rates this is the
    identity; at drop-frame rates the skipped frame numbers of every elapsed
    minute are added back in.

    Args:
        framerate: Frame rate profile
        real_frames: Real (non-inflated) frame count or array-like of counts

    Returns:
        int64 array of timecode frame counts, each >= its wrapped real count
    """
    frames = np.asarray(real_frames, dtype=np.int64) % framerate.real_frames_per_24_hours

    if not framerate.is_drop_frame:
        return frames

    skipped = framerate.skipped_frames_per_minute

    # Whole ten-minute blocks each skip 9 minutes' worth of frame numbers.
    # Within a block, minute 0 is a full minute and every later minute is
    # timecode_frames_per_minute real frames long.
    blocks, remainder = np.divmod(frames, framerate.real_frames_per_10_minutes)
    minutes_in_block = np.maximum(remainder - skipped, 0) // framerate.timecode_frames_per_minute

    return frames + skipped * 9 * blocks + skipped * minutes_in_block


def dropped_frame_numbers(framerate: FrameRate, timecode_frames) -> np.ndarray:
    """Mask of timecode frame counts whose frame number drop-frame skips."""
    frames = np.asarray(timecode_frames, dtype=np.int64) % framerate.timecode_frames_per_24_hours
    if not framerate.is_drop_frame:
        return np.zeros(frames.shape, dtype=bool)

    minutes, into_minute = np.divmod(frames, framerate.integer_fps * 60)
    return (minutes % 10 != 0) & (into_minute < framerate.skipped_frames_per_minute)


def real_frames_array(framerate: FrameRate, timecode_frames) -> np.ndarray:
    """
    Convert timecode frame counts back into real frame counts.

    The elapsed timecode minutes are read straight from the inflated count and
    the frame numbers skipped in them are removed. A frame number that cannot
    exist under drop-frame (e.g. 00:01:00;00 at 29.97) is first moved forward
    to the first valid number of its minute, so it resolves to the same real
    frame as 00:01:00;02.

    Args:
        framerate: Frame rate profile
        timecode_frames: Timecode (inflated) frame count or array-like of counts

    Returns:
        int64 array of real frame counts
    """
    frames = np.asarray(timecode_frames, dtype=np.int64) % framerate.timecode_frames_per_24_hours

    if not framerate.is_drop_frame:
        return frames

    skipped = framerate.skipped_frames_per_minute
    minutes, into_minute = np.divmod(frames, framerate.integer_fps * 60)
    frames = np.where(dropped_frame_numbers(framerate, frames), frames + skipped - into_minute, frames)

    return frames - skipped * (minutes - minutes // 10)


def to_timecode_frames(framerate: FrameRate, real_frames: int) -> int:
    """Timecode frame count for a single real frame count."""
    frames = real_frames % framerate.real_frames_per_24_hours
    return int(timecode_frames_array(framerate, frames))


def to_real_frames(framerate: FrameRate, timecode_frames: int) -> int:
    """Real frame count for a single timecode frame count."""
    frames = timecode_frames % framerate.timecode_frames_per_24_hours
    real_frames = int(real_frames_array(framerate, frames))
    if dropped_frame_numbers(framerate, frames):
        _logger.debug(f"Timecode frame {frames} is a dropped frame number, using real frame {real_frames}")
    return real_frames
