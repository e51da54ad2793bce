"""
SMPTE Frame Rate Profiles

A FrameRate holds every per-rate constant the conversion engine needs. It is
built from a nominal frames-per-second value which may be any positive float,
but usually is one of the industry standard rates:

- 23.976 / 23.98 (24 * 1000/1001, non-drop)
- 24, 25, 30, 50, 60 (integer, non-drop)
- 29.97 / 59.94 (drop-frame unless forced non-drop)
- 1000 (millisecond mode: sub-second time displayed as milliseconds)

Drop-frame is detected from the nominal rate alone: 29.97 and 59.94 (to the
nearest 0.01) skip frame numbers, everything else does not. Forcing non-drop
clears the flag but keeps the integer rate, so 29.97 forced non-drop still
counts 30 frame numbers per second.
"""

import math
from dataclasses import dataclass, field
from decimal import Decimal, ROUND_FLOOR, ROUND_HALF_UP
from typing import Union

SECONDS_PER_DAY = 60 * 60 * 24

DEFAULT_FPS = 24.0
DROP_FRAME_FPS = 29.97
MILLISECOND_FPS = 1000.0

STANDARD_FRAME_RATES = (23.976, 23.98, 24.0, 25.0, 29.97, 30.0, 50.0, 59.94, 60.0, 1000.0)

# round(fps * 100) values that use drop-frame numbering
_DROP_FRAME_RATES = (2997, 5994)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(Decimal(value).to_integral_value(ROUND_HALF_UP))


def to_decimal(value) -> Decimal:
    """Decimal from the shortest repr of a number, so 1.001 stays 1.001."""
    return Decimal(str(value))


@dataclass(frozen=True)
class FrameRate:
    """
    Immutable frame rate profile.

    Two profiles compare equal when their nominal fps and drop-frame flag match;
    such profiles are interchangeable for every conversion.
    """
    fps: float
    force_non_drop_frame: bool = field(default=False, compare=False, repr=False)

    is_drop_frame: bool = field(init=False)
    integer_fps: int = field(init=False, compare=False, repr=False)

    # Frame numbers skipped at the start of each minute (except every 10th).
    # Nearest integer to 6.67% of the rate: 2 at 29.97, 4 at 59.94.
    skipped_frames_per_minute: int = field(init=False, compare=False, repr=False)
    # Real frames in a minute that skips frame numbers
    timecode_frames_per_minute: int = field(init=False, compare=False, repr=False)
    real_frames_per_10_minutes: int = field(init=False, compare=False, repr=False)
    real_frames_per_hour: int = field(init=False, compare=False, repr=False)
    real_frames_per_24_hours: int = field(init=False, compare=False, repr=False)
    timecode_frames_per_24_hours: int = field(init=False, compare=False, repr=False)

    def __post_init__(self):
        if not math.isfinite(self.fps) or self.fps <= 0:
            raise ValueError(f"Frame rate must be a finite positive number (got {self.fps})")

        integer_fps = round_half_up(self.fps)
        if integer_fps < 1:
            raise ValueError(f"Frame rate must round to at least 1 fps (got {self.fps})")
        is_drop_frame = (
            round_half_up(self.fps * 100) in _DROP_FRAME_RATES
            and not self.force_non_drop_frame
        )
        skipped = round_half_up(self.fps * 0.0666666) if is_drop_frame else 0

        object.__setattr__(self, "is_drop_frame", is_drop_frame)
        object.__setattr__(self, "integer_fps", integer_fps)
        object.__setattr__(self, "skipped_frames_per_minute", skipped)
        object.__setattr__(self, "timecode_frames_per_minute", integer_fps * 60 - skipped)
        object.__setattr__(self, "real_frames_per_10_minutes", round_half_up(self.fps * 60 * 10))
        object.__setattr__(self, "real_frames_per_hour", round_half_up(self.fps * 60 * 60))
        object.__setattr__(self, "real_frames_per_24_hours", round_half_up(self.fps * SECONDS_PER_DAY))
        object.__setattr__(self, "timecode_frames_per_24_hours", integer_fps * SECONDS_PER_DAY)

    @property
    def is_millis(self) -> bool:
        """True in millisecond mode (1000 fps)."""
        return self.integer_fps == 1000

    @staticmethod
    def rollover_seconds(seconds: float) -> float:
        """Wrap seconds into a single 24 hour day; negative values wrap from the end."""
        return seconds % SECONDS_PER_DAY

    def real_seconds_to_frames(self, seconds: Union[float, Decimal]) -> int:
        """
        Real frame count for a number of seconds of wall-clock time.

        Uses the full fractional rate and does not account for drop-frame,
        so 10 seconds at 29.97 is 299 frames. Rolls over after 24 hours.

        The product is floored in Decimal: 1.001 s at 1000 fps is frame 1001,
        although 1.001 * 1000.0 is 1000.9999... in float.
        """
        seconds = to_decimal(seconds) % SECONDS_PER_DAY
        # Decimal remainder takes the sign of the dividend
        if seconds < 0:
            seconds += SECONDS_PER_DAY
        return int((seconds * to_decimal(self.fps)).to_integral_value(ROUND_FLOOR))

    def timecode_seconds_to_frames(self, seconds: float) -> int:
        """
        Timecode frame count for a number of timecode seconds.

        Timecode seconds always count integer_fps frame numbers, which is why
        drop-frame numbering is needed at fractional rates. Rolls over after 24 hours.
        """
        return round_half_up(self.rollover_seconds(seconds) * self.integer_fps)

    def __str__(self) -> str:
        suffix = " DF" if self.is_drop_frame else ""
        return f"{self.fps:g} fps{suffix}"
