"""
SMPTE Timecode Value

Timecode does all of its calculation over frames: the only state it holds is
the real frame count and the frame rate. Display fields (hours, minutes,
seconds, frames, milliseconds) are recomputed whenever the frame count changes.

There is a 24 hour SMPTE timecode limit, so frame counts beyond it roll over.

Comparison and arithmetic work on the realtime duration in milliseconds, so
values at different frame rates can be compared and combined. Arithmetic
results are built at the frame rate of the left operand:

    >>> a = Timecode.at_timecode("00:00:01:00", framerate=FrameRate(24))
    >>> b = Timecode.at_timecode("00:00:00.500")  # 1000 fps
    >>> str(a + b)
    '00:00:01:12'
"""

from decimal import Decimal
from functools import total_ordering
from typing import Optional, Union

from smptetc.errors import NegativeFrameCountError, TimecodeError
from smptetc.formatter import TimecodeParts, compute_parts, format_parts, frame_delimiter
from smptetc.framerate import FrameRate, DEFAULT_FPS, to_decimal
from smptetc.parser import infer_framerate, parse_to_frames

Number = Union[int, float]


@total_ordering
class Timecode:
    """
    A position in SMPTE timecode, stored as a real frame count.

    The frame count is never inflated by drop-frame; the displayed frame
    numbers are derived from it through the frame rate.
    """

    def __init__(
        self,
        framerate: Optional[FrameRate] = None,
        start_frames: int = 0,
        force_fractional_seconds: bool = False,
    ):
        """
        Create a timecode.

        Args:
            framerate: Frame rate profile (default: 24 fps)
            start_frames: Starting offset in real frames
            force_fractional_seconds: Display milliseconds instead of frame numbers
        """
        self.framerate = framerate if framerate is not None else FrameRate(DEFAULT_FPS)
        self.force_fractional_seconds = force_fractional_seconds
        self._frame_count = 0
        self._parts = TimecodeParts()
        self.frame_count = start_frames

    @classmethod
    def at_timecode(cls, timecode_string: str, framerate: Optional[FrameRate] = None) -> 'Timecode':
        """
        Create a timecode from a timecode string.

        If framerate is omitted it is inferred from the string: 24 fps for
        "00:00:00:00", 29.97 for "00:00:00;00" and 1000 for "00:00:00.000".

        At drop-frame rates some strings name frame numbers that do not exist
        and are corrected to the next valid one:

            00:00:59;29 -> 00:00:59;29
            00:01:00;00 -> 00:01:00;02
            00:01:00;01 -> 00:01:00;02
        """
        if framerate is None:
            framerate = infer_framerate(timecode_string)
        return cls(framerate=framerate, start_frames=parse_to_frames(timecode_string, framerate))

    @classmethod
    def at_seconds(cls, seconds: Union[float, Decimal], framerate: Optional[FrameRate] = None) -> 'Timecode':
        """
        Create a timecode at a number of seconds of real time.

        Frames are counted at the full fractional rate and floored, so at
        29.97 fps 10 seconds is 00:00:09;29, not 00:00:10;00.
        """
        if framerate is None:
            framerate = FrameRate(DEFAULT_FPS)
        return cls(framerate=framerate, start_frames=framerate.real_seconds_to_frames(seconds))

    parse_to_frames = staticmethod(parse_to_frames)

    @property
    def frame_count(self) -> int:
        """Real frame count."""
        return self._frame_count

    @frame_count.setter
    def frame_count(self, n: int):
        if n < 0:
            raise NegativeFrameCountError(n)
        n = int(n) % self.framerate.real_frames_per_24_hours
        parts = compute_parts(self.framerate, n)
        self._frame_count = n
        self._parts = parts

    @property
    def parts(self) -> TimecodeParts:
        return self._parts

    @property
    def hours(self) -> int:
        return self._parts.hours

    @property
    def minutes(self) -> int:
        return self._parts.minutes

    @property
    def seconds(self) -> int:
        return self._parts.seconds

    @property
    def frames(self) -> int:
        """Frame number within the second (honours drop-frame)."""
        return self._parts.frames

    @property
    def fractional_millis(self) -> int:
        """Fractional seconds in milliseconds."""
        return self._parts.fractional_millis

    @property
    def millis(self) -> int:
        """Realtime duration in milliseconds."""
        return self._parts.millis

    @property
    def fps(self) -> float:
        return self.framerate.fps

    @property
    def integer_fps(self) -> int:
        return self.framerate.integer_fps

    @property
    def is_drop_frame(self) -> bool:
        return self.framerate.is_drop_frame

    @property
    def is_millis(self) -> bool:
        return self.framerate.is_millis

    @property
    def frame_delimiter(self) -> str:
        return frame_delimiter(self.framerate, self.force_fractional_seconds)

    # In-place frame mutation. Each raises NegativeFrameCountError and leaves
    # the value untouched if the result would be negative.

    def add_frames(self, n: int):
        self.frame_count = self._frame_count + n

    def sub_frames(self, n: int):
        self.frame_count = self._frame_count - n

    def mult_frames(self, n: int):
        self.frame_count = self._frame_count * n

    def div_frames(self, n: int):
        if n == 0:
            raise TimecodeError("Cannot divide frame count by zero")
        self.frame_count = self._frame_count // n

    def next(self):
        """Advance one frame."""
        self.add_frames(1)

    def back(self):
        """Go back one frame; does nothing at frame 0."""
        if self._frame_count > 0:
            self.sub_frames(1)

    # Arithmetic on realtime milliseconds, result at this value's frame rate

    def _at_millis(self, millis: Decimal) -> 'Timecode':
        return Timecode.at_seconds(millis / 1000, framerate=self.framerate)

    def add(self, other: 'Timecode') -> 'Timecode':
        return self._at_millis(Decimal(self.millis + other.millis))

    def subtract(self, other: 'Timecode') -> 'Timecode':
        """Difference of two timecodes; negative results roll back from 24 hours."""
        return self._at_millis(Decimal(self.millis - other.millis))

    def scale(self, multiplier: Number) -> 'Timecode':
        return self._at_millis(self.millis * to_decimal(multiplier))

    def divide(self, divisor: Number) -> 'Timecode':
        if divisor == 0:
            raise TimecodeError("Cannot divide a timecode by zero")
        return self._at_millis(self.millis / to_decimal(divisor))

    def equals(self, other: 'Timecode') -> bool:
        """True when both denote the same realtime instant, at any frame rates."""
        return self.millis == other.millis

    def compare(self, other: 'Timecode') -> int:
        """Return -1, 0 or 1 as this timecode is earlier, equal or later."""
        return (self.millis > other.millis) - (self.millis < other.millis)

    def __add__(self, other):
        if not isinstance(other, Timecode):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Timecode):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if not isinstance(other, (int, float)):
            return NotImplemented
        return self.scale(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if not isinstance(other, (int, float)):
            return NotImplemented
        return self.divide(other)

    def __eq__(self, other):
        if not isinstance(other, Timecode):
            return NotImplemented
        return self.equals(other)

    def __lt__(self, other):
        if not isinstance(other, Timecode):
            return NotImplemented
        return self.millis < other.millis

    # Mutable, so not hashable
    __hash__ = None

    def __str__(self) -> str:
        """Format as HH:MM:SS:FF, HH:MM:SS;FF (drop-frame) or HH:MM:SS.mmm."""
        return format_parts(self._parts, self.framerate, self.force_fractional_seconds)

    def __repr__(self) -> str:
        return f"Timecode('{self}', fps={self.fps:g}, frame_count={self._frame_count})"
