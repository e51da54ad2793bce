"""
Timecode error kinds.

Both errors are local, recoverable conditions raised to the immediate caller.
Everything else that is malformed (non-numeric fields, missing fields) degrades
to zero instead of raising.
"""


class TimecodeError(ValueError):
    """Base class for all timecode errors."""


class NegativeFrameCountError(TimecodeError):
    """A mutation would have set the real frame count below zero."""

    def __init__(self, frame_count: int):
        self.frame_count = frame_count
        super().__init__(
            f"Frame count must be a non-negative integer (got {frame_count})"
        )


class FormatMismatchError(TimecodeError):
    """The timecode string delimiter disagrees with the frame rate's drop-frame flag."""

    def __init__(self, timecode_string: str, drop_frame: bool):
        self.timecode_string = timecode_string
        self.drop_frame = drop_frame
        expected = "HH:MM:SS;FF" if drop_frame else "HH:MM:SS:FF or HH:MM:SS.mmm"
        super().__init__(
            f"Timecode string and frame rate mismatch: {timecode_string!r} "
            f"(frame rate expects {expected})"
        )
