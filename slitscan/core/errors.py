"""
Slit-scan errors - Every failure the pipeline can report for a given input

None of these are transient: retrying with the same animation and parameters
fails the same way.
"""

from typing import Optional, Tuple


class SlitScanError(Exception):
    """Base class for all slit-scan pipeline failures"""
    pass


class DecodeError(SlitScanError):
    """Raised when animation bytes cannot be decoded as a GIF"""
    pass


class EmptyAnimationError(SlitScanError):
    """Raised when a container decodes to zero frames"""
    pass


class InsufficientFramesError(SlitScanError):
    """Raised when the animation has fewer frames than were requested"""

    def __init__(self, available: int, requested: int):
        self.available = available
        self.requested = requested
        super().__init__(
            f"Animation has {available} frame(s), cannot sample {requested}"
        )


class DimensionMismatchError(SlitScanError):
    """Raised when frames of unequal size meet in one pipeline run"""

    def __init__(
        self,
        expected: Tuple[int, int],
        actual: Tuple[int, int],
        position: Optional[int] = None
    ):
        self.expected = expected
        self.actual = actual
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(
            f"Frame{where} is {actual[0]}x{actual[1]}, "
            f"expected {expected[0]}x{expected[1]}"
        )


class EmptyInputError(SlitScanError):
    """Raised when there are no frames to composite"""
    pass


class InvalidParameterError(SlitScanError, ValueError):
    """Raised for out-of-range slit, stripe or frame count values"""
    pass
