"""
Slit parameters - Band geometry shared by the slit masker and stripe mask
"""

import numpy as np
from dataclasses import dataclass

from ..core.errors import InvalidParameterError


@dataclass(frozen=True)
class SlitParameters:
    """Geometry of the repeating slit pattern"""
    slit_width: int
    slit_spacing: int
    frame_count: int

    @classmethod
    def derived(cls, slit_width: int, frame_count: int) -> 'SlitParameters':
        """Spacing wide enough to leave room for every other frame's band"""
        return cls(
            slit_width=slit_width,
            slit_spacing=frame_count * slit_width,
            frame_count=frame_count
        )

    @property
    def period(self) -> int:
        return self.slit_width + self.slit_spacing

    def validate(self) -> 'SlitParameters':
        if self.slit_width <= 0:
            raise InvalidParameterError(f"slit_width must be positive, got {self.slit_width}")
        if self.slit_spacing < 0:
            raise InvalidParameterError(f"slit_spacing must not be negative, got {self.slit_spacing}")
        if self.frame_count <= 0:
            raise InvalidParameterError(f"frame_count must be positive, got {self.frame_count}")
        return self


class BandMath:
    """Column classification for periodic vertical bands"""

    @staticmethod
    def band_columns(width: int, band_width: int, period: int, offset: int = 0) -> np.ndarray:
        """
        Boolean array of length width, True where a column falls inside a band.

        Columns are shifted left by offset and wrapped around the image width
        before being folded into the period. A trailing partial period at the
        right edge follows the same rule.
        """
        if period <= 0:
            raise InvalidParameterError(f"Band period must be positive, got {period}")

        x = np.arange(width, dtype=np.int64)
        adjusted = np.mod(x + width - offset, width) if offset else x
        return np.mod(adjusted, period) < band_width
