"""
Stripe Mask Generator - Black/clear legend with the slit geometry

The mask is transparent over the first band of every period and opaque
black elsewhere. It depends only on its geometry arguments, never on image
content, so identical arguments always give byte-identical output.
"""

import numpy as np

from .base import SlitParameters, BandMath
from ..core.errors import InvalidParameterError
from ..core.parser import RasterImage


class StripeMaskGenerator:
    """Generates periodic stripe masks"""

    CLEAR = (0, 0, 0, 0)
    OPAQUE = (0, 0, 0, 255)

    @classmethod
    def generate(
        cls,
        width: int,
        height: int,
        stripe_width: int,
        stripe_spacing: int
    ) -> RasterImage:
        if width <= 0 or height <= 0:
            raise InvalidParameterError(f"Mask size must be positive, got {width}x{height}")
        if stripe_width <= 0:
            raise InvalidParameterError(f"stripe_width must be positive, got {stripe_width}")
        if stripe_spacing < 0:
            raise InvalidParameterError(f"stripe_spacing must not be negative, got {stripe_spacing}")

        clear = BandMath.band_columns(width, stripe_width, stripe_width + stripe_spacing)

        row = np.empty((width, 4), dtype=np.uint8)
        row[clear] = cls.CLEAR
        row[~clear] = cls.OPAQUE

        pixels = np.tile(row, (height, 1, 1))

        return RasterImage(
            width=width,
            height=height,
            pixels=pixels,
            name="mask"
        ).freeze()

    @classmethod
    def for_parameters(cls, width: int, height: int, params: SlitParameters) -> RasterImage:
        """Mask matching the slit geometry of a pipeline run"""
        return cls.generate(width, height, params.slit_width, params.slit_spacing)
