"""
Slit Masker - Cuts a phase-shifted periodic slit pattern into a frame
"""

import numpy as np
import logging
from typing import List

from .base import SlitParameters, BandMath
from ..core.errors import InvalidParameterError
from ..core.parser import RasterImage


logger = logging.getLogger(__name__)


class SlitMasker:
    """
    Makes everything outside a frame's slits fully transparent.

    The slit pattern is shifted right by slit_width * sample_index, which
    staggers each sampled frame's visible band to its own horizontal
    position. RGB is left untouched, only alpha is cleared.
    """

    name = "slit"
    description = "Periodic vertical slit transparency"

    @staticmethod
    def visible_columns(width: int, params: SlitParameters, sample_index: int) -> np.ndarray:
        """Boolean mask of the columns that stay visible for a sample index"""
        offset = params.slit_width * sample_index
        return BandMath.band_columns(width, params.slit_width, params.period, offset)

    @classmethod
    def apply(cls, frame: RasterImage, params: SlitParameters, sample_index: int) -> RasterImage:
        params.validate()
        if not 0 <= sample_index < params.frame_count:
            raise InvalidParameterError(
                f"sample_index {sample_index} outside 0..{params.frame_count - 1}"
            )

        logger.debug(
            "Processing image with dimensions: %dx%d (sample %d)",
            frame.width, frame.height, sample_index
        )

        visible = cls.visible_columns(frame.width, params, sample_index)

        pixels = frame.pixels.copy()
        pixels[:, ~visible, 3] = 0

        return RasterImage(
            width=frame.width,
            height=frame.height,
            pixels=pixels,
            name=frame.name,
            source_index=frame.source_index
        )

    @classmethod
    def apply_all(cls, frames: List[RasterImage], params: SlitParameters) -> List[RasterImage]:
        """Mask a sampled sequence, using list position as the sample index"""
        return [cls.apply(frame, params, i) for i, frame in enumerate(frames)]
