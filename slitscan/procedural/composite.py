"""
Transparency Compositor - Flattens masked frames into one image

Painting is last-write-wins for every pixel with alpha > 0. Fully
transparent pixels never overwrite what an earlier frame painted, and no
two frames are ever blended.
"""

import numpy as np
from typing import List

from ..core.errors import DimensionMismatchError, EmptyInputError
from ..core.parser import RasterImage


class TransparencyCompositor:
    """Combines a sequence of frames, skipping transparent pixels"""

    @staticmethod
    def combine(frames: List[RasterImage], name: str = "combined") -> RasterImage:
        if not frames:
            raise EmptyInputError("No frames to combine")

        first = frames[0]
        for position, frame in enumerate(frames):
            h, w = frame.pixels.shape[:2]
            if (w, h) != first.size:
                raise DimensionMismatchError(first.size, (w, h), position)

        combined = np.zeros((first.height, first.width, 4), dtype=np.uint8)

        for frame in frames:
            opaque = frame.pixels[:, :, 3] > 0
            combined[opaque] = frame.pixels[opaque]

        return RasterImage(
            width=first.width,
            height=first.height,
            pixels=combined,
            name=name
        ).freeze()
