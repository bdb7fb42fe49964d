"""
Animation Parser - Decodes GIF animations into RGBA rasters and samples them
Every decoded frame is flattened to the full canvas size
"""

from PIL import Image, ImageSequence, UnidentifiedImageError
import numpy as np
from pathlib import Path
from dataclasses import dataclass
from typing import Optional, List, Tuple
import io
import logging

from .errors import (
    DecodeError,
    EmptyAnimationError,
    InsufficientFramesError,
    InvalidParameterError,
)


logger = logging.getLogger(__name__)


@dataclass
class RasterImage:
    """A width x height grid of straight RGBA pixels"""
    width: int
    height: int
    pixels: np.ndarray  # HxWx4 uint8
    name: str = "frame"
    source_index: Optional[int] = None  # Decode-order position, if decoded

    channels = 4

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height)"""
        return (self.width, self.height)

    @property
    def alpha(self) -> np.ndarray:
        return self.pixels[:, :, 3]

    @property
    def is_frozen(self) -> bool:
        return not self.pixels.flags.writeable

    def freeze(self) -> 'RasterImage':
        """Mark the pixel buffer read-only and return self"""
        self.pixels.flags.writeable = False
        return self

    def tobytes(self) -> bytes:
        """Row-major RGBA bytes, 4 per pixel"""
        return self.pixels.tobytes()

    def to_pil(self) -> Image.Image:
        return Image.fromarray(np.ascontiguousarray(self.pixels, dtype=np.uint8), 'RGBA')

    def copy(self) -> 'RasterImage':
        """Create a writable deep copy"""
        return RasterImage(
            width=self.width,
            height=self.height,
            pixels=self.pixels.copy(),
            name=self.name,
            source_index=self.source_index
        )

    @classmethod
    def from_array(cls, pixels: np.ndarray, name: str = "frame") -> 'RasterImage':
        """Create a RasterImage from an HxWx3 or HxWx4 array"""
        if pixels.ndim != 3 or pixels.shape[2] not in (3, 4):
            raise ValueError("Pixels must be HxWx3 or HxWx4 array")

        pixels = pixels.astype(np.uint8, copy=False)

        # Ensure RGBA
        if pixels.shape[2] == 3:
            alpha = np.full((*pixels.shape[:2], 1), 255, dtype=np.uint8)
            pixels = np.concatenate([pixels, alpha], axis=2)

        return cls(
            width=pixels.shape[1],
            height=pixels.shape[0],
            pixels=pixels,
            name=name
        )


class AnimationParser:
    """Decodes animation containers into lists of RasterImage frames"""

    SUPPORTED_FORMATS = {'GIF'}

    @classmethod
    def decode(cls, data: bytes) -> List[RasterImage]:
        """Decode every frame of a GIF held in memory

        Raises:
            DecodeError: data is not a readable GIF
            EmptyAnimationError: no frames were decoded
        """
        if not data:
            raise DecodeError("Animation data is empty")

        try:
            img = Image.open(io.BytesIO(data))
        except (UnidentifiedImageError, Image.DecompressionBombError,
                OSError, EOFError, SyntaxError, ValueError) as e:
            raise DecodeError(f"Could not read animation: {e}") from e

        with img:
            if img.format not in cls.SUPPORTED_FORMATS:
                raise DecodeError(f"Unsupported format: {img.format}")

            frames = []
            try:
                for i, frame in enumerate(ImageSequence.Iterator(img)):
                    pixels = np.array(frame.convert('RGBA'))
                    frames.append(RasterImage(
                        width=pixels.shape[1],
                        height=pixels.shape[0],
                        pixels=pixels,
                        name=f"frame_{i:03d}",
                        source_index=i
                    ))
            except (Image.DecompressionBombError, OSError, ValueError, EOFError) as e:
                raise DecodeError(f"Failed to decode frame {len(frames)}: {e}") from e

        if not frames:
            raise EmptyAnimationError("Animation contains no frames")

        logger.info("Found %d frames in the GIF", len(frames))
        return frames

    @classmethod
    def parse(cls, path: str | Path) -> List[RasterImage]:
        """Read and decode a GIF file"""
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        return cls.decode(path.read_bytes())


class FrameSampler:
    """Subsamples a decoded animation down to a fixed number of frames"""

    @staticmethod
    def select(frames: List[RasterImage], frame_count: int) -> List[RasterImage]:
        """Pick frame_count frames at a fixed stride

        Positions 0, stride, 2*stride, ... are taken in decode order, where
        stride = len(frames) // frame_count. The list position of each
        selected frame is its sample index.
        """
        if frame_count <= 0:
            raise InvalidParameterError(f"frame_count must be positive, got {frame_count}")
        if not frames:
            raise EmptyAnimationError("Animation contains no frames")
        if len(frames) < frame_count:
            raise InsufficientFramesError(len(frames), frame_count)

        stride = len(frames) // frame_count
        logger.debug("Sampling %d of %d frames at stride %d", frame_count, len(frames), stride)

        return [frames[i * stride] for i in range(frame_count)]

    @classmethod
    def sample(cls, data: bytes, frame_count: int) -> List[RasterImage]:
        """Decode animation bytes and subsample them to frame_count frames"""
        if frame_count <= 0:
            raise InvalidParameterError(f"frame_count must be positive, got {frame_count}")

        return cls.select(AnimationParser.decode(data), frame_count)
