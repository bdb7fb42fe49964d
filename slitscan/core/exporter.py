"""
Slit-scan Exporter - Encodes rasters as PNG files, bytes and base64 text
"""

from pathlib import Path
from typing import List
import base64
import io

from .parser import RasterImage


class SlitScanExporter:
    """Exports composites, masks and frames"""

    SUCCESS_MESSAGE = "Processing complete"

    @classmethod
    def to_png_bytes(cls, image: RasterImage) -> bytes:
        """Encode a raster as PNG in memory"""
        buffer = io.BytesIO()
        image.to_pil().save(buffer, 'PNG')
        return buffer.getvalue()

    @classmethod
    def to_png(cls, image: RasterImage, path: str | Path) -> Path:
        """Export a single raster to PNG"""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        image.to_pil().save(path, 'PNG')

        return path

    @classmethod
    def to_base64(cls, image: RasterImage) -> str:
        return base64.b64encode(cls.to_png_bytes(image)).decode('ascii')

    @classmethod
    def to_frames(
        cls,
        frames: List[RasterImage],
        directory: str | Path,
        prefix: str = "frame"
    ) -> List[Path]:
        """Export frames as individual PNGs named by decode-order position"""
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)

        paths = []
        for i, frame in enumerate(frames):
            index = frame.source_index if frame.source_index is not None else i
            frame_path = directory / f"{prefix}_{index:03d}.png"
            cls.to_png(frame, frame_path)
            paths.append(frame_path)

        return paths

    @classmethod
    def to_payload(cls, result) -> dict:
        """Response body carrying both images as base64 PNG text"""
        return {
            'message': cls.SUCCESS_MESSAGE,
            'combine_data': cls.to_base64(result.composite),
            'mask_data': cls.to_base64(result.mask),
        }
