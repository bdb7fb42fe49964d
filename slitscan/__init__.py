"""
Slit-scan - Turn animated GIFs into slit-scan composites and stripe masks
"""

from .core import (
    RasterImage,
    AnimationParser,
    FrameSampler,
    SlitScanExporter,
    SlitScanError,
)
from .procedural import SlitParameters, SlitMasker, TransparencyCompositor, StripeMaskGenerator
from .pipeline import SlitScanResult, process, resolve_parameters

__version__ = "0.1.0"
__all__ = [
    'RasterImage',
    'AnimationParser',
    'FrameSampler',
    'SlitParameters',
    'SlitMasker',
    'TransparencyCompositor',
    'StripeMaskGenerator',
    'SlitScanExporter',
    'SlitScanError',
    'SlitScanResult',
    'process',
    'resolve_parameters',
    'render',
]


def render(
    input_path: str,
    output_path: str = None,
    mask_path: str = None,
    slit_width: int = 5,
    frame_count: int = 8,
    slit_spacing: int = None,
    frames_dir: str = None,
) -> dict:
    """
    Render a GIF file to a composite PNG and a stripe mask PNG.

    Args:
        input_path: Path to the animated GIF
        output_path: Composite PNG path (default: <stem>_combined.png beside the input)
        mask_path: Mask PNG path (default: <stem>_mask.png beside the input)
        slit_width: Width of each visible band in pixels
        frame_count: Number of frames to sample
        slit_spacing: Gap between bands (default: frame_count * slit_width)
        frames_dir: Also write every masked frame here as frame_NNN.png

    Returns:
        Dictionary with 'composite', 'mask' and 'frames' output paths
    """
    from pathlib import Path

    input_path = Path(input_path)
    if not input_path.exists():
        raise FileNotFoundError(f"File not found: {input_path}")

    result = process(input_path.read_bytes(), slit_width, frame_count, slit_spacing)

    # Generate output paths if not specified
    if output_path is None:
        output_path = input_path.parent / f"{input_path.stem}_combined.png"
    if mask_path is None:
        mask_path = input_path.parent / f"{input_path.stem}_mask.png"

    frame_paths = []
    if frames_dir is not None:
        frame_paths = SlitScanExporter.to_frames(result.frames, frames_dir)

    return {
        'composite': SlitScanExporter.to_png(result.composite, output_path),
        'mask': SlitScanExporter.to_png(result.mask, mask_path),
        'frames': frame_paths,
    }
