"""
Slit-scan pipeline - Sampler -> Masker -> Compositor, plus the stripe mask
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .core.parser import RasterImage, AnimationParser, FrameSampler
from .procedural import SlitParameters, SlitMasker, TransparencyCompositor, StripeMaskGenerator


logger = logging.getLogger(__name__)


@dataclass
class SlitScanResult:
    """Outputs of one pipeline run"""
    composite: RasterImage
    mask: RasterImage
    params: SlitParameters
    frames: List[RasterImage] = field(default_factory=list)  # Masked, in sample order
    source_frame_count: int = 0

    @property
    def width(self) -> int:
        return self.composite.width

    @property
    def height(self) -> int:
        return self.composite.height


def resolve_parameters(
    slit_width: int,
    frame_count: int,
    slit_spacing: Optional[int] = None
) -> SlitParameters:
    """Build validated parameters, deriving the spacing when it is not given"""
    if slit_spacing is None:
        params = SlitParameters.derived(slit_width, frame_count)
    else:
        params = SlitParameters(slit_width, slit_spacing, frame_count)
    return params.validate()


def process(
    animation_bytes: bytes,
    slit_width: int,
    frame_count: int,
    slit_spacing: Optional[int] = None
) -> SlitScanResult:
    """
    Turn an animated GIF into a slit-scan composite and its stripe mask.

    Args:
        animation_bytes: Complete GIF file contents
        slit_width: Width of each visible band in pixels (> 0)
        frame_count: Number of frames to sample (> 0)
        slit_spacing: Gap between bands; frame_count * slit_width if None

    Returns:
        SlitScanResult with the composite, the mask and the masked frames

    Raises:
        SlitScanError: any decode, sampling, parameter or size failure
    """
    params = resolve_parameters(slit_width, frame_count, slit_spacing)

    decoded = AnimationParser.decode(animation_bytes)
    sampled = FrameSampler.select(decoded, params.frame_count)
    masked = SlitMasker.apply_all(sampled, params)
    composite = TransparencyCompositor.combine(masked)
    mask = StripeMaskGenerator.for_parameters(composite.width, composite.height, params)

    logger.info(
        "Combined %d of %d frames into %dx%d (slit %d, spacing %d)",
        len(masked), len(decoded), composite.width, composite.height,
        params.slit_width, params.slit_spacing
    )

    return SlitScanResult(
        composite=composite,
        mask=mask,
        params=params,
        frames=masked,
        source_frame_count=len(decoded)
    )
