"""
Slit-scan pixel transforms
"""

from .base import SlitParameters, BandMath
from .slit import SlitMasker
from .composite import TransparencyCompositor
from .stripes import StripeMaskGenerator


__all__ = [
    'SlitParameters',
    'BandMath',
    'SlitMasker',
    'TransparencyCompositor',
    'StripeMaskGenerator',
]
