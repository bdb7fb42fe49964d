"""
Slit-scan - Core Utilities
"""

from .errors import (
    SlitScanError,
    DecodeError,
    EmptyAnimationError,
    InsufficientFramesError,
    DimensionMismatchError,
    EmptyInputError,
    InvalidParameterError,
)
from .parser import RasterImage, AnimationParser, FrameSampler
from .exporter import SlitScanExporter
from .presets import SlitPreset, PresetManager, get_preset_manager, get_preset


__all__ = [
    # Errors
    'SlitScanError',
    'DecodeError',
    'EmptyAnimationError',
    'InsufficientFramesError',
    'DimensionMismatchError',
    'EmptyInputError',
    'InvalidParameterError',
    # Images and decoding
    'RasterImage',
    'AnimationParser',
    'FrameSampler',
    # Export
    'SlitScanExporter',
    # Presets
    'SlitPreset',
    'PresetManager',
    'get_preset_manager',
    'get_preset',
]
