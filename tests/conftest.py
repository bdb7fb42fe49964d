"""
Test Configuration
==================

Pytest fixtures for slitscan. Animations are built in memory with Pillow so
no binary fixtures are checked in.
"""

import io
from typing import List, Tuple

import numpy as np
import pytest
from PIL import Image

from slitscan.core.parser import RasterImage


RED = (255, 0, 0)


def build_gif(colors: List[Tuple[int, int, int]], width: int = 40, height: int = 10) -> bytes:
    """Encode one solid-colour frame per entry in colors as an animated GIF.

    Consecutive colours must differ, otherwise Pillow merges the frames.
    """
    palette_colors = list(dict.fromkeys(colors))
    palette = [channel for color in palette_colors for channel in color]
    palette += [0] * (768 - len(palette))

    frames = []
    for color in colors:
        frame = Image.new('P', (width, height), palette_colors.index(color))
        frame.putpalette(palette)
        frames.append(frame)

    buffer = io.BytesIO()
    frames[0].save(
        buffer,
        format='GIF',
        save_all=True,
        append_images=frames[1:],
        duration=100,
        loop=0,
        optimize=False,
    )
    return buffer.getvalue()


def red_shades(count: int) -> List[Tuple[int, int, int]]:
    """Distinct, nearly red colours; frame i has green channel 10 * i"""
    return [(255, 10 * i, 0) for i in range(count)]


def solid(width: int, height: int, rgba=(255, 0, 0, 255), name: str = "frame") -> RasterImage:
    pixels = np.empty((height, width, 4), dtype=np.uint8)
    pixels[:, :] = rgba
    return RasterImage(width=width, height=height, pixels=pixels, name=name)


@pytest.fixture
def gif_factory():
    """Build GIF bytes from a list of RGB colours"""
    return build_gif


@pytest.fixture
def red_gif_8() -> bytes:
    """8-frame 40x10 near-solid red animation"""
    return build_gif(red_shades(8))


@pytest.fixture
def red_gif_3() -> bytes:
    """3-frame 40x10 near-solid red animation"""
    return build_gif(red_shades(3))


@pytest.fixture
def png_bytes() -> bytes:
    """A still PNG, which is not an accepted animation container"""
    buffer = io.BytesIO()
    Image.new('RGBA', (8, 8), (255, 0, 0, 255)).save(buffer, format='PNG')
    return buffer.getvalue()


@pytest.fixture
def gif_file(tmp_path, red_gif_8):
    path = tmp_path / "walk.gif"
    path.write_bytes(red_gif_8)
    return path
