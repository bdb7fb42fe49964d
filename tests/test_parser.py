"""
Frame decoding and sampling tests
"""

import struct

import numpy as np
import pytest
from PIL import Image

from slitscan.core.errors import (
    DecodeError,
    EmptyAnimationError,
    InsufficientFramesError,
    InvalidParameterError,
)
from slitscan.core.parser import AnimationParser, FrameSampler, RasterImage

from conftest import red_shades, solid


class TestAnimationParser:
    """Decoding GIF bytes into RGBA rasters"""

    def test_decodes_every_frame(self, red_gif_8):
        frames = AnimationParser.decode(red_gif_8)

        assert len(frames) == 8
        assert [f.source_index for f in frames] == list(range(8))

    def test_frames_are_full_canvas_rgba(self, red_gif_8):
        frames = AnimationParser.decode(red_gif_8)

        for i, frame in enumerate(frames):
            assert frame.size == (40, 10)
            assert frame.pixels.shape == (10, 40, 4)
            assert frame.pixels.dtype == np.uint8
            assert np.all(frame.pixels[:, :, 0] == 255)
            assert np.all(frame.pixels[:, :, 1] == 10 * i)
            assert np.all(frame.pixels[:, :, 3] == 255)

    def test_garbage_bytes_raise_decode_error(self):
        with pytest.raises(DecodeError):
            AnimationParser.decode(b"definitely not a gif")

    def test_empty_bytes_raise_decode_error(self):
        with pytest.raises(DecodeError):
            AnimationParser.decode(b"")

    def test_non_gif_container_is_rejected(self, png_bytes):
        with pytest.raises(DecodeError, match="Unsupported format"):
            AnimationParser.decode(png_bytes)

    def test_truncated_gif_raises_decode_error(self, red_gif_8):
        with pytest.raises(DecodeError):
            AnimationParser.decode(red_gif_8[:20])

    def test_oversized_canvas_raises_decode_error(self):
        # Logical screen of 65535x65535 around a single 1x1 image
        data = (
            b"GIF89a" + struct.pack("<HHBBB", 65535, 65535, 0, 0, 0)
            + b"," + struct.pack("<HHHHB", 0, 0, 1, 1, 0)
            + b"\x02\x02\x44\x01\x00"
            + b";"
        )

        with pytest.raises(DecodeError):
            AnimationParser.decode(data)

    def test_pixel_limit_raises_decode_error(self, red_gif_8, monkeypatch):
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)

        with pytest.raises(DecodeError) as excinfo:
            AnimationParser.decode(red_gif_8)

        assert isinstance(excinfo.value.__cause__, Image.DecompressionBombError)

    def test_parse_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            AnimationParser.parse(tmp_path / "missing.gif")

    def test_parse_reads_file(self, gif_file):
        assert len(AnimationParser.parse(gif_file)) == 8


class TestFrameSampler:
    """Subsampling to a fixed frame count"""

    def test_returns_exactly_frame_count_frames(self, red_gif_8):
        frames = FrameSampler.sample(red_gif_8, 4)

        assert len(frames) == 4

    def test_selects_at_fixed_stride(self, red_gif_8):
        frames = FrameSampler.sample(red_gif_8, 4)

        assert [f.source_index for f in frames] == [0, 2, 4, 6]
        assert [int(f.pixels[0, 0, 1]) for f in frames] == [0, 20, 40, 60]

    def test_floor_stride_stops_at_frame_count(self, gif_factory):
        frames = FrameSampler.sample(gif_factory(red_shades(10)), 4)

        # stride 10 // 4 == 2, positions 0..6, never a fifth frame at 8
        assert [f.source_index for f in frames] == [0, 2, 4, 6]

    def test_stride_one_when_counts_match(self, red_gif_8):
        frames = FrameSampler.sample(red_gif_8, 8)

        assert [f.source_index for f in frames] == list(range(8))

    def test_fewer_requested_than_available(self, gif_factory):
        frames = FrameSampler.sample(gif_factory(red_shades(5)), 3)

        assert [f.source_index for f in frames] == [0, 1, 2]

    def test_insufficient_frames(self, red_gif_3):
        with pytest.raises(InsufficientFramesError) as excinfo:
            FrameSampler.sample(red_gif_3, 5)

        assert excinfo.value.available == 3
        assert excinfo.value.requested == 5

    @pytest.mark.parametrize("frame_count", [0, -1])
    def test_non_positive_frame_count(self, red_gif_8, frame_count):
        with pytest.raises(InvalidParameterError):
            FrameSampler.sample(red_gif_8, frame_count)

    def test_select_on_empty_list(self):
        with pytest.raises(EmptyAnimationError):
            FrameSampler.select([], 3)

    def test_select_keeps_frame_objects(self):
        frames = [solid(4, 4, name=f"f{i}") for i in range(6)]

        selected = FrameSampler.select(frames, 3)

        assert [s.name for s in selected] == ["f0", "f2", "f4"]
        assert all(s is frames[i] for s, i in zip(selected, [0, 2, 4]))


class TestRasterImage:

    def test_from_rgb_array_adds_opaque_alpha(self):
        image = RasterImage.from_array(np.zeros((3, 5, 3), dtype=np.uint8))

        assert image.size == (5, 3)
        assert image.channels == 4
        assert np.all(image.alpha == 255)

    def test_from_array_rejects_bad_shape(self):
        with pytest.raises(ValueError):
            RasterImage.from_array(np.zeros((3, 5), dtype=np.uint8))

    def test_tobytes_is_row_major_rgba(self):
        image = solid(2, 3, rgba=(1, 2, 3, 4))

        data = image.tobytes()

        assert len(data) == 2 * 3 * 4
        assert data[:4] == bytes([1, 2, 3, 4])

    def test_freeze_makes_pixels_read_only(self):
        image = solid(2, 2).freeze()

        assert image.is_frozen
        with pytest.raises(ValueError):
            image.pixels[0, 0, 0] = 1

    def test_copy_is_writable(self):
        image = solid(2, 2).freeze()

        clone = image.copy()
        clone.pixels[0, 0, 0] = 7

        assert not clone.is_frozen
        assert image.pixels[0, 0, 0] == 255
