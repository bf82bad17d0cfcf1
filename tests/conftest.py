import struct

import numpy as np
import pytest

from bitmap.models.image_model import PixelBuffer


def _bmp_bytes(rows, *, magic=b"BM", header_size=40, planes=1, bit_count=24, compression=0,
               top_down=False, offset=54, reserved=0, ppm=2835):
    """Builds a BMP by hand from top-down rows of (R, G, B) triples."""
    height = len(rows)
    width = len(rows[0])
    stride = ((width * 3 + 3) // 4) * 4
    ordered = rows if top_down else list(reversed(rows))
    pixel_data = b""
    for row in ordered:
        line = b"".join(bytes((b, g, r)) for r, g, b in row)
        pixel_data += line + b"\x00" * (stride - len(line))
    gap = b"\x00" * (offset - 54)
    file_header = struct.pack("<2sIII", magic, 54 + len(gap) + len(pixel_data), reserved, offset)
    info_header = struct.pack(
        "<IiiHHIIiiII",
        header_size, width, -height if top_down else height, planes, bit_count, compression,
        len(pixel_data), ppm, ppm, 0, 0,
    )
    return file_header + info_header + gap + pixel_data


@pytest.fixture
def make_bmp():
    return _bmp_bytes


@pytest.fixture
def write_bmp(tmp_path):
    def _write(rows, name="image.bmp", **kwargs):
        path = tmp_path / name
        path.write_bytes(_bmp_bytes(rows, **kwargs))
        return path
    return _write


@pytest.fixture
def gradient():
    """Buffer where every channel value is distinct (modulo 256)."""
    def _make(width, height):
        arr = (np.arange(width * height * 3).reshape(height, width, 3) * 7 % 256).astype(np.uint8)
        return PixelBuffer(arr)
    return _make
