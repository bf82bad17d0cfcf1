"""Декодирование и кодирование пиксельного массива 24-битного BMP.

На диске строки хранятся снизу вверх, каждая дополнена нулями до кратного
4 байтам, каналы в порядке B, G, R. Наружу отдаётся `PixelBuffer` сверху
вниз, без выравнивания, в порядке R, G, B; выравнивание и ориентация
дальше этого модуля не уходят.
"""
from __future__ import annotations

import logging

import numpy as np

from bitmap.models.errors import FormatError
from bitmap.models.header_model import FileHeader, InfoHeader
from bitmap.models.image_model import PixelBuffer
from bitmap.services.header_codec import BYTES_PER_PIXEL, row_bytes

logger = logging.getLogger(__name__)


def decode(data: bytes, file_header: FileHeader, info_header: InfoHeader) -> PixelBuffer:
    """Извлекает логический буфер пикселей из байтов файла.

    Raises:
        FormatError: отрицательная высота (строки сверху вниз), нулевые
            размеры или пиксельные данные обрезаны.
    """
    width, height = info_header.width, info_header.height
    if height < 0:
        raise FormatError("BMP с хранением строк сверху вниз (отрицательная высота) не поддерживается")
    if width <= 0 or height == 0:
        raise FormatError(f"Некорректные размеры изображения: {width} × {height}")

    stride = row_bytes(width)
    offset = file_header.offset_data
    needed = offset + stride * height
    if len(data) < needed:
        raise FormatError(f"Пиксельные данные обрезаны: нужно {needed} байт, в файле {len(data)}")

    rows = np.frombuffer(data, dtype=np.uint8, count=stride * height, offset=offset).reshape(height, stride)
    # drop padding, bottom-up -> top-down, BGR -> RGB
    bgr = rows[:, : width * BYTES_PER_PIXEL].reshape(height, width, BYTES_PER_PIXEL)
    pixels = bgr[::-1, :, ::-1].copy()
    logger.debug("Decoded %dx%d pixels (row stride %d)", width, height, stride)
    return PixelBuffer(pixels)


def encode(buffer: PixelBuffer) -> bytes:
    """Обратная операция к `decode`: возвращает только пиксельный массив."""
    width, height = buffer.width, buffer.height
    stride = row_bytes(width)
    rows = np.zeros((height, stride), dtype=np.uint8)
    rows[:, : width * BYTES_PER_PIXEL] = buffer.pixels[::-1, :, ::-1].reshape(height, width * BYTES_PER_PIXEL)
    logger.debug("Encoded %dx%d pixels into %d bytes", width, height, rows.size)
    return rows.tobytes()
