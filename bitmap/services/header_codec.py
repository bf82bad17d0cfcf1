"""Разбор и запись заголовков BMP (14 + 40 байт, little-endian).

Принципы:
- SRP: только заголовки; пиксельный массив кодирует `pixel_codec`.
- Поля размеров при записи всегда пересчитываются из ширины и высоты.
"""
from __future__ import annotations

import dataclasses
import logging
import struct
from typing import Tuple

from bitmap.models.errors import FormatError
from bitmap.models.header_model import FileHeader, InfoHeader

logger = logging.getLogger(__name__)

BMP_MAGIC = b"BM"
FILE_HEADER = struct.Struct("<2sIII")
INFO_HEADER = struct.Struct("<IiiHHIIiiII")
FILE_HEADER_SIZE = FILE_HEADER.size  # 14
INFO_HEADER_SIZE = INFO_HEADER.size  # 40
HEADERS_SIZE = FILE_HEADER_SIZE + INFO_HEADER_SIZE  # 54

BITS_PER_PIXEL = 24
BYTES_PER_PIXEL = BITS_PER_PIXEL // 8
ROW_ALIGNMENT = 4


def row_bytes(width: int) -> int:
    """Длина строки на диске: `width * 3`, округлённая вверх до кратного 4."""
    return ((width * BYTES_PER_PIXEL + ROW_ALIGNMENT - 1) // ROW_ALIGNMENT) * ROW_ALIGNMENT


def pixel_array_size(width: int, height: int) -> int:
    return row_bytes(width) * abs(height)


def parse_headers(data: bytes) -> Tuple[FileHeader, InfoHeader]:
    """Читает и проверяет оба заголовка.

    Raises:
        FormatError: файл короче 54 байт, неверная сигнатура или
            неподдерживаемый формат (размер заголовка, плоскости, глубина, сжатие).
    """
    if len(data) < HEADERS_SIZE:
        raise FormatError(f"Файл слишком мал для BMP: {len(data)} байт (нужно не меньше {HEADERS_SIZE})")

    file_header = FileHeader(*FILE_HEADER.unpack_from(data, 0))
    if file_header.magic != BMP_MAGIC:
        raise FormatError(f"Не BMP-файл: сигнатура {file_header.magic!r}")

    info_header = InfoHeader(*INFO_HEADER.unpack_from(data, FILE_HEADER_SIZE))
    if info_header.header_size != INFO_HEADER_SIZE:
        raise FormatError(f"Неподдерживаемый размер DIB-заголовка: {info_header.header_size} (ожидалось 40)")
    if info_header.planes != 1:
        raise FormatError(f"Неподдерживаемое число плоскостей: {info_header.planes}")
    if info_header.bit_count != BITS_PER_PIXEL:
        raise FormatError(f"Неподдерживаемая глубина цвета: {info_header.bit_count} бит (ожидалось 24)")
    if info_header.compression != 0:
        raise FormatError(f"Сжатые BMP не поддерживаются (compression={info_header.compression})")

    logger.debug("Parsed headers: %dx%d, offset=%d", info_header.width, info_header.height, file_header.offset_data)
    return file_header, info_header


def serialize_headers(file_header: FileHeader, info_header: InfoHeader) -> bytes:
    """Собирает 54 байта заголовков под пиксельный массив, записанный сразу после них.

    `file_size`, `offset_data` и `image_size` входных структур игнорируются и
    вычисляются заново из `info_header.width` и `info_header.height`.
    """
    image_size = pixel_array_size(info_header.width, info_header.height)
    file_header = dataclasses.replace(
        file_header,
        magic=BMP_MAGIC,
        file_size=HEADERS_SIZE + image_size,
        offset_data=HEADERS_SIZE,
    )
    info_header = dataclasses.replace(info_header, header_size=INFO_HEADER_SIZE, image_size=image_size)
    return FILE_HEADER.pack(*dataclasses.astuple(file_header)) + INFO_HEADER.pack(*dataclasses.astuple(info_header))
