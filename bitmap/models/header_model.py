"""Модели заголовков BMP: файловый (14 байт) и информационный (40 байт).

Принципы:
- SRP: только структура данных, разбор и запись живут в `header_codec`.
- Неизменяемость (`frozen=True`): правки размеров делаются через `dataclasses.replace`.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FileHeader:
    """Файловый заголовок BMP.

    Fields:
        magic: Сигнатура, для поддерживаемых файлов всегда b"BM".
        file_size: Полный размер файла в байтах.
        reserved: Зарезервированное поле, переносится без изменений.
        offset_data: Смещение начала пиксельных данных.
    """
    magic: bytes
    file_size: int
    reserved: int
    offset_data: int


@dataclass(frozen=True)
class InfoHeader:
    """Информационный заголовок BITMAPINFOHEADER.

    Fields:
        header_size: Размер заголовка, поддерживается только 40.
        width: Ширина, px (со знаком).
        height: Высота, px; положительная означает хранение строк снизу вверх.
        planes: Число плоскостей, всегда 1.
        bit_count: Бит на пиксель, поддерживается только 24.
        compression: Тип сжатия, поддерживается только 0.
        image_size: Размер пиксельного массива; 0 допустим для несжатых файлов.
        x_pixels_per_m, y_pixels_per_m: Разрешение, переносится как есть.
        colors_used, colors_important: Поля палитры, переносятся как есть.
    """
    header_size: int
    width: int
    height: int
    planes: int
    bit_count: int
    compression: int
    image_size: int
    x_pixels_per_m: int
    y_pixels_per_m: int
    colors_used: int
    colors_important: int
