"""Модели данных для изображений.

Принципы:
- SRP: только структура данных, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import NamedTuple, Optional, Sequence

import numpy as np

from bitmap.models.header_model import FileHeader, InfoHeader


class Pixel(NamedTuple):
    """Один пиксель в логическом порядке каналов (на диске порядок B, G, R)."""
    red: int
    green: int
    blue: int


@dataclass(frozen=True, eq=False)
class PixelBuffer:
    """Логический буфер пикселей: сверху вниз, без выравнивания строк.

    Fields:
        pixels: numpy-массив формы (H, W, 3), dtype uint8, порядок каналов RGB.

    Размеры не хранятся отдельно, а берутся из формы массива, поэтому
    после поворота или обрезки они всегда согласованы с данными.
    """
    pixels: np.ndarray

    def __post_init__(self) -> None:
        if self.pixels.ndim != 3 or self.pixels.shape[2] != 3:
            raise ValueError(f"Ожидался массив (H, W, 3), получено {self.pixels.shape}")
        if self.pixels.dtype != np.uint8:
            raise ValueError(f"Ожидался dtype uint8, получено {self.pixels.dtype}")

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    def pixel(self, x: int, y: int) -> Pixel:
        """Возвращает пиксель в столбце `x` строки `y` (начало координат слева сверху)."""
        r, g, b = self.pixels[y, x]
        return Pixel(int(r), int(g), int(b))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Sequence[int]]]) -> "PixelBuffer":
        """Строит буфер из вложенных списков строк с тройками (R, G, B)."""
        return cls(np.array(rows, dtype=np.uint8).reshape(len(rows), -1, 3))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return np.array_equal(self.pixels, other.pixels)


@dataclass(frozen=True)
class BitmapImage:
    """Неизменяемая модель загруженного BMP.

    Fields:
        path: Путь к исходному файлу, если изображение загружено с диска.
        file_header: Файловый заголовок в том виде, как он прочитан.
        info_header: Информационный заголовок в том виде, как он прочитан.
        buffer: Декодированные пиксели.
    """
    path: Optional[Path]
    file_header: FileHeader
    info_header: InfoHeader
    buffer: PixelBuffer

    @property
    def width(self) -> int:
        return self.buffer.width

    @property
    def height(self) -> int:
        return self.buffer.height


@dataclass(frozen=True)
class Option:
    """Одна опция командной строки: имя без `--` и сырое значение.

    Порядок опций в списке значим: в нём же применяются преобразования.
    """
    name: str
    value: str
