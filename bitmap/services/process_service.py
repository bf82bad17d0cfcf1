from __future__ import annotations

import re
from typing import Optional, Tuple

import numpy as np

from bitmap.config import DEFAULT_PIXELATE_BLOCK
from bitmap.models.errors import InvalidOption, OutOfBounds
from bitmap.models.image_model import PixelBuffer

# luminance weights for R, G, B
GRAY_WEIGHTS = np.array([299, 587, 114], dtype=np.int64)
GRAY_SCALE = 1000
ANGLE_PATTERN = re.compile(r"-?\d+", re.ASCII)
ROTATE_ALIASES = {"right": 90, "left": -90}
CHANNELS = {"red": 0, "green": 1, "blue": 2}


def normalize_angle(value: str) -> int:
    """
    Переводит значение `--rotate` в угол по часовой стрелке из {0, 90, 180, 270}.
    `right` = 90, `left` = -90; допускается любое целое, кратное 90
    (ASCII-цифры, необязательный ведущий минус, без пробелов).
    """
    if value in ROTATE_ALIASES:
        angle = ROTATE_ALIASES[value]
    elif ANGLE_PATTERN.fullmatch(value):
        angle = int(value)
    else:
        raise InvalidOption(f"Неизвестный угол поворота: {value!r}")
    if angle % 90 != 0:
        raise InvalidOption(f"Угол поворота должен быть кратен 90: {value!r}")
    return angle % 360


def parse_crop(value: str) -> Tuple[int, int, int, int]:
    """
    Разбирает `offsetX-offsetY-width-height` ровно в четыре неотрицательных целых.
    """
    parts = value.split("-")
    if len(parts) != 4 or not all(p.isascii() and p.isdigit() for p in parts):
        raise InvalidOption(f"Ожидалось offsetX-offsetY-width-height, получено {value!r}")
    offset_x, offset_y, width, height = (int(p) for p in parts)
    return offset_x, offset_y, width, height


class ProcessService:
    def __init__(self, pixelate_block: Optional[int] = None) -> None:
        self.pixelate_block = DEFAULT_PIXELATE_BLOCK if pixelate_block is None else pixelate_block

    # ---------- Вспомогательные функции ----------
    @staticmethod
    def _round_div(total: np.ndarray, count: np.ndarray | int) -> np.ndarray:
        """
        Целочисленное деление с округлением половины вверх: round(total / count).
        """
        return (2 * total + count) // (2 * count)

    @staticmethod
    def _wrap(pixels: np.ndarray) -> PixelBuffer:
        return PixelBuffer(np.ascontiguousarray(pixels, dtype=np.uint8).copy())

    # ---------- 1) Отражение ----------
    def mirror(self, buffer: PixelBuffer, mode: str) -> PixelBuffer:
        """
        horizontal: каждая строка слева направо задом наперёд;
        vertical: строки в обратном порядке. Размеры не меняются.
        """
        if mode == "horizontal":
            return self._wrap(buffer.pixels[:, ::-1])
        if mode == "vertical":
            return self._wrap(buffer.pixels[::-1])
        raise InvalidOption(f"Неизвестный режим отражения: {mode!r} (horizontal | vertical)")

    # ---------- 2) Фильтры ----------
    def apply_filter(self, buffer: PixelBuffer, name: str) -> PixelBuffer:
        """
        Попиксельные фильтры: blue | red | green | grayscale | negative | pixelate | blur.
        """
        if name in CHANNELS:
            return self.keep_channel(buffer, CHANNELS[name])
        if name == "grayscale":
            return self.to_grayscale(buffer)
        if name == "negative":
            return self.negative(buffer)
        if name == "pixelate":
            return self.pixelate(buffer, self.pixelate_block)
        if name == "blur":
            return self.blur(buffer)
        raise InvalidOption(f"Неизвестный фильтр: {name!r}")

    def keep_channel(self, buffer: PixelBuffer, channel: int) -> PixelBuffer:
        out = np.zeros_like(buffer.pixels)
        out[:, :, channel] = buffer.pixels[:, :, channel]
        return self._wrap(out)

    def to_grayscale(self, buffer: PixelBuffer) -> PixelBuffer:
        """
        Яркость Y = 0.299R + 0.587G + 0.114B, округление половины вверх,
        записывается во все три канала.
        """
        weighted = buffer.pixels.astype(np.int64) @ GRAY_WEIGHTS
        gray = np.clip(self._round_div(weighted, GRAY_SCALE), 0, 255).astype(np.uint8)
        return self._wrap(np.repeat(gray[:, :, np.newaxis], 3, axis=2))

    def negative(self, buffer: PixelBuffer) -> PixelBuffer:
        return self._wrap(255 - buffer.pixels)

    def pixelate(self, buffer: PixelBuffer, block: int) -> PixelBuffer:
        """
        Квадратные блоки `block` × `block`: каждый пиксель блока получает среднее
        по блоку (по каналам, с округлением). Крайние блоки меньше и усредняются
        по своей фактической площади.
        """
        if block <= 0:
            raise InvalidOption(f"Размер блока должен быть положительным: {block}")
        src = buffer.pixels.astype(np.int64)
        out = np.empty_like(buffer.pixels)
        h, w = buffer.height, buffer.width
        for y0 in range(0, h, block):
            for x0 in range(0, w, block):
                tile = src[y0:y0 + block, x0:x0 + block]
                count = tile.shape[0] * tile.shape[1]
                mean = self._round_div(tile.reshape(-1, 3).sum(axis=0), count)
                out[y0:y0 + block, x0:x0 + block] = mean
        return self._wrap(out)

    def blur(self, buffer: PixelBuffer) -> PixelBuffer:
        """
        Среднее по самому пикселю и его 4-связным соседям внутри изображения
        (от 3 до 5 отсчётов). Свёртка через сдвиги паддированного массива.
        """
        h, w = buffer.height, buffer.width
        p = np.pad(buffer.pixels.astype(np.int64), ((1, 1), (1, 1), (0, 0)))
        inside = np.pad(np.ones((h, w), dtype=np.int64), 1)

        total = p[1:-1, 1:-1] + p[0:-2, 1:-1] + p[2:, 1:-1] + p[1:-1, 0:-2] + p[1:-1, 2:]
        count = (
            inside[1:-1, 1:-1] + inside[0:-2, 1:-1] + inside[2:, 1:-1]
            + inside[1:-1, 0:-2] + inside[1:-1, 2:]
        )
        return self._wrap(self._round_div(total, count[:, :, np.newaxis]))

    # ---------- 3) Поворот ----------
    def rotate(self, buffer: PixelBuffer, angle: str) -> PixelBuffer:
        """
        Поворот по часовой стрелке перестановкой координат; при 90/270 ширина и
        высота меняются местами. Для 90: out[x][y] = in[height - 1 - y][x].
        """
        degrees = normalize_angle(angle)
        if degrees == 0:
            return self._wrap(buffer.pixels)
        return self._wrap(np.rot90(buffer.pixels, k=-(degrees // 90), axes=(0, 1)))

    # ---------- 4) Обрезка ----------
    def crop(self, buffer: PixelBuffer, spec: str) -> PixelBuffer:
        """
        Вырезает прямоугольник `offsetX-offsetY-width-height`.
        Нулевые размеры или выход за границы дают `OutOfBounds`.
        """
        offset_x, offset_y, width, height = parse_crop(spec)
        if width == 0 or height == 0:
            raise OutOfBounds(f"Размеры обрезки должны быть больше нуля: {width} × {height}")
        if offset_x + width > buffer.width or offset_y + height > buffer.height:
            raise OutOfBounds(
                f"Область {offset_x},{offset_y} {width} × {height} выходит за пределы "
                f"изображения {buffer.width} × {buffer.height}"
            )
        return self._wrap(buffer.pixels[offset_y:offset_y + height, offset_x:offset_x + width])
