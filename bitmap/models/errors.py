"""Иерархия ошибок обработки BMP.

Все ошибки наследуются от `ValueError`, как и исключения, которые раньше
бросал `ImageService`, поэтому вызывающий код может ловить их привычным способом.
"""
from __future__ import annotations


class BitmapError(ValueError):
    """Базовая ошибка: вызов завершается с ненулевым кодом, повторов нет."""


class FormatError(BitmapError):
    """Файл не является поддерживаемым BMP (сигнатура, глубина цвета, сжатие, обрезан)."""


class InvalidOption(BitmapError):
    """Аргумент преобразования не распознан или не разбирается."""


class OutOfBounds(BitmapError):
    """Прямоугольник обрезки выходит за пределы изображения."""
