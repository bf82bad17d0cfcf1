"""Загрузка BMP с диска и запись результата.

Принципы:
- SRP: класс отвечает только за файловый ввод-вывод и сборку `BitmapImage`;
  разбор байтов делегирован `header_codec` и `pixel_codec`.
- Файл читается и пишется целиком внутри `with`, дескриптор закрывается на любом пути выхода.
"""
from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Tuple

from bitmap.models.header_model import FileHeader, InfoHeader
from bitmap.models.image_model import BitmapImage, PixelBuffer
from bitmap.services import header_codec, pixel_codec

logger = logging.getLogger(__name__)


class ImageService:
    def read_bytes(self, file_path: str | Path) -> bytes:
        """Читает файл целиком.

        Raises:
            FileNotFoundError: если путь не существует или не указывает на файл.
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"Файл не найден: {path}")
        with path.open("rb") as fh:
            data = fh.read()
        logger.debug("Read %d bytes from %s", len(data), path)
        return data

    def load_headers(self, file_path: str | Path) -> Tuple[FileHeader, InfoHeader]:
        """Читает только заголовки (для команды `header`).

        Raises:
            FileNotFoundError: файла нет.
            FormatError: файл не является поддерживаемым BMP.
        """
        return header_codec.parse_headers(self.read_bytes(file_path))

    def load_image(self, file_path: str | Path) -> BitmapImage:
        """Загружает BMP и возвращает заголовки вместе с декодированными пикселями.

        Raises:
            FileNotFoundError: файла нет.
            FormatError: файл не является поддерживаемым BMP или обрезан.
        """
        path = Path(file_path)
        data = self.read_bytes(path)
        file_header, info_header = header_codec.parse_headers(data)
        buffer = pixel_codec.decode(data, file_header, info_header)
        return BitmapImage(path=path, file_header=file_header, info_header=info_header, buffer=buffer)

    def with_buffer(self, image: BitmapImage, buffer: PixelBuffer) -> BitmapImage:
        """Новый `BitmapImage` с другим буфером; ширина и высота в заголовке берутся из буфера."""
        info_header = dataclasses.replace(image.info_header, width=buffer.width, height=buffer.height)
        return dataclasses.replace(image, info_header=info_header, buffer=buffer)

    def to_bytes(self, image: BitmapImage) -> bytes:
        """Полный файл: заголовки с пересчитанными размерами и пиксельный массив."""
        image = self.with_buffer(image, image.buffer)
        return header_codec.serialize_headers(image.file_header, image.info_header) + pixel_codec.encode(image.buffer)

    def save_image(self, image: BitmapImage, file_path: str | Path) -> Path:
        """Записывает изображение в файл и возвращает путь."""
        path = Path(file_path)
        data = self.to_bytes(image)
        with path.open("wb") as fh:
            fh.write(data)
        logger.debug("Wrote %d bytes to %s", len(data), path)
        return path
