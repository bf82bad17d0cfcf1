"""Текстовый вывод: отчёт о заголовках, справка и сообщения об ошибках.

Принципы:
- SRP: только представление, никакой логики разбора или обработки.
- Поток вывода передаётся явно, чтобы тесты могли читать его напрямую.
"""
from __future__ import annotations

import sys
from typing import Optional, TextIO

from bitmap.models.header_model import FileHeader, InfoHeader

GENERAL_HELP = """\
Usage:
  bitmap <command> [arguments]

The commands are:
  header    prints bitmap file header information
  apply     applies processing to the image and saves it to the file
"""

HEADER_HELP = """\
Usage:
  bitmap header <source_file>

Description:
  Prints bitmap file header information
"""

APPLY_HELP = """\
Usage:
  bitmap apply [options] <source_file> <output_file>

The options are:
  -h, --help                                                      prints program usage information
  --mirror=<horizontal|vertical>                                  mirrors the image along the specified axis
  --filter=<blue|red|green|grayscale|negative|pixelate|blur>      applies a specified filter to the image
  --rotate=<right|left|90|-90|180|-180|270|-270>                  rotates the image by the specified angle
  --crop=<offsetX-offsetY-width-height>                           crops the image based on the specified offset and dimensions

Note:
  Multiple options can be combined and applied sequentially
"""


def format_header(file_header: FileHeader, info_header: InfoHeader) -> str:
    """Отчёт о заголовках в формате исходной утилиты."""
    lines = [
        "BMP Header:",
        f"- FileType {file_header.magic.decode('ascii', errors='replace')}",
        f"- FileSizeInBytes {file_header.file_size}",
        f"- HeaderSize {file_header.offset_data}",
        "DIB Header:",
        f"- DibHeaderSize {info_header.header_size}",
        f"- WidthInPixels {info_header.width}",
        f"- HeightInPixels {info_header.height}",
        f"- PixelSizeInBits {info_header.bit_count}",
        f"- ImageSizeInBytes {info_header.image_size}",
    ]
    return "\n".join(lines) + "\n"


def print_header(file_header: FileHeader, info_header: InfoHeader, out: Optional[TextIO] = None) -> None:
    (out or sys.stdout).write(format_header(file_header, info_header))


def print_help(text: str, out: Optional[TextIO] = None) -> None:
    (out or sys.stdout).write(text)


def print_error(message: object, out: Optional[TextIO] = None) -> None:
    (out or sys.stderr).write(f"Error: {message}\n")
