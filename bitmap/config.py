"""Настройки приложения из переменных окружения (и файла `.env`, если он есть)."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_PIXELATE_BLOCK = 8


@dataclass(frozen=True)
class Settings:
    """Fields:
        log_level: Уровень логирования (`BITMAP_LOG_LEVEL`).
        pixelate_block: Сторона квадратного блока фильтра pixelate (`BITMAP_PIXELATE_BLOCK`).
    """
    log_level: str = DEFAULT_LOG_LEVEL
    pixelate_block: int = DEFAULT_PIXELATE_BLOCK


def load_settings() -> Settings:
    """Читает настройки; при некорректных значениях бросает `ValueError`."""
    load_dotenv()
    log_level = os.getenv("BITMAP_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"Неизвестный уровень логирования BITMAP_LOG_LEVEL: {log_level!r}")
    raw_block = os.getenv("BITMAP_PIXELATE_BLOCK", str(DEFAULT_PIXELATE_BLOCK))
    try:
        pixelate_block = int(raw_block)
    except ValueError as exc:
        raise ValueError(f"BITMAP_PIXELATE_BLOCK должно быть целым числом: {raw_block!r}") from exc
    if pixelate_block <= 0:
        raise ValueError(f"BITMAP_PIXELATE_BLOCK должно быть положительным: {pixelate_block}")
    return Settings(log_level=log_level, pixelate_block=pixelate_block)
