"""Последовательное применение преобразований из упорядоченного списка опций.

Принципы:
- SRP: только сопоставление имени опции с преобразованием и свёртка по списку.
- Буфер вместе с размерами передаётся от шага к шагу как одно значение;
  первая же ошибка прерывает весь конвейер.
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, Optional

from bitmap.models.errors import InvalidOption
from bitmap.models.image_model import Option, PixelBuffer
from bitmap.services.process_service import ProcessService

logger = logging.getLogger(__name__)

Transform = Callable[[PixelBuffer, str], PixelBuffer]


class PipelineService:
    def __init__(self, process_service: Optional[ProcessService] = None) -> None:
        self._process_service = process_service or ProcessService()
        self._transforms: Dict[str, Transform] = {
            "mirror": self._process_service.mirror,
            "filter": self._process_service.apply_filter,
            "rotate": self._process_service.rotate,
            "crop": self._process_service.crop,
        }

    @property
    def option_names(self) -> tuple[str, ...]:
        return tuple(self._transforms)

    def apply(self, buffer: PixelBuffer, options: Iterable[Option]) -> PixelBuffer:
        """Применяет опции по порядку и возвращает итоговый буфер.

        Raises:
            InvalidOption: неизвестное имя опции или значение, которое не принял шаг.
            OutOfBounds: обрезка за пределами текущих размеров.
        """
        for step, option in enumerate(options, start=1):
            transform = self._transforms.get(option.name)
            if transform is None:
                raise InvalidOption(f"Неизвестная опция: --{option.name}")
            before = (buffer.width, buffer.height)
            buffer = transform(buffer, option.value)
            logger.debug(
                "Step %d --%s=%s: %dx%d -> %dx%d",
                step, option.name, option.value, *before, buffer.width, buffer.height,
            )
        return buffer
