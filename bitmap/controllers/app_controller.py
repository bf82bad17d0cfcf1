"""Контроллер приложения: оркестрация сервисов для команд `header` и `apply`.

SOLID:
- SRP: класс связывает разбор аргументов с сервисами (без логики обработки изображений).
- DIP: зависит от сервисов как от ролей; конкретные реализации подставляются снаружи.
Clean Code:
- Ошибки перехватываются только здесь и превращаются в сообщение и код возврата.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from bitmap.models.errors import BitmapError
from bitmap.models.image_model import Option
from bitmap.services.image_service import ImageService
from bitmap.services.pipeline_service import PipelineService
from bitmap.ui import console

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


@dataclass
class AppController:
    """Выполняет команды и возвращает код завершения процесса.

    Ответственности:
    - Загрузка заголовков и изображений через `ImageService`.
    - Применение упорядоченных опций через `PipelineService`.
    - Запись результата только после успешного прохождения всего конвейера.
    """
    image_service: ImageService = field(default_factory=ImageService)
    pipeline_service: PipelineService = field(default_factory=PipelineService)

    # ---- Commands ----
    def run_header(self, source: str | Path) -> int:
        logger.info("Opening file: %s", source)
        try:
            file_header, info_header = self.image_service.load_headers(source)
        except (BitmapError, OSError) as exc:
            return self._fail(exc)
        console.print_header(file_header, info_header)
        return EXIT_OK

    def run_apply(self, options: Sequence[Option], source: str | Path, output: str | Path) -> int:
        """Загружает `source`, применяет опции по порядку и пишет `output`.

        При любой ошибке файл результата не создаётся.
        """
        logger.info("Opening file: %s", source)
        try:
            image = self.image_service.load_image(source)
            buffer = self.pipeline_service.apply(image.buffer, options)
            image = self.image_service.with_buffer(image, buffer)
            self.image_service.save_image(image, output)
        except (BitmapError, OSError) as exc:
            return self._fail(exc)
        logger.info("Saved %dx%d image to %s", image.width, image.height, output)
        return EXIT_OK

    # ---- Helpers ----
    @staticmethod
    def _fail(exc: Exception) -> int:
        logger.debug("Command failed", exc_info=exc)
        console.print_error(exc)
        return EXIT_FAILURE
