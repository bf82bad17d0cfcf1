"""Точка входа в приложение."""
from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from bitmap.app import BitmapApp
from bitmap.config import load_settings
from bitmap.controllers.app_controller import EXIT_FAILURE, AppController
from bitmap.services.pipeline_service import PipelineService
from bitmap.services.process_service import ProcessService
from bitmap.ui import console


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Читает настройки, настраивает логирование и выполняет команду."""
    try:
        settings = load_settings()
    except ValueError as exc:
        console.print_error(exc)
        return EXIT_FAILURE

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s",
        datefmt="%H:%M:%S",
    )

    pipeline = PipelineService(ProcessService(pixelate_block=settings.pixelate_block))
    app = BitmapApp(AppController(pipeline_service=pipeline))
    return app.run(sys.argv[1:] if argv is None else argv)


if __name__ == "__main__":
    sys.exit(main())
