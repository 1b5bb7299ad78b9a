"""
Настройка логирования приложения.

Вызывается один раз при старте (app.main). Модули получают логгер через
logging.getLogger(__name__) и ничего не настраивают сами.
"""
import logging
import sys

from app.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging() -> None:
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # SQL-эхо управляется через SQL_ECHO, здесь лишь приглушаем шум
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
