import logging
import os
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from identicon.config.constants import LOG_CONFIG
from identicon.config.settings import settings

logger = logging.getLogger(LOG_CONFIG["main_logger_name"])

_boot_time: Optional[float] = None


def get_boot_time() -> Optional[float]:
    """
    Время запуска процесса (Unix timestamp) или None, если приложение еще не стартовало.
    """
    return _boot_time


# noinspection PyUnusedLocal
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Асинхронный менеджер контекста для управления жизненным циклом приложения FastAPI

    :param app: Экземпляр приложения FastAPI
    """
    global _boot_time
    _boot_time = time.time()
    logger.info(
        f"Process started [{os.getpid()}], identicons directory: {settings.output_path}"
    )

    yield

    logger.info(f"Process stopped [{os.getpid()}]")
