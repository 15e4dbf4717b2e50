import uvicorn

from identicon.config.constants import LOG_CONFIG
from identicon.config.settings import settings
from identicon.utils.logger_setup import setup_logging

logger = setup_logging(LOG_CONFIG["main_logger_name"])


def run_server() -> None:
    """
    Запускает HTTP-сервис identicon с параметрами из переменных окружения.

    Сгенерированные через ?s=y и POST /identicon файлы пишутся в IDENTICON_OUTPUT_PATH.
    """
    logger.info(
        f"Starting identicon service on {settings.app_host}:{settings.app_port} "
        f"(workers: {settings.app_workers}, output: {settings.output_path})"
    )
    uvicorn.run(
        app="identicon.main:app",
        host=settings.app_host,
        port=settings.app_port,
        workers=settings.app_workers,
        reload=settings.app_reload,
        access_log=False,
        lifespan="on",
    )


if __name__ == "__main__":
    run_server()
