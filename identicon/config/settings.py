import logging
import os
from typing import Optional

from dotenv import dotenv_values

from identicon.config.constants import DEFAULTS_ENV_FILE, IDENTICON_OUTPUT_DIR, LOG_CONFIG

logger = logging.getLogger(LOG_CONFIG["main_logger_name"])


class Settings:
    """
    Глобальные настройки приложения

    :param -
    :return: None (Singleton)
    """

    _instance: Optional["Settings"] = None
    _initialized: bool = False
    _loaded_defaults = dotenv_values(DEFAULTS_ENV_FILE) or {}

    DEFAULT_SETTINGS = {
        "app_host": "0.0.0.0",
        "app_port": "8000",
        "app_workers": "1",
        "app_reload": "false",
        "identicon_output_path": IDENTICON_OUTPUT_DIR,
        "show_debug_logs": "false",
        **{k.lower(): v for k, v in _loaded_defaults.items()},
    }

    def __new__(cls) -> "Settings":
        """
        Создает или возвращает существующий экземпляр класса (Singleton).
        """
        if cls._instance is None:
            cls._instance = super(Settings, cls).__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        """
        Инициализирует настройки приложения, загружая их из переменных окружения.
        """
        if Settings._initialized:
            return

        Settings._initialized = True
        self.reload()

    def reload(self) -> None:
        """
        Перечитывает значения из переменных окружения.
        """
        self._app_host: str = os.getenv("APP_HOST", self.DEFAULT_SETTINGS["app_host"])
        self._app_port: str = os.getenv("APP_PORT", self.DEFAULT_SETTINGS["app_port"])
        self._app_workers: str = os.getenv(
            "APP_WORKERS", self.DEFAULT_SETTINGS["app_workers"]
        )
        self._app_reload: str = os.getenv(
            "APP_RELOAD", self.DEFAULT_SETTINGS["app_reload"]
        )
        self._output_path: str = os.getenv(
            "IDENTICON_OUTPUT_PATH", self.DEFAULT_SETTINGS["identicon_output_path"]
        )
        self._show_debug_logs: str = os.getenv(
            "SHOW_DEBUG_LOGS", self.DEFAULT_SETTINGS["show_debug_logs"]
        )

    @staticmethod
    def _to_bool(value) -> bool:
        if isinstance(value, bool):
            return value
        return str(value).lower() in ("true", "t", "yes", "y", "1")

    @property
    def app_host(self) -> str:
        """
        Хост для запуска приложения

        :return: Строка с хостом
        """
        return self._app_host

    @property
    def app_port(self) -> int:
        """
        Порт для запуска приложения

        :return: Целое число - порт
        """
        try:
            return int(self._app_port)
        except (ValueError, TypeError):
            logger.warning(
                f"Invalid APP_PORT value: '{self._app_port}'. Using default: {self.DEFAULT_SETTINGS['app_port']}"
            )
            return int(self.DEFAULT_SETTINGS["app_port"])

    @property
    def app_workers(self) -> int:
        """
        Количество воркеров для запуска приложения

        :return: Целое число - количество воркеров
        """
        try:
            return int(self._app_workers)
        except (ValueError, TypeError):
            logger.warning(
                f"Invalid APP_WORKERS value: '{self._app_workers}'. Using default: {self.DEFAULT_SETTINGS['app_workers']}"
            )
            return int(self.DEFAULT_SETTINGS["app_workers"])

    @property
    def app_reload(self) -> bool:
        """
        Флаг перезагрузки приложения при изменении кода

        :return: Булево значение
        """
        return self._to_bool(self._app_reload)

    @property
    def output_path(self) -> str:
        """
        Директория, в которую сохраняются сгенерированные identicon

        :return: Строка с путем
        """
        return self._output_path or IDENTICON_OUTPUT_DIR

    @property
    def show_debug_logs(self) -> bool:
        """
        Флаг для отображения отладочных сообщений логирования

        :return: Булево значение
        """
        return self._to_bool(self._show_debug_logs)


settings = Settings()
