SERVICE_NAME = "identicon"

# Настройки логирования
LOG_CONFIG = {
    "level": "DEBUG",
    "main_logger_name": "identicon",
    "in_console_enabled": True,
    "in_console_format": "[ %(asctime)s.%(msecs)03d %(module)-20s - %(funcName)25s() ][%(process)2d][%(session_id)4s][%(levelname)s] %(message)s",
    "in_console_format_datetime": "%d.%m.%Y %H:%M:%S",
    "in_file_enabled": False,
    "in_file_format": "[%(asctime)s.%(msecs)03d %(module)-20s - %(funcName)25s() ][%(session_id)4s][%(levelname)s] %(message)s",
    "in_file_format_datetime": "%d.%m.%Y %H:%M:%S",
    "max_size_file_bytes": 1 * 1024 * 1024,
    "backup_file_count": 1,
}

# Уровни логирования с сокращениями
LEVEL_TO_SHORT = {
    10: "DBG",  # logging.DEBUG
    20: "INF",  # logging.INFO
    30: "WRN",  # logging.WARNING
    40: "ERR",  # logging.ERROR
    50: "FTL",  # logging.FATAL
}

# Файл со значениями по умолчанию для переменных окружения
DEFAULTS_ENV_FILE = "defaults.env"

# Исключения для логирования запросов
REQUEST_LOGGING_EXCLUDE_PATHS = [
    "/health",
    "/favicon",
    "/.well-known",
]

# Константы для identicon
IDENTICON_HASH_LENGTH = 16  # Длина MD5-дайджеста в байтах
IDENTICON_ROW_SEED_LENGTH = 3  # Сколько байт образуют половину строки с центром
IDENTICON_GRID_SIZE = 5  # Сетка 5x5
IDENTICON_CELL_SIZE = 50  # Размер клетки в пикселях
IDENTICON_CANVAS_SIZE = IDENTICON_GRID_SIZE * IDENTICON_CELL_SIZE  # 250x250
IDENTICON_BACKGROUND_COLOR = (255, 255, 255)
IDENTICON_IMAGE_MODE = "RGB"
IDENTICON_IMAGE_FORMAT = "PNG"
IDENTICON_MEDIA_TYPE = "image/png"
IDENTICON_FILE_EXTENSION = ".png"
IDENTICON_EMPTY_INPUT_NAME = "%empty"  # quote() всегда пишет после % две hex-цифры
IDENTICON_OUTPUT_DIR = "saved_identicons"
IDENTICON_LOG_INPUT_LIMIT = 40  # Сколько символов входной строки выводить в лог
IDENTICON_ROUTE_PREFIX = "/identicon"
IDENTICON_INFO_SUFFIX = "/info"
