import logging
import os
import tempfile
from pathlib import Path
from typing import Union
from urllib.parse import quote

from identicon.config.constants import (
    IDENTICON_EMPTY_INPUT_NAME,
    IDENTICON_FILE_EXTENSION,
    IDENTICON_LOG_INPUT_LIMIT,
    LOG_CONFIG,
)
from identicon.utils.text_utils import loggable_input

logger = logging.getLogger(LOG_CONFIG["main_logger_name"])


def identicon_filename(input_text: str) -> str:
    """
    Формирует имя файла из входной строки.

    Все символы, кроме букв, цифр и "_.-~", кодируются как в URL, ведущая точка
    кодируется отдельно, пустая строка получает имя "%empty" (после % quote()
    всегда ставит две hex-цифры, так что это имя недостижимо даже без учета регистра). Разные строки всегда дают разные имена,
    и ни одно имя не начинается с точки.

    :param input_text: Исходная строка.
    :return: Имя файла с расширением .png.
    """
    if not input_text:
        return f"{IDENTICON_EMPTY_INPUT_NAME}{IDENTICON_FILE_EXTENSION}"

    name = quote(input_text, safe="")
    if name.startswith("."):
        name = "%2E" + name[1:]
    return f"{name}{IDENTICON_FILE_EXTENSION}"


def save_image(
    image_bytes: bytes, input_text: str, output_path: Union[str, Path]
) -> Path:
    """
    Сохраняет identicon в директорию output_path.

    Запись атомарная: сначала во временный файл в той же директории, затем os.replace.
    Ошибки файловой системы пробрасываются вызывающему коду.

    :param image_bytes: Байты PNG.
    :param input_text: Исходная строка, из которой строится имя файла.
    :param output_path: Директория для сохранения.
    :return: Путь к сохраненному файлу.
    """
    output_dir = Path(output_path)
    output_dir.mkdir(parents=True, exist_ok=True)
    target_path = output_dir / identicon_filename(input_text)

    fd, tmp_name = tempfile.mkstemp(dir=output_dir, suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(image_bytes)
        os.replace(tmp_name, target_path)
    except Exception:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise

    logger.info(
        f"Identicon for '{loggable_input(input_text, IDENTICON_LOG_INPUT_LIMIT)}' saved to {target_path}"
    )
    return target_path
