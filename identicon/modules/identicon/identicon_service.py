import logging
from pathlib import Path
from typing import Optional, Union

from identicon.config.constants import IDENTICON_LOG_INPUT_LIMIT, LOG_CONFIG
from identicon.config.settings import settings
from identicon.modules.identicon.identicon_color import pick_color
from identicon.modules.identicon.identicon_grid import build_grid, filter_odd_squares
from identicon.modules.identicon.identicon_hasher import hash_input
from identicon.modules.identicon.identicon_image import IdenticonImage
from identicon.modules.identicon.identicon_pixel_map import build_pixel_map
from identicon.modules.identicon.identicon_renderer import draw_image
from identicon.modules.identicon.identicon_storage import save_image
from identicon.utils.text_utils import loggable_input

logger = logging.getLogger(LOG_CONFIG["main_logger_name"])


def describe_identicon(input_text: str) -> IdenticonImage:
    """
    Прогоняет строку через все шаги конвейера, кроме отрисовки.

    :param input_text: Произвольная строка.
    :return: IdenticonImage с заполненными hex, color, grid и pixel_map.
    """
    image = hash_input(input_text)
    image = pick_color(image)
    image = build_grid(image)
    image = filter_odd_squares(image)
    image = build_pixel_map(image)

    logger.debug(
        f"Identicon '{loggable_input(input_text, IDENTICON_LOG_INPUT_LIMIT)}': "
        f"md5={image.digest}, color={image.color}, cells={len(image.grid)}"
    )
    return image


def generate(input_text: str) -> bytes:
    """
    Генерирует identicon для строки.

    Одинаковый вход всегда дает побайтно одинаковый PNG.

    :param input_text: Произвольная строка.
    :return: Байты PNG 250x250.
    """
    return draw_image(describe_identicon(input_text))


def create_identicon(
    input_text: str, output_path: Optional[Union[str, Path]] = None
) -> Path:
    """
    Генерирует identicon и сохраняет его в файл.

    :param input_text: Произвольная строка.
    :param output_path: Директория для сохранения (по умолчанию из настроек).
    :return: Путь к сохраненному файлу.
    """
    if output_path is None:
        output_path = settings.output_path
    return save_image(generate(input_text), input_text, output_path)
