import logging

from fastapi import Request

from identicon.config.constants import IDENTICON_LOG_INPUT_LIMIT, LOG_CONFIG
from identicon.modules.identicon.identicon_errors import IdenticonInvariantError
from identicon.utils.session_context import get_identicon_input
from identicon.utils.text_utils import loggable_input

logger = logging.getLogger(LOG_CONFIG["main_logger_name"])


def describe_input(input_text) -> str:
    """
    Форматирует входную строку identicon для лога.

    :param input_text: Строка или None, если запрос не относится к identicon.
    :return: Строка вида "'banana'" или "-".
    """
    if input_text is None:
        return "-"
    return f"'{loggable_input(input_text, IDENTICON_LOG_INPUT_LIMIT)}'"


def log_request_error(request: Request, e: Exception) -> None:
    """
    Логирует ошибку обработки запроса вместе со строкой identicon текущей сессии.

    Нарушение инварианта конвейера логируется как FTL с трассировкой:
    при исправном хешере оно означает ошибку в коде, а не во входных данных.

    :param request: Объект запроса
    :param e: Объект исключения
    """
    client_ip = request.client.host if request.client else "unknown"
    is_invariant = isinstance(e, IdenticonInvariantError)

    logger.log(
        logging.CRITICAL if is_invariant else logging.ERROR,
        f"[{request.method}] {client_ip} - {request.url.path} "
        f"input={describe_input(get_identicon_input())} - {type(e).__name__}: {str(e)}",
        exc_info=is_invariant,
    )
