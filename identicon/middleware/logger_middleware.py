import logging
import time
from typing import Any, MutableMapping, Optional

from starlette.types import ASGIApp, Receive, Scope, Send

from identicon.config.constants import (
    IDENTICON_ROUTE_PREFIX,
    IDENTICON_INFO_SUFFIX,
    LOG_CONFIG,
    REQUEST_LOGGING_EXCLUDE_PATHS,
)
from identicon.utils.request_logging import describe_input
from identicon.utils.session_context import (
    bind_identicon_input,
    get_identicon_input,
    new_session_id,
)

logger = logging.getLogger(LOG_CONFIG["main_logger_name"])

HTTP_499_CLIENT_CLOSED_REQUEST = 499


def identicon_input_from_path(path: str) -> Optional[str]:
    """
    Извлекает строку identicon из пути вида /identicon/{text} или /identicon/{text}/info.

    :param path: Декодированный путь запроса (scope["path"]).
    :return: Строка или None для остальных путей.
    """
    prefix = f"{IDENTICON_ROUTE_PREFIX}/"
    if not path.startswith(prefix):
        return None
    text = path[len(prefix):]
    if text.endswith(IDENTICON_INFO_SUFFIX):
        text = text[: -len(IDENTICON_INFO_SUFFIX)]
    return text or None


class IdenticonRequestLoggingMiddleware:
    """
    Логирует каждый запрос одной строкой при завершении: строка identicon,
    статус, тип и размер ответа, время обработки.

    Запросы к identicon логируются на уровне INF, служебные - на DBG.
    """

    def __init__(self, app: ASGIApp, exclude_paths: list[str] = None):
        self.app = app
        self.exclude_paths = exclude_paths or REQUEST_LOGGING_EXCLUDE_PATHS

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        new_session_id()
        path = scope.get("path", "")
        # Для POST строка приходит в теле, ее привязывает обработчик
        bind_identicon_input(identicon_input_from_path(path))

        if any(path.startswith(excluded) for excluded in self.exclude_paths):
            await self.app(scope, receive, send)
            return

        start_time = time.perf_counter()
        response = {"status": 0, "content_type": "-", "size": 0}

        async def send_wrapper(message: MutableMapping[str, Any]) -> None:
            if message["type"] == "http.response.start":
                response["status"] = message["status"]
                for name, value in message.get("headers", []):
                    if name.lower() == b"content-type":
                        response["content_type"] = value.decode("latin-1")
            elif message["type"] == "http.response.body":
                response["size"] += len(message.get("body", b""))
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            client = scope.get("client")
            client_ip = client[0] if client else "unknown"
            status_code = response["status"] or HTTP_499_CLIENT_CLOSED_REQUEST
            level = (
                logging.INFO if path.startswith(IDENTICON_ROUTE_PREFIX) else logging.DEBUG
            )
            logger.log(
                level,
                f"[{scope['method']}] {client_ip} - {path} "
                f"input={describe_input(get_identicon_input())} "
                f"[{status_code}][{response['content_type']} {response['size']}b]"
                f"[{time.perf_counter() - start_time:.4f}s]",
            )
