import logging
import uuid
from contextvars import ContextVar
from typing import Optional

session_id_var: ContextVar[Optional[str]] = ContextVar("session_id", default=None)
identicon_input_var: ContextVar[Optional[str]] = ContextVar(
    "identicon_input", default=None
)


def new_session_id() -> str:
    """
    Назначает новый короткий ID сессии текущему контексту и сбрасывает входную строку.

    Вызывается на каждый HTTP-запрос и на каждую строку, обрабатываемую из командной строки.

    :return: Новый ID сессии.
    """
    session_id = uuid.uuid4().hex[:4]
    session_id_var.set(session_id)
    identicon_input_var.set(None)
    return session_id


def get_session_id() -> str:
    """
    :return: ID сессии или '----', если он не назначен.
    """
    return session_id_var.get() or "----"


def bind_identicon_input(input_text: Optional[str]) -> None:
    """Запоминает строку, для которой в текущей сессии строится identicon."""
    identicon_input_var.set(input_text)


def get_identicon_input() -> Optional[str]:
    return identicon_input_var.get()


class SessionIdFilter(logging.Filter):
    """Добавляет в запись лога атрибут session_id."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.session_id = get_session_id()
        return True
