class IdenticonError(Exception):
    """Базовое исключение генерации identicon."""


class IdenticonInvariantError(IdenticonError):
    """
    Нарушен внутренний инвариант конвейера (длина хеша, длина строки сетки и т.п.).

    При корректной работе хешера возникать не должно, поэтому не перехватывается
    и не исправляется на месте.
    """
