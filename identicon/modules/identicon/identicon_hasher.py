import hashlib

from identicon.config.constants import IDENTICON_HASH_LENGTH
from identicon.modules.identicon.identicon_errors import IdenticonInvariantError
from identicon.modules.identicon.identicon_image import IdenticonImage


def hash_input(input_text: str) -> IdenticonImage:
    """
    Вычисляет MD5 входной строки и создает начальное состояние identicon.

    MD5 здесь используется как отпечаток содержимого, а не как криптографическая защита.

    :param input_text: Произвольная строка.
    :return: IdenticonImage с заполненным полем hex (16 байт).
    """
    hash_bytes = hashlib.md5(input_text.encode("utf-8")).digest()
    if len(hash_bytes) != IDENTICON_HASH_LENGTH:
        raise IdenticonInvariantError(
            f"Expected {IDENTICON_HASH_LENGTH} hash bytes, got {len(hash_bytes)}"
        )
    return IdenticonImage(hex=tuple(hash_bytes))
