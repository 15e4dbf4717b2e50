from dataclasses import replace

from identicon.modules.identicon.identicon_errors import IdenticonInvariantError
from identicon.modules.identicon.identicon_image import IdenticonImage


def pick_color(image: IdenticonImage) -> IdenticonImage:
    """
    Берет цвет из первых трех байт хеша без преобразований.

    :param image: Состояние с заполненным hex.
    :return: Новое состояние с полем color.
    """
    hash_bytes = image.hex
    if len(hash_bytes) < 3:
        raise IdenticonInvariantError(
            f"At least 3 hash bytes are required to pick a color, got {len(hash_bytes)}"
        )
    return replace(image, color=(hash_bytes[0], hash_bytes[1], hash_bytes[2]))
