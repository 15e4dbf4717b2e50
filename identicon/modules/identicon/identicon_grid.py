from dataclasses import replace
from typing import List, Sequence

from identicon.config.constants import (
    IDENTICON_GRID_SIZE,
    IDENTICON_HASH_LENGTH,
    IDENTICON_ROW_SEED_LENGTH,
)
from identicon.modules.identicon.identicon_errors import IdenticonInvariantError
from identicon.modules.identicon.identicon_image import IdenticonImage


def mirror_row(row: Sequence[int]) -> List[int]:
    """
    Отражает строку относительно центра: [a, b, c] -> [a, b, c, b, a].

    :param row: Ровно три значения.
    :return: Симметричная строка из пяти значений.
    """
    if len(row) != IDENTICON_ROW_SEED_LENGTH:
        raise IdenticonInvariantError(
            f"Row to mirror must have {IDENTICON_ROW_SEED_LENGTH} values, got {len(row)}"
        )
    first, second = row[0], row[1]
    return [*row, second, first]


def build_grid(image: IdenticonImage) -> IdenticonImage:
    """
    Строит сетку 5x5 из хеша.

    Последний байт отбрасывается, оставшиеся 15 делятся на 5 строк по 3 байта,
    каждая строка отражается, после чего каждой клетке присваивается индекс 0..24.

    :param image: Состояние с заполненным hex.
    :return: Новое состояние с полем grid из 25 пар (значение, индекс).
    """
    hash_bytes = image.hex
    if len(hash_bytes) != IDENTICON_HASH_LENGTH:
        raise IdenticonInvariantError(
            f"Expected {IDENTICON_HASH_LENGTH} hash bytes, got {len(hash_bytes)}"
        )

    seed = hash_bytes[:-1]
    rows = [
        mirror_row(seed[start:start + IDENTICON_ROW_SEED_LENGTH])
        for start in range(0, len(seed), IDENTICON_ROW_SEED_LENGTH)
    ]

    grid = []
    for row_number in range(IDENTICON_GRID_SIZE):
        for column in range(IDENTICON_GRID_SIZE):
            index = row_number * IDENTICON_GRID_SIZE + column
            grid.append((rows[row_number][column], index))

    return replace(image, grid=tuple(grid))


def filter_odd_squares(image: IdenticonImage) -> IdenticonImage:
    """
    Оставляет только клетки с четным значением, сохраняя порядок.

    Пустой результат допустим: получится пустой (фоновый) identicon.

    :param image: Состояние с заполненным grid.
    :return: Новое состояние с отфильтрованным grid.
    """
    filtered_grid = tuple(cell for cell in image.grid if cell[0] % 2 == 0)
    return replace(image, grid=filtered_grid)
