from dataclasses import replace

from identicon.config.constants import IDENTICON_CELL_SIZE, IDENTICON_GRID_SIZE
from identicon.modules.identicon.identicon_image import IdenticonImage, Rectangle


def cell_rectangle(index: int) -> Rectangle:
    """
    Переводит индекс клетки в прямоугольник в пикселях.

    :param index: Индекс клетки 0..24.
    :return: ((x1, y1), (x2, y2)), где x2 = x1 + 50, y2 = y1 + 50.
    """
    horizontal = (index % IDENTICON_GRID_SIZE) * IDENTICON_CELL_SIZE
    vertical = (index // IDENTICON_GRID_SIZE) * IDENTICON_CELL_SIZE

    top_left = (horizontal, vertical)
    bottom_right = (horizontal + IDENTICON_CELL_SIZE, vertical + IDENTICON_CELL_SIZE)
    return top_left, bottom_right


def build_pixel_map(image: IdenticonImage) -> IdenticonImage:
    """
    Строит карту прямоугольников для всех оставшихся клеток сетки.

    :param image: Состояние с отфильтрованным grid.
    :return: Новое состояние с полем pixel_map.
    """
    pixel_map = tuple(cell_rectangle(index) for _, index in image.grid)
    return replace(image, pixel_map=pixel_map)
