from dataclasses import replace
from typing import List, Tuple

from identicon.modules.identicon.identicon_color import pick_color
from identicon.modules.identicon.identicon_grid import build_grid, filter_odd_squares
from identicon.modules.identicon.identicon_image import IdenticonImage
from identicon.modules.identicon.identicon_pixel_map import build_pixel_map

WHITE: Tuple[int, int, int] = (255, 255, 255)

# Значения сняты с эталонного прогона (md5sum)
BANANA = "banana"
BANANA_MD5 = "72b302bf297a228a75730123efef7c41"
BANANA_COLOR: Tuple[int, int, int] = (114, 179, 2)
BANANA_CELLS: List[int] = [0, 2, 4, 7, 10, 11, 13, 14, 22]

ASDF = "asdf"
ASDF_MD5 = "912ec803b2ce49e4a541068d495ab570"
ASDF_COLOR: Tuple[int, int, int] = (145, 46, 200)
ASDF_CELLS: List[int] = [1, 2, 3, 6, 7, 8, 11, 13, 16, 18, 21, 23]


def make_image(hash_bytes: List[int]) -> IdenticonImage:
    """Прогоняет заданные байты через конвейер без хеширования."""
    image = IdenticonImage(hex=tuple(hash_bytes))
    image = pick_color(image)
    image = build_grid(image)
    image = filter_odd_squares(image)
    return build_pixel_map(image)


def with_cells(image: IdenticonImage, indexes: List[int]) -> IdenticonImage:
    """Заменяет сетку на заданные индексы и перестраивает карту пикселей."""
    return build_pixel_map(replace(image, grid=tuple((0, i) for i in indexes)))
