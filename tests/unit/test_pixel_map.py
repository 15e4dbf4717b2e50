from identicon.modules.identicon.identicon_hasher import hash_input
from identicon.modules.identicon.identicon_pixel_map import cell_rectangle

from tests.test_utils import BANANA_CELLS, make_image


def test_cell_rectangle_known_positions() -> None:
    assert cell_rectangle(0) == ((0, 0), (50, 50))
    assert cell_rectangle(4) == ((200, 0), (250, 50))
    assert cell_rectangle(5) == ((0, 50), (50, 100))
    assert cell_rectangle(12) == ((100, 100), (150, 150))
    assert cell_rectangle(24) == ((200, 200), (250, 250))


def test_cell_rectangle_bounds() -> None:
    for index in range(25):
        (x1, y1), (x2, y2) = cell_rectangle(index)
        assert 0 <= x1 <= 200
        assert 0 <= y1 <= 200
        assert (x2, y2) == (x1 + 50, y1 + 50)


def test_build_pixel_map_follows_grid_order() -> None:
    image = make_image(list(hash_input("banana").hex))
    assert len(image.pixel_map) == len(BANANA_CELLS)
    assert list(image.pixel_map) == [cell_rectangle(i) for i in BANANA_CELLS]


def test_build_pixel_map_empty_grid() -> None:
    image = make_image([1] * 16)
    assert image.pixel_map == ()
