import io

from PIL import Image

from identicon.modules.identicon.identicon_hasher import hash_input
from identicon.modules.identicon.identicon_renderer import (
    draw_image,
    image_to_png_bytes,
    render_canvas,
)

from tests.test_utils import BANANA_COLOR, WHITE, make_image, with_cells

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def open_png(data: bytes) -> Image.Image:
    return Image.open(io.BytesIO(data))


def test_draw_image_produces_250_png() -> None:
    data = draw_image(make_image(list(hash_input("banana").hex)))
    assert data.startswith(PNG_SIGNATURE)
    canvas = open_png(data)
    assert canvas.format == "PNG"
    assert canvas.size == (250, 250)
    assert canvas.mode == "RGB"


def test_draw_image_fills_surviving_cells() -> None:
    canvas = open_png(draw_image(make_image(list(hash_input("banana").hex))))
    # Клетки 0 и 2 закрашены, клетка 1 нет
    assert canvas.getpixel((25, 25)) == BANANA_COLOR
    assert canvas.getpixel((75, 25)) == WHITE
    assert canvas.getpixel((125, 25)) == BANANA_COLOR
    # Строка 3 (индексы 15..19) пустая
    assert canvas.getpixel((125, 175)) == WHITE
    # Клетка 22
    assert canvas.getpixel((125, 225)) == BANANA_COLOR


def test_rectangle_fill_includes_bottom_right_corner() -> None:
    image = with_cells(make_image([2] * 16), [0])
    canvas = render_canvas(image)
    assert canvas.getpixel((0, 0)) == (2, 2, 2)
    assert canvas.getpixel((50, 50)) == (2, 2, 2)
    assert canvas.getpixel((50, 25)) == (2, 2, 2)
    assert canvas.getpixel((51, 25)) == WHITE
    assert canvas.getpixel((25, 51)) == WHITE


def test_all_odd_grid_renders_blank_canvas() -> None:
    canvas = render_canvas(make_image([1] * 16))
    assert canvas.getcolors() == [(250 * 250, WHITE)]


def test_all_even_grid_fills_whole_canvas() -> None:
    canvas = render_canvas(make_image([2] * 16))
    assert canvas.getcolors() == [(250 * 250, (2, 2, 2))]


def test_image_to_png_bytes_roundtrips_pixels() -> None:
    canvas = render_canvas(make_image([4] * 16))
    assert open_png(image_to_png_bytes(canvas)).getpixel((249, 249)) == (4, 4, 4)
