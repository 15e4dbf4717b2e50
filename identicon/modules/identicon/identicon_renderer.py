import io

from PIL import Image, ImageDraw

from identicon.config.constants import (
    IDENTICON_BACKGROUND_COLOR,
    IDENTICON_CANVAS_SIZE,
    IDENTICON_IMAGE_FORMAT,
    IDENTICON_IMAGE_MODE,
)
from identicon.modules.identicon.identicon_image import IdenticonImage


def render_canvas(image: IdenticonImage) -> Image.Image:
    """
    Рисует identicon на холсте 250x250.

    ImageDraw.rectangle закрашивает прямоугольник включительно с обоими углами,
    поэтому соседние клетки перекрываются на одну линию пикселей.

    :param image: Состояние с заполненными color и pixel_map.
    :return: Изображение PIL.Image.
    """
    canvas = Image.new(
        IDENTICON_IMAGE_MODE,
        (IDENTICON_CANVAS_SIZE, IDENTICON_CANVAS_SIZE),
        IDENTICON_BACKGROUND_COLOR,
    )
    draw = ImageDraw.Draw(canvas)

    for top_left, bottom_right in image.pixel_map:
        draw.rectangle([top_left, bottom_right], fill=image.color)

    return canvas


def image_to_png_bytes(canvas: Image.Image) -> bytes:
    """
    Сериализует изображение в PNG.

    :param canvas: Изображение для сериализации.
    :return: Байты PNG.
    """
    output = io.BytesIO()
    canvas.save(output, format=IDENTICON_IMAGE_FORMAT)
    return output.getvalue()


def draw_image(image: IdenticonImage) -> bytes:
    """
    Рисует identicon и возвращает его в формате PNG.

    :param image: Состояние с заполненными color и pixel_map.
    :return: Байты PNG.
    """
    return image_to_png_bytes(render_canvas(image))
