import pytest

from identicon.modules.identicon.identicon_color import pick_color
from identicon.modules.identicon.identicon_errors import IdenticonInvariantError
from identicon.modules.identicon.identicon_hasher import hash_input
from identicon.modules.identicon.identicon_image import IdenticonImage

from tests.test_utils import ASDF, ASDF_COLOR, ASDF_MD5, BANANA, BANANA_COLOR, BANANA_MD5


def test_hash_input_produces_16_bytes() -> None:
    for text in ["", "a", BANANA, "ünïcödé", "x" * 10_000]:
        image = hash_input(text)
        assert len(image.hex) == 16
        assert all(0 <= b <= 255 for b in image.hex)


def test_hash_input_is_md5_of_utf8() -> None:
    assert hash_input(BANANA).digest == BANANA_MD5
    assert hash_input(ASDF).digest == ASDF_MD5


def test_hash_input_is_deterministic() -> None:
    assert hash_input("same input") == hash_input("same input")
    assert hash_input("one") != hash_input("two")


def test_hash_input_leaves_other_fields_empty() -> None:
    image = hash_input(BANANA)
    assert image.color is None
    assert image.grid is None
    assert image.pixel_map is None


def test_pick_color_uses_first_three_bytes() -> None:
    assert pick_color(hash_input(BANANA)).color == BANANA_COLOR
    assert pick_color(hash_input(ASDF)).color == ASDF_COLOR


def test_pick_color_does_not_mutate_source() -> None:
    image = hash_input(BANANA)
    colored = pick_color(image)
    assert image.color is None
    assert colored.hex == image.hex


def test_pick_color_requires_three_bytes() -> None:
    with pytest.raises(IdenticonInvariantError):
        pick_color(IdenticonImage(hex=(1, 2)))
