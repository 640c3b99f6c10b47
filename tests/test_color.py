import pytest

from draw_check.color import Color, alpha, argb, blue, green, hex_to_rgb, red


def test_packed_channel_helpers() -> None:
    packed = argb(0x80, 0x12, 0x34, 0x56)
    assert packed == 0x80123456
    assert (alpha(packed), red(packed), green(packed), blue(packed)) == (0x80, 0x12, 0x34, 0x56)


def test_from_packed_accepts_signed_values() -> None:
    # 0xFFFF0000 as a signed 32-bit integer
    assert Color.from_packed(-65536) == Color(255, 0, 0, 255)


def test_from_hex_variants() -> None:
    assert Color.from_hex("#F00") == Color(255, 0, 0)
    assert Color.from_hex("#00FF00") == Color(0, 255, 0)
    assert Color.from_hex("#800000FF") == Color(0, 0, 255, 0x80)


@pytest.mark.parametrize(
    "value",
    ["FF0000", "#GG0000", "#12345", "", "#FF_00_00", "#+FF000", "#0xFF00", "#0x00FF00", "# F0", "#FF0000\n"],
)
def test_from_hex_rejects_garbage(value: str) -> None:
    with pytest.raises(ValueError):
        Color.from_hex(value)


def test_channel_range_is_validated() -> None:
    with pytest.raises(ValueError):
        Color(256, 0, 0)
    with pytest.raises(ValueError):
        Color(0, 0, 0, -1)


def test_coerce() -> None:
    red_color = Color(255, 0, 0)
    assert Color.coerce(red_color) is red_color
    assert Color.coerce(0xFFFF0000) == red_color
    assert Color.coerce("#FF0000") == red_color
    assert Color.coerce((255, 0, 0, 255)) == red_color
    with pytest.raises(TypeError):
        Color.coerce(True)
    with pytest.raises(TypeError):
        Color.coerce(1.5)


def test_equality_includes_alpha() -> None:
    assert Color(1, 2, 3, 255) != Color(1, 2, 3, 254)
    assert Color(1, 2, 3, 255).packed != Color(1, 2, 3, 254).packed


def test_to_hex_and_hex_to_rgb() -> None:
    assert Color(255, 0, 16).to_hex() == "#FF0010"
    assert Color(255, 0, 16, 0).to_hex() == "#00FF0010"
    assert hex_to_rgb("#abc") == (0xAA, 0xBB, 0xCC)
