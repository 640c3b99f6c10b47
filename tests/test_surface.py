import pytest

from draw_check.errors import DrawCheckError
from draw_check.renderer.surface import PygameSurface


def test_allocate_returns_transparent_buffer() -> None:
    surface = PygameSurface()
    buffer = surface.allocate(3, 2)

    assert buffer.get_size() == (3, 2)
    assert surface.read_row(buffer, 0) == [0, 0, 0]
    assert surface.read_row(buffer, 1) == [0, 0, 0]
    assert surface.live_count == 1


def test_read_row_packs_argb() -> None:
    surface = PygameSurface()
    buffer = surface.allocate(2, 1)
    buffer.set_at((1, 0), (0x12, 0x34, 0x56, 0x78))

    assert surface.read_row(buffer, 0) == [0x00000000, 0x78123456]


def test_read_row_out_of_range() -> None:
    surface = PygameSurface()
    buffer = surface.allocate(2, 2)

    with pytest.raises(IndexError):
        surface.read_row(buffer, 2)


def test_release_is_idempotent_and_blocks_reads() -> None:
    surface = PygameSurface()
    buffer = surface.allocate(1, 1)

    surface.release(buffer)
    surface.release(buffer)

    assert surface.live_count == 0
    with pytest.raises(DrawCheckError):
        surface.read_row(buffer, 0)


def test_read_row_reads_only_the_requested_row() -> None:
    surface = PygameSurface()
    buffer = surface.allocate(300, 3)
    buffer.fill((255, 0, 0, 255))
    buffer.set_at((299, 1), (1, 2, 3, 4))

    assert surface.read_row(buffer, 0) == [0xFFFF0000] * 300
    row = surface.read_row(buffer, 1)
    assert len(row) == 300
    assert row[:299] == [0xFFFF0000] * 299
    assert row[299] == 0x04010203
