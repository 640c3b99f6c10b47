"""Offscreen pygame surfaces used as pixel buffers."""

from __future__ import annotations

import logging
import sys
from array import array
from typing import Protocol, Sequence

import pygame

from ..errors import DrawCheckError

logger = logging.getLogger(__name__)

# Byte order that lands as (a << 24) | (r << 16) | (g << 8) | b in a native uint32.
_NATIVE_ARGB = "BGRA" if sys.byteorder == "little" else "ARGB"


class PixelSurface(Protocol):
    """Allocator and reader for offscreen pixel buffers."""

    def allocate(self, width: int, height: int) -> pygame.Surface: ...

    def read_row(self, buffer: pygame.Surface, row: int) -> Sequence[int]: ...

    def release(self, buffer: pygame.Surface) -> None: ...


def create_canvas(width: int, height: int, color: tuple[int, ...] | None = None) -> pygame.Surface:
    surface = pygame.Surface((width, height), flags=pygame.SRCALPHA, depth=32)
    surface.fill(color if color is not None else (0, 0, 0, 0))
    return surface


class PygameSurface:
    """32-bit ``SRCALPHA`` buffers, read back one row at a time as packed ARGB."""

    def __init__(self) -> None:
        self._live: dict[int, pygame.Surface] = {}

    @property
    def live_count(self) -> int:
        """Number of allocated buffers that have not been released yet."""

        return len(self._live)

    def allocate(self, width: int, height: int) -> pygame.Surface:
        buffer = create_canvas(width, height)
        self._live[id(buffer)] = buffer
        logger.debug("Allocated %dx%d pixel buffer", width, height)
        return buffer

    def read_row(self, buffer: pygame.Surface, row: int) -> list[int]:
        if id(buffer) not in self._live:
            raise DrawCheckError("Pixel buffer was released or not allocated by this surface")
        width, height = buffer.get_size()
        if not 0 <= row < height:
            raise IndexError(f"Row {row} outside buffer of height {height}")
        line = buffer.subsurface(pygame.Rect(0, row, width, 1))
        pixels = array("I")
        pixels.frombytes(pygame.image.tobytes(line, _NATIVE_ARGB))
        return pixels.tolist()

    def release(self, buffer: pygame.Surface) -> None:
        if self._live.pop(id(buffer), None) is not None:
            logger.debug("Released %dx%d pixel buffer", *buffer.get_size())


def scale_into(source: pygame.Surface, target: pygame.Surface, rect: pygame.Rect) -> None:
    """Nearest-neighbour scale ``source`` onto ``rect`` of ``target``, replacing its pixels."""

    area = rect.clip(target.get_rect())
    if area.width <= 0 or area.height <= 0:
        return
    scaled = source if source.get_size() == rect.size else pygame.transform.scale(source, rect.size)
    # Copy rather than blit so alpha is written verbatim instead of blended.
    region = target.subsurface(area)
    region.fill((0, 0, 0, 0))
    region.blit(scaled, (0, 0), area.move(-rect.x, -rect.y), special_flags=pygame.BLEND_RGBA_ADD)
