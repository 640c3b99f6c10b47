from __future__ import annotations

from typing import Optional

import pygame

from draw_check.config import Settings
from draw_check.drawables import Drawable


def make_settings(**overrides) -> Settings:
    data = {
        "DRAW_CHECK_LOG_LEVEL": "INFO",
        "DRAW_CHECK_MAX_PIXELS": 1_000_000,
    }
    data.update(overrides)
    return Settings.model_validate(data)


class SpyDrawable(Drawable):
    """Fills its bounds with ``fill`` and then paints ``overrides`` keyed by (row, column)."""

    def __init__(
        self,
        fill: tuple[int, int, int, int],
        width: int = 4,
        height: int = 4,
        overrides: Optional[dict[tuple[int, int], tuple[int, int, int, int]]] = None,
        error: Optional[Exception] = None,
    ) -> None:
        super().__init__()
        self.fill = fill
        self.width = width
        self.height = height
        self.overrides = overrides or {}
        self.error = error
        self.bounds_calls: list[tuple[int, int, int, int]] = []
        self.draw_calls = 0

    @property
    def intrinsic_width(self) -> int:
        return self.width

    @property
    def intrinsic_height(self) -> int:
        return self.height

    def set_bounds(self, left: int, top: int, right: int, bottom: int) -> None:
        self.bounds_calls.append((left, top, right, bottom))
        super().set_bounds(left, top, right, bottom)

    def draw(self, target: pygame.Surface) -> None:
        self.draw_calls += 1
        if self.error is not None:
            raise self.error
        target.fill(self.fill, self.bounds)
        for (row, column), color in self.overrides.items():
            target.set_at((column, row), color)
