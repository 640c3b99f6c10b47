"""Renderable objects the pixel asserter can paint offscreen."""

from __future__ import annotations

from abc import ABC, abstractmethod

import pygame
from PIL import Image

from .canvas_dsl import (
    CanvasDocument,
    CanvasStep,
    CircleStep,
    LineStep,
    PixelsStep,
    PolygonStep,
    RectStep,
    StepGroup,
)
from .color import Color, ColorLike, hex_to_rgb
from .renderer.surface import create_canvas, scale_into


class Drawable(ABC):
    """Something that paints itself into a rectangle of a target surface.

    Subclasses report an intrinsic size (``-1`` when they have none) and draw
    into whatever bounds the caller last passed to :meth:`set_bounds`.
    """

    def __init__(self) -> None:
        self._bounds = pygame.Rect(0, 0, 0, 0)

    @property
    def intrinsic_width(self) -> int:
        return -1

    @property
    def intrinsic_height(self) -> int:
        return -1

    @property
    def bounds(self) -> pygame.Rect:
        return self._bounds.copy()

    def set_bounds(self, left: int, top: int, right: int, bottom: int) -> None:
        self._bounds = pygame.Rect(left, top, right - left, bottom - top)

    @abstractmethod
    def draw(self, target: pygame.Surface) -> None:
        """Paint into ``target`` within the current bounds."""


class ColorDrawable(Drawable):
    """Fills its bounds with one color; alpha is written as-is."""

    def __init__(self, color: ColorLike, width: int = -1, height: int = -1) -> None:
        super().__init__()
        self.color = Color.coerce(color)
        self._width = width
        self._height = height

    @property
    def intrinsic_width(self) -> int:
        return self._width

    @property
    def intrinsic_height(self) -> int:
        return self._height

    def draw(self, target: pygame.Surface) -> None:
        target.fill(self.color.rgba, self._bounds)


class CanvasDrawable(Drawable):
    """Draws a canvas document at its native size and scales it to the bounds."""

    def __init__(self, document: CanvasDocument) -> None:
        super().__init__()
        self.document = document

    @property
    def intrinsic_width(self) -> int:
        return self.document.canvas.w

    @property
    def intrinsic_height(self) -> int:
        return self.document.canvas.h

    def draw(self, target: pygame.Surface) -> None:
        canvas = self.document.canvas
        surface = create_canvas(canvas.w, canvas.h, hex_to_rgb(canvas.bg))
        for step in self.document.steps:
            paint_step(surface, step)
        scale_into(surface, target, self._bounds)


class ImageDrawable(Drawable):
    """Wraps a Pillow image; intrinsic size is the image size."""

    def __init__(self, image: Image.Image) -> None:
        super().__init__()
        rgba = image if image.mode == "RGBA" else image.convert("RGBA")
        self._surface = pygame.image.frombytes(rgba.tobytes(), rgba.size, "RGBA")

    @property
    def intrinsic_width(self) -> int:
        return self._surface.get_width()

    @property
    def intrinsic_height(self) -> int:
        return self._surface.get_height()

    def draw(self, target: pygame.Surface) -> None:
        scale_into(self._surface, target, self._bounds)


def paint_step(surface: pygame.Surface, step: CanvasStep) -> None:
    """Paint one canvas DSL step (groups recursively) onto ``surface``."""

    if isinstance(step, StepGroup):
        for nested in step.steps:
            paint_step(surface, nested)
    elif isinstance(step, RectStep):
        rect = pygame.Rect(step.x, step.y, step.w, step.h)
        if step.fill:
            pygame.draw.rect(surface, hex_to_rgb(step.fill), rect)
        if step.outline:
            pygame.draw.rect(surface, hex_to_rgb(step.outline), rect, width=1)
    elif isinstance(step, CircleStep):
        if step.fill:
            pygame.draw.circle(surface, hex_to_rgb(step.fill), (step.cx, step.cy), step.r)
        if step.outline:
            pygame.draw.circle(surface, hex_to_rgb(step.outline), (step.cx, step.cy), step.r, width=1)
    elif isinstance(step, LineStep):
        pygame.draw.line(surface, hex_to_rgb(step.color), (step.x1, step.y1), (step.x2, step.y2), step.width)
    elif isinstance(step, PolygonStep):
        if step.fill:
            pygame.draw.polygon(surface, hex_to_rgb(step.fill), step.points)
        if step.outline:
            pygame.draw.polygon(surface, hex_to_rgb(step.outline), step.points, width=1)
    elif isinstance(step, PixelsStep):
        color = hex_to_rgb(step.color)
        for x, y in step.points:
            surface.set_at((x, y), color)
    else:  # pragma: no cover - future proofing
        raise ValueError(f"Unsupported step type: {type(step)}")
