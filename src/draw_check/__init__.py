"""Pixel color assertions for drawables rendered offscreen."""

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from .asserts import (  # noqa: E402
    PixelColorAsserter,
    assert_all_pixels_of_color,
    assert_all_pixels_of_color_at_size,
)
from .color import Color  # noqa: E402
from .drawables import CanvasDrawable, ColorDrawable, Drawable, ImageDrawable  # noqa: E402
from .errors import ColorMismatchError, DrawCheckError, InvalidDimensionsError  # noqa: E402
from .models import MismatchReport  # noqa: E402
from .reporting import PytestFailReporter, RecordingReporter  # noqa: E402

__all__ = [
    "CanvasDrawable",
    "Color",
    "ColorDrawable",
    "ColorMismatchError",
    "DrawCheckError",
    "Drawable",
    "ImageDrawable",
    "InvalidDimensionsError",
    "MismatchReport",
    "PixelColorAsserter",
    "PytestFailReporter",
    "RecordingReporter",
    "assert_all_pixels_of_color",
    "assert_all_pixels_of_color_at_size",
]
