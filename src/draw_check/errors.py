"""Exceptions raised by the pixel assertion helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import MismatchReport


class DrawCheckError(Exception):
    """Base class for draw_check errors."""


class InvalidDimensionsError(DrawCheckError, ValueError):
    """Raised when a drawable or requested buffer has no usable size."""


class ColorMismatchError(DrawCheckError, AssertionError):
    """Raised in throwing mode when a rendered pixel differs from the expected color."""

    def __init__(self, report: "MismatchReport") -> None:
        super().__init__(report.message)
        self.report = report
