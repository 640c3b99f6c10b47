"""Assert that a drawable renders as one solid color."""

from __future__ import annotations

import logging
from typing import Optional

from .color import Color, ColorLike
from .config import Settings, get_settings
from .drawables import Drawable
from .errors import ColorMismatchError, InvalidDimensionsError
from .models import MismatchReport
from .renderer.surface import PixelSurface, PygameSurface
from .reporting import FailureReporter, PytestFailReporter

logger = logging.getLogger(__name__)


class PixelColorAsserter:
    """Render drawables offscreen and compare every pixel with one color.

    Mismatches are either raised as :class:`ColorMismatchError` or handed to
    the reporter, depending on ``throw_on_mismatch``. The default reporter
    fails the running pytest test; inject a ``RecordingReporter`` to collect
    failures instead. Only the first mismatch in row-major order is reported.
    """

    def __init__(
        self,
        surface: Optional[PixelSurface] = None,
        reporter: Optional[FailureReporter] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self.surface = surface or PygameSurface()
        self.reporter = reporter or PytestFailReporter()

    def assert_all_pixels_of_color(self, prefix: str, drawable: Drawable, color: ColorLike) -> None:
        """Check the drawable at its intrinsic size; mismatches go to the reporter."""

        width = drawable.intrinsic_width
        height = drawable.intrinsic_height
        if width <= 0 or height <= 0:
            raise InvalidDimensionsError("Drawable must be configured to have non-zero size")

        self.assert_all_pixels_of_color_at_size(prefix, drawable, width, height, color, False)

    def assert_all_pixels_of_color_at_size(
        self,
        prefix: str,
        drawable: Drawable,
        width: int,
        height: int,
        color: ColorLike,
        throw_on_mismatch: bool = False,
    ) -> None:
        """Check the drawable rendered into a ``width`` x ``height`` buffer."""

        expected = Color.coerce(color)
        self._check_size(width, height)

        buffer = self.surface.allocate(width, height)
        try:
            drawable.set_bounds(0, 0, width, height)
            drawable.draw(buffer)
            report = self._find_first_mismatch(prefix, buffer, width, height, expected)
        finally:
            self.surface.release(buffer)

        if report is None:
            return
        logger.info("Color mismatch at (%d,%d)", report.row, report.column)
        if throw_on_mismatch:
            raise ColorMismatchError(report)
        self.reporter.report_failure(report.message)

    def _check_size(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise InvalidDimensionsError(f"Buffer size must be positive, got {width}x{height}")
        if width * height > self._settings.max_pixels:
            raise InvalidDimensionsError(
                f"Buffer size {width}x{height} exceeds the limit of {self._settings.max_pixels} pixels"
            )

    def _find_first_mismatch(
        self, prefix: str, buffer, width: int, height: int, expected: Color
    ) -> Optional[MismatchReport]:
        target = expected.packed
        for row in range(height):
            pixels = self.surface.read_row(buffer, row)
            if pixels.count(target) == width:
                continue
            for column in range(width):
                if pixels[column] != target:
                    return MismatchReport(
                        prefix=prefix,
                        expected=expected,
                        actual=Color.from_packed(pixels[column]),
                        row=row,
                        column=column,
                    )
        return None


def assert_all_pixels_of_color(
    prefix: str,
    drawable: Drawable,
    color: ColorLike,
    reporter: Optional[FailureReporter] = None,
) -> None:
    """Module-level shortcut; by default a mismatch fails the current pytest test."""

    asserter = PixelColorAsserter(reporter=reporter)
    asserter.assert_all_pixels_of_color(prefix, drawable, color)


def assert_all_pixels_of_color_at_size(
    prefix: str,
    drawable: Drawable,
    width: int,
    height: int,
    color: ColorLike,
    throw_on_mismatch: bool = False,
    reporter: Optional[FailureReporter] = None,
) -> None:
    asserter = PixelColorAsserter(reporter=reporter)
    asserter.assert_all_pixels_of_color_at_size(prefix, drawable, width, height, color, throw_on_mismatch)
