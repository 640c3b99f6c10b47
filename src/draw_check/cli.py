"""Command-line check that a canvas document renders as a single color."""

from __future__ import annotations

import argparse
import logging
import sys

from .asserts import PixelColorAsserter
from .canvas_dsl import load_canvas_document
from .color import Color
from .config import LogLevel
from .drawables import CanvasDrawable
from .errors import ColorMismatchError, InvalidDimensionsError
from .logging import configure_logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.command == "verify":
        return _verify(args)

    parser.error("Unknown command")
    return 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="draw-check",
        description="Verify that drawables render as one solid color.",
    )
    parser.add_argument(
        "--log-level",
        choices=[level.value for level in LogLevel],
        default=None,
        help="Override DRAW_CHECK_LOG_LEVEL",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    verify_parser = subparsers.add_parser("verify", help="Render a canvas document and compare every pixel")
    verify_parser.add_argument("document", help="Path to a canvas document (JSON)")
    verify_parser.add_argument("color", help="Expected color, e.g. '#FF0000' or '#80FF0000'")
    verify_parser.add_argument("--width", type=int, help="Render width (default: canvas width)")
    verify_parser.add_argument("--height", type=int, help="Render height (default: canvas height)")

    return parser


def _verify(args: argparse.Namespace) -> int:
    try:
        document = load_canvas_document(args.document)
        color = Color.from_hex(args.color)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    drawable = CanvasDrawable(document)
    width = args.width if args.width is not None else drawable.intrinsic_width
    height = args.height if args.height is not None else drawable.intrinsic_height
    asserter = PixelColorAsserter()

    try:
        asserter.assert_all_pixels_of_color_at_size(args.document, drawable, width, height, color, True)
    except InvalidDimensionsError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    except ColorMismatchError as exc:
        print(exc.report.message, file=sys.stderr)
        return 1

    logger.debug("Verified %s at %dx%d", args.document, width, height)
    print("OK")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
