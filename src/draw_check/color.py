"""Four-channel colors and packed ARGB helpers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

ColorLike = Union["Color", int, str, tuple]

HEX_DIGITS_RE = re.compile(r"[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8}")


def alpha(packed: int) -> int:
    return (packed >> 24) & 0xFF


def red(packed: int) -> int:
    return (packed >> 16) & 0xFF


def green(packed: int) -> int:
    return (packed >> 8) & 0xFF


def blue(packed: int) -> int:
    return packed & 0xFF


def argb(a: int, r: int, g: int, b: int) -> int:
    """Pack four channels into a single ARGB integer."""

    return ((a & 0xFF) << 24) | ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    value = value.lstrip("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    return tuple(int(value[i : i + 2], 16) for i in (0, 2, 4))


@dataclass(frozen=True, slots=True)
class Color:
    """An RGBA color with exact integer channels.

    Two colors are equal only when all four channels match; there is no
    tolerance and no color-space normalisation.
    """

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 255:
                raise ValueError(f"Color channel '{name}' must be an integer in 0..255, got {value!r}")

    @classmethod
    def from_packed(cls, packed: int) -> "Color":
        packed &= 0xFFFFFFFF
        return cls(red(packed), green(packed), blue(packed), alpha(packed))

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse ``#RGB``, ``#RRGGBB`` or ``#AARRGGBB``."""

        if not isinstance(value, str) or not value.startswith("#"):
            raise ValueError("Color must be a hex string like '#F00', '#FF0000' or '#80FF0000'")
        digits = value[1:]
        if not HEX_DIGITS_RE.fullmatch(digits):
            raise ValueError(f"Invalid hex color '{value}'")
        if len(digits) == 8:
            return cls.from_packed(int(digits, 16))
        return cls(*hex_to_rgb(digits))

    @classmethod
    def coerce(cls, value: ColorLike) -> "Color":
        """Normalise a ``Color``, packed int, hex string or channel tuple."""

        if isinstance(value, Color):
            return value
        if isinstance(value, bool):
            raise TypeError("Cannot interpret a bool as a color")
        if isinstance(value, int):
            return cls.from_packed(value)
        if isinstance(value, str):
            return cls.from_hex(value)
        if isinstance(value, tuple) and len(value) in (3, 4):
            return cls(*value)
        raise TypeError(f"Cannot interpret {value!r} as a color")

    @property
    def packed(self) -> int:
        return argb(self.alpha, self.red, self.green, self.blue)

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.red, self.green, self.blue, self.alpha)

    def to_hex(self) -> str:
        if self.alpha == 255:
            return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"
        return f"#{self.packed:08X}"


RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)
