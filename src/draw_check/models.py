"""Result models for pixel assertions."""

from __future__ import annotations

from dataclasses import dataclass

from .color import Color


@dataclass(frozen=True, slots=True)
class MismatchReport:
    """First pixel, in row-major order, that differs from the expected color."""

    prefix: str
    expected: Color
    actual: Color
    row: int
    column: int

    @property
    def message(self) -> str:
        # Alpha takes part in the comparison but is left out of the message.
        expected = ",".join(str(c) for c in self.expected.rgb)
        actual = ",".join(str(c) for c in self.actual.rgb)
        return (
            f"{self.prefix}: expected all drawable colors to be [{expected}] "
            f"but at position ({self.row},{self.column}) found [{actual}]"
        )

    def __str__(self) -> str:
        return self.message
