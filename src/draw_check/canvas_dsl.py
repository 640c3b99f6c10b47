"""Canvas documents: a small JSON schema for solid-color test fixtures."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Annotated, Literal, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, ValidationError


_HEX_COLOR_RE = re.compile(r"#(?:[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})")


def _validate_hex_color(hex_color: str) -> str:
    if not _HEX_COLOR_RE.fullmatch(hex_color):
        raise ValueError("Color must be a hex string like '#FFF' or '#11AA22'")
    return hex_color


HexColor = Annotated[str, AfterValidator(_validate_hex_color)]
Point = tuple[int, int]


class _Step(BaseModel):
    model_config = ConfigDict(extra="forbid")


class RectStep(_Step):
    op: Literal["rect"]
    x: int
    y: int
    w: int
    h: int
    fill: Optional[HexColor] = None
    outline: Optional[HexColor] = None


class CircleStep(_Step):
    op: Literal["circle"]
    cx: int
    cy: int
    r: int = Field(..., ge=0)
    fill: Optional[HexColor] = None
    outline: Optional[HexColor] = None


class LineStep(_Step):
    op: Literal["line"]
    x1: int
    y1: int
    x2: int
    y2: int
    width: int = Field(1, ge=1)
    color: HexColor


class PolygonStep(_Step):
    op: Literal["polygon"]
    points: list[Point] = Field(..., min_length=3)
    fill: Optional[HexColor] = None
    outline: Optional[HexColor] = None


class PixelsStep(_Step):
    """Individual pixels as ``(x, y)`` pairs."""

    op: Literal["pixels"]
    points: list[Point] = Field(..., min_length=1)
    color: HexColor


class StepGroup(_Step):
    op: Literal["group"]
    steps: list["CanvasStep"] = Field(default_factory=list)


CanvasStep = Annotated[
    RectStep | CircleStep | LineStep | PolygonStep | PixelsStep | StepGroup,
    Field(discriminator="op"),
]

StepGroup.model_rebuild()


class CanvasSpec(BaseModel):
    """Native canvas size and background fill."""

    model_config = ConfigDict(extra="forbid")

    w: int = Field(..., ge=1)
    h: int = Field(..., ge=1)
    bg: HexColor = "#202020"


class CanvasDocument(BaseModel):
    model_config = ConfigDict(extra="forbid")

    version: str = "1.0"
    canvas: CanvasSpec
    steps: list[CanvasStep] = Field(default_factory=list)


def ensure_canvas_document(data: dict) -> CanvasDocument:
    """Parse an arbitrary dict into a validated CanvasDocument."""

    try:
        return CanvasDocument.model_validate(data)
    except ValidationError as exc:
        raise ValueError("Invalid canvas document") from exc


def load_canvas_document(path: Path | str) -> CanvasDocument:
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Canvas document '{path}' is not valid JSON") from exc
    return ensure_canvas_document(data)
