"""Shared type definitions for boxcompose.

Enums and small value types used across the graphics tables, the
composition algebra, the grid and the drawer.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, Flag, auto
from typing import NamedTuple


class GraphicKind(Enum):
    UpperLeftCorner = auto()  # ┌
    LowerLeftCorner = auto()  # └
    UpperRightCorner = auto()  # ┐
    LowerRightCorner = auto()  # ┘
    RightTee = auto()  # ┤
    LeftTee = auto()  # ├
    LowerTee = auto()  # ┴
    UpperTee = auto()  # ┬
    HorizontalLine = auto()  # ─
    UpperHorizontalLine = auto()  # ─ pinned to the top edge of a box
    LowerHorizontalLine = auto()  # ─ pinned to the bottom edge of a box
    VerticalLine = auto()  # │
    LeftVerticalLine = auto()  # │ pinned to the left edge of a box
    RightVerticalLine = auto()  # │ pinned to the right edge of a box
    Cross = auto()  # ┼

    def is_directional(self) -> bool:
        """True for the edge-pinned pseudo-kinds."""
        return self in _DIRECTIONAL


_DIRECTIONAL = frozenset(
    {
        GraphicKind.UpperHorizontalLine,
        GraphicKind.LowerHorizontalLine,
        GraphicKind.LeftVerticalLine,
        GraphicKind.RightVerticalLine,
    }
)


class BoxDrawingDetail(Enum):
    Normal = auto()
    LeftDash = auto()  # ╴ half lines
    RightDash = auto()  # ╶
    DoubleDash = auto()  # ╌
    TripleDash = auto()  # ┄
    QuadrupleDash = auto()  # ┈

    @classmethod
    def default(cls) -> BoxDrawingDetail:
        return cls.Normal


class HorizontalGraphic(Enum):
    Upper = auto()
    Center = auto()
    Lower = auto()

    def kind(self) -> GraphicKind:
        return {
            HorizontalGraphic.Upper: GraphicKind.UpperHorizontalLine,
            HorizontalGraphic.Center: GraphicKind.HorizontalLine,
            HorizontalGraphic.Lower: GraphicKind.LowerHorizontalLine,
        }[self]


class VerticalGraphic(Enum):
    Left = auto()
    Center = auto()
    Right = auto()

    def kind(self) -> GraphicKind:
        return {
            VerticalGraphic.Left: GraphicKind.LeftVerticalLine,
            VerticalGraphic.Center: GraphicKind.VerticalLine,
            VerticalGraphic.Right: GraphicKind.RightVerticalLine,
        }[self]


class Axis(Enum):
    """Direction of travel while drawing a straight line."""

    Horizontal = auto()
    Vertical = auto()


class Origin(NamedTuple):
    """A cell coordinate, row first."""

    y: int
    x: int


class Size(NamedTuple):
    rows: int
    columns: int


class Attribute(Flag):
    """Video attributes carried by a cell."""

    NORMAL = 0
    STANDOUT = auto()
    UNDERLINE = auto()
    REVERSE = auto()
    BLINK = auto()
    DIM = auto()
    BOLD = auto()
    ITALIC = auto()


@dataclass(frozen=True)
class ComplexGlyph:
    """A glyph together with the attributes and colour pair it is drawn with."""

    glyph: str = " "
    attrs: Attribute = field(default=Attribute.NORMAL)
    color_pair: int = 0

    def __post_init__(self) -> None:
        if len(self.glyph) != 1:
            raise ValueError(f"glyph must be a single character, got {self.glyph!r}")

    @property
    def code_point(self) -> int:
        return ord(self.glyph)

    def with_glyph(self, glyph: str) -> ComplexGlyph:
        """Return a copy showing *glyph* with this cell's attributes and colour."""
        return replace(self, glyph=glyph)


# A grid cell is the same triple the drawer writes.
Cell = ComplexGlyph
