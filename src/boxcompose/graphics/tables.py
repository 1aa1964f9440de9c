"""Glyph tables: the character each drawing style uses for each graphic kind."""

from __future__ import annotations

import sys
from collections.abc import Mapping
from types import MappingProxyType

from boxcompose.graphics.style import Ascii, BoxDrawing, Custom, Double, DrawingStyle, Heavy, Light
from boxcompose.types import Attribute, BoxDrawingDetail, ComplexGlyph, GraphicKind

# ─── Built-in tables ─────────────────────────────────────────────────────────
#
# One string per style, one character per kind in GraphicKind order:
#
#   corners  ┌ └ ┐ ┘   tees  ┤ ├ ┴ ┬   horizontal  ─ upper lower
#   vertical │ left right   cross ┼
#
# The left/right dash details draw half lines, so their "corners" and "tees"
# are the half-line stubs that survive on that side of the cell.

_ROWS: tuple[tuple[DrawingStyle, str], ...] = (
    (Ascii(), "++++++++---|||+"),
    (Light(BoxDrawingDetail.Normal), "┌└┐┘┤├┴┬───│││┼"),
    (Light(BoxDrawingDetail.LeftDash), "╷╶╴╵┘└└┐╴╴╶╷╷╵┘"),
    (Light(BoxDrawingDetail.RightDash), "╵╴╶╷┐└┘┌╶╶╴╵╵╷└"),
    (Light(BoxDrawingDetail.DoubleDash), "┌└┐┘┤├┴┬╌╌╌╎╎╎┼"),
    (Light(BoxDrawingDetail.TripleDash), "┌└┐┘┤├┴┬┄┄┄┆┆┆┼"),
    (Light(BoxDrawingDetail.QuadrupleDash), "┌└┐┘┤├┴┬┈┈┈┊┊┊┼"),
    (Heavy(BoxDrawingDetail.Normal), "┏┗┓┛┫┣┻┳━━━┃┃┃╋"),
    (Heavy(BoxDrawingDetail.LeftDash), "╻╺╸╹┛┗┗┓╸╸╺╻╻╹┛"),
    (Heavy(BoxDrawingDetail.RightDash), "╹╸╺╻┓┗┛┏╺╺╸╹╹╻┗"),
    (Heavy(BoxDrawingDetail.DoubleDash), "┏┗┓┛┫┣┻┳╍╍╍╏╏╏╋"),
    (Heavy(BoxDrawingDetail.TripleDash), "┏┗┓┛┫┣┻┳┅┅┅┇┇┇╋"),
    (Heavy(BoxDrawingDetail.QuadrupleDash), "┏┗┓┛┫┣┻┳┉┉┉┋┋┋╋"),
    (Double(), "╔╚╗╝╣╠╩╦═══║║║╬"),
)


def _build_table(glyphs: str) -> Mapping[GraphicKind, str]:
    return MappingProxyType(dict(zip(GraphicKind, glyphs, strict=True)))


def _build_reverse(table: Mapping[GraphicKind, str]) -> Mapping[str, GraphicKind]:
    reverse: dict[str, GraphicKind] = {}
    for kind, glyph in table.items():
        reverse.setdefault(glyph, kind)
    return MappingProxyType(reverse)


GLYPH_TABLES: Mapping[DrawingStyle, Mapping[GraphicKind, str]] = MappingProxyType(
    {style: _build_table(glyphs) for style, glyphs in _ROWS}
)

_REVERSE_TABLES: Mapping[DrawingStyle, Mapping[str, GraphicKind]] = MappingProxyType(
    {style: _build_reverse(table) for style, table in GLYPH_TABLES.items()}
)

# VT100 alternate character set letters, as used by curses ACS_* constants.
ACS_GLYPHS: Mapping[GraphicKind, str] = MappingProxyType(
    {
        GraphicKind.UpperLeftCorner: "l",
        GraphicKind.LowerLeftCorner: "m",
        GraphicKind.UpperRightCorner: "k",
        GraphicKind.LowerRightCorner: "j",
        GraphicKind.RightTee: "u",
        GraphicKind.LeftTee: "t",
        GraphicKind.LowerTee: "v",
        GraphicKind.UpperTee: "w",
        GraphicKind.HorizontalLine: "q",
        GraphicKind.UpperHorizontalLine: "q",
        GraphicKind.LowerHorizontalLine: "q",
        GraphicKind.VerticalLine: "x",
        GraphicKind.LeftVerticalLine: "x",
        GraphicKind.RightVerticalLine: "x",
        GraphicKind.Cross: "n",
    }
)


# ─── Lookups ─────────────────────────────────────────────────────────────────


def glyph_table(style: DrawingStyle) -> Mapping[GraphicKind, str]:
    """Return the complete kind -> glyph mapping for *style*."""
    if isinstance(style, Custom):
        return MappingProxyType(dict(style.glyphs.items()))
    try:
        return GLYPH_TABLES[style]
    except KeyError:
        raise ValueError(f"Unknown drawing style {style!r}") from None


def style_glyph(style: DrawingStyle, kind: GraphicKind) -> str:
    """Return the glyph *style* draws *kind* with."""
    if isinstance(style, Custom):
        return style.glyphs.glyph(kind)
    return glyph_table(style)[kind]


# Legacy name for the wide-character lookup.
wide_glyph = style_glyph


def classify(style: DrawingStyle, glyph: str | int) -> GraphicKind | None:
    """Reverse lookup: which kind of *style* is *glyph*?

    *glyph* may be a character or a code point. Returns None for anything
    that is not a box-drawing glyph of *style*. When several kinds share the
    glyph, the first in GraphicKind order is returned.
    """
    if isinstance(glyph, int):
        if not 0 <= glyph <= sys.maxunicode:
            return None
        glyph = chr(glyph)
    if isinstance(style, Custom):
        return _classify_custom(style.glyphs, glyph)
    try:
        reverse = _REVERSE_TABLES[style]
    except KeyError:
        raise ValueError(f"Unknown drawing style {style!r}") from None
    return reverse.get(glyph)


def _classify_custom(glyphs: BoxDrawing, glyph: str) -> GraphicKind | None:
    for kind, candidate in glyphs.items():
        if candidate == glyph:
            return kind
    return None


def chtype_glyph(kind: GraphicKind) -> str:
    """Return the alternate character set letter for *kind*."""
    return ACS_GLYPHS[kind]


def complex_glyph(
    style: DrawingStyle,
    kind: GraphicKind,
    attrs: Attribute = Attribute.NORMAL,
    color_pair: int = 0,
) -> ComplexGlyph:
    """Return the glyph for *kind* in *style* carrying *attrs* and *color_pair*."""
    return ComplexGlyph(style_glyph(style, kind), attrs, color_pair)
