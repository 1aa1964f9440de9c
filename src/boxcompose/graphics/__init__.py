"""Box-drawing graphics: kinds, masks, composition, styles and glyph tables."""

from __future__ import annotations

from boxcompose.graphics.compose import canonical, compose
from boxcompose.graphics.kind import KIND_TO_MASK, MASK_TO_KIND, from_mask, render_mask, to_mask
from boxcompose.graphics.position import corner_kind, resolve_for_position
from boxcompose.graphics.style import ALL_STYLES, Ascii, BoxDrawing, Custom, Double, DrawingStyle, Heavy, Light
from boxcompose.graphics.tables import (
    ACS_GLYPHS,
    GLYPH_TABLES,
    chtype_glyph,
    classify,
    complex_glyph,
    glyph_table,
    style_glyph,
    wide_glyph,
)

__all__ = [
    "ACS_GLYPHS",
    "ALL_STYLES",
    "GLYPH_TABLES",
    "KIND_TO_MASK",
    "MASK_TO_KIND",
    "Ascii",
    "BoxDrawing",
    "Custom",
    "Double",
    "DrawingStyle",
    "Heavy",
    "Light",
    "canonical",
    "chtype_glyph",
    "classify",
    "complex_glyph",
    "compose",
    "corner_kind",
    "from_mask",
    "glyph_table",
    "render_mask",
    "resolve_for_position",
    "style_glyph",
    "to_mask",
    "wide_glyph",
]
