"""boxcompose: box-drawing lines and boxes that merge with what is already drawn."""

from boxcompose.config import DrawConfig, parse_style, style_names
from boxcompose.drawing import (
    draw_border,
    draw_box,
    draw_box_outline,
    draw_horizontal_line,
    draw_vertical_line,
    transform_cell,
)
from boxcompose.errors import BoxDrawingError, GridWriteError, InvalidBoxGeometry, InvalidMask, OutOfBounds
from boxcompose.graphics import (
    ALL_STYLES,
    Ascii,
    BoxDrawing,
    Custom,
    Double,
    DrawingStyle,
    Heavy,
    Light,
    chtype_glyph,
    classify,
    complex_glyph,
    compose,
    from_mask,
    resolve_for_position,
    style_glyph,
    to_mask,
    wide_glyph,
)
from boxcompose.grid import Canvas, Grid
from boxcompose.script import parse_script, render_script, run_script
from boxcompose.types import (
    Attribute,
    Axis,
    BoxDrawingDetail,
    Cell,
    ComplexGlyph,
    GraphicKind,
    HorizontalGraphic,
    Origin,
    Size,
    VerticalGraphic,
)

__all__ = [
    "ALL_STYLES",
    "Ascii",
    "Attribute",
    "Axis",
    "BoxDrawing",
    "BoxDrawingDetail",
    "BoxDrawingError",
    "Canvas",
    "Cell",
    "ComplexGlyph",
    "Custom",
    "Double",
    "DrawConfig",
    "DrawingStyle",
    "GraphicKind",
    "Grid",
    "GridWriteError",
    "Heavy",
    "HorizontalGraphic",
    "InvalidBoxGeometry",
    "InvalidMask",
    "Light",
    "Origin",
    "OutOfBounds",
    "Size",
    "VerticalGraphic",
    "chtype_glyph",
    "classify",
    "complex_glyph",
    "compose",
    "draw_border",
    "draw_box",
    "draw_box_outline",
    "draw_horizontal_line",
    "draw_vertical_line",
    "from_mask",
    "parse_script",
    "parse_style",
    "render_script",
    "resolve_for_position",
    "run_script",
    "style_glyph",
    "style_names",
    "to_mask",
    "transform_cell",
    "wide_glyph",
]
