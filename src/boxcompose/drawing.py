"""Line and box drawing that merges with the box-drawing glyphs already on a grid.

Every cell goes through the same round trip: read the cell, classify its
glyph under the drawing style, compose it with the kind being drawn, apply
the position override, then write the resulting glyph back with the cell's
original attributes and colour pair.

Nothing here is transactional. If a box fails half way the cells already
written stay written; callers needing atomicity snapshot the region first.
"""

from __future__ import annotations

import logging

from boxcompose.errors import InvalidBoxGeometry, OutOfBounds
from boxcompose.graphics.compose import compose
from boxcompose.graphics.position import resolve_for_position
from boxcompose.graphics.style import DrawingStyle, Light
from boxcompose.graphics.tables import classify, style_glyph
from boxcompose.grid.base import Grid
from boxcompose.types import Axis, ComplexGlyph, GraphicKind, HorizontalGraphic, Origin, Size, VerticalGraphic

log = logging.getLogger(__name__)

# ─── Cell transform ──────────────────────────────────────────────────────────


def transform_cell(
    current: ComplexGlyph,
    style: DrawingStyle,
    incoming: GraphicKind,
    origin: Origin,
    bounds: Size,
    axis: Axis | None,
    remap_directional: bool = True,
) -> ComplexGlyph:
    """Return what *current* becomes when *incoming* is drawn over it.

    *origin* is relative to *bounds*, the region whose corners are pinned
    when *axis* is None. Text that is not a glyph of *style* is replaced
    outright. The attributes and colour pair of *current* are kept.
    """
    existing = classify(style, current.glyph)
    if existing is None:
        kind = incoming
    elif current.glyph == style_glyph(style, incoming):
        # Redrawing the same glyph leaves the cell alone; only the LeftDash and
        # RightDash styles, which reuse glyphs across kinds, would compose otherwise.
        return current
    else:
        kind = compose(existing, incoming, remap_directional)
    kind = resolve_for_position(kind, origin, bounds, axis)
    return current.with_glyph(style_glyph(style, kind))


def _put(grid: Grid, origin: Origin, current: ComplexGlyph, new: ComplexGlyph) -> bool:
    """Write *new* only if it differs from what is there."""
    if new == current:
        log.debug("Cell %s unchanged, skipping write", tuple(origin))
        return False
    grid.write_cell(origin, new)
    return True


def _check_origin(origin: Origin, bounds: Size, what: str) -> None:
    if not (0 <= origin.y < bounds.rows and 0 <= origin.x < bounds.columns):
        raise OutOfBounds(f"{what}: origin {tuple(origin)} outside {bounds.rows}x{bounds.columns} grid")


def _check_length(length: int, what: str) -> None:
    if length < 1:
        raise OutOfBounds(f"{what}: length must be positive, got {length}")


# ─── Lines ───────────────────────────────────────────────────────────────────


def draw_horizontal_line(
    grid: Grid,
    style: DrawingStyle,
    graphic: HorizontalGraphic,
    origin: Origin | tuple[int, int],
    length: int,
) -> int:
    """Draw a horizontal line of *length* cells rightwards from *origin*.

    A line running past the right edge stops at the last column.

    Returns:
        The number of cells covered.

    Raises:
        OutOfBounds: If *origin* is outside the grid or *length* is not positive.
    """
    origin = Origin(*origin)
    bounds = grid.grid_bounds()
    _check_origin(origin, bounds, "draw_horizontal_line")
    _check_length(length, "draw_horizontal_line")

    count = min(length, bounds.columns - origin.x)
    if count < length:
        log.debug("Horizontal line at %s clamped from %d to %d cells", tuple(origin), length, count)

    incoming = graphic.kind()
    run = [Origin(origin.y, origin.x + i) for i in range(count)]
    cells = [grid.read_cell(o) for o in run]
    for cell_origin, current in zip(run, cells):
        new = transform_cell(current, style, incoming, cell_origin, bounds, Axis.Horizontal)
        _put(grid, cell_origin, current, new)
    return count


def draw_vertical_line(
    grid: Grid,
    style: DrawingStyle,
    graphic: VerticalGraphic,
    origin: Origin | tuple[int, int],
    length: int,
) -> int:
    """Draw a vertical line of *length* cells downwards from *origin*.

    A line running past the bottom edge stops at the last row.

    Returns:
        The number of cells covered.

    Raises:
        OutOfBounds: If *origin* is outside the grid or *length* is not positive.
    """
    origin = Origin(*origin)
    bounds = grid.grid_bounds()
    _check_origin(origin, bounds, "draw_vertical_line")
    _check_length(length, "draw_vertical_line")

    count = min(length, bounds.rows - origin.y)
    if count < length:
        log.debug("Vertical line at %s clamped from %d to %d cells", tuple(origin), length, count)

    incoming = graphic.kind()
    run = [Origin(origin.y + i, origin.x) for i in range(count)]
    cells = [grid.read_cell(o) for o in run]
    for cell_origin, current in zip(run, cells):
        new = transform_cell(current, style, incoming, cell_origin, bounds, Axis.Vertical)
        _put(grid, cell_origin, current, new)
    return count


# ─── Boxes ───────────────────────────────────────────────────────────────────


def _check_box(origin: Origin, size: Size, bounds: Size) -> None:
    if size.rows < 2 or size.columns < 2:
        raise InvalidBoxGeometry(f"box must be at least 2x2, got {size.rows}x{size.columns}")
    if origin.y < 0 or origin.x < 0:
        raise InvalidBoxGeometry(f"box origin {tuple(origin)} is outside the grid")
    if origin.y + size.rows > bounds.rows or origin.x + size.columns > bounds.columns:
        raise InvalidBoxGeometry(
            f"box {size.rows}x{size.columns} at {tuple(origin)} does not fit {bounds.rows}x{bounds.columns} grid"
        )


def draw_box(
    grid: Grid,
    style: DrawingStyle,
    origin: Origin | tuple[int, int],
    size: Size | tuple[int, int],
) -> None:
    """Draw a box of *size* with its upper left corner at *origin*.

    Corners are stamped first and always render as corners. The edges are
    then drawn as pinned lines (upper, lower, left, right) between them, so
    they merge with any lines or boxes already crossing them.

    Raises:
        InvalidBoxGeometry: If the box is smaller than 2x2 or does not fit.
            Nothing is written in that case.
    """
    origin = Origin(*origin)
    size = Size(*size)
    _check_box(origin, size, grid.grid_bounds())

    top = origin.y
    left = origin.x
    bottom = origin.y + size.rows - 1
    right = origin.x + size.columns - 1

    corners = (
        (Origin(top, left), GraphicKind.UpperLeftCorner),
        (Origin(top, right), GraphicKind.UpperRightCorner),
        (Origin(bottom, left), GraphicKind.LowerLeftCorner),
        (Origin(bottom, right), GraphicKind.LowerRightCorner),
    )
    for corner_origin, kind in corners:
        current = grid.read_cell(corner_origin)
        relative = Origin(corner_origin.y - top, corner_origin.x - left)
        new = transform_cell(current, style, kind, relative, size, None, remap_directional=False)
        _put(grid, corner_origin, current, new)

    if size.columns > 2:
        draw_horizontal_line(grid, style, HorizontalGraphic.Upper, Origin(top, left + 1), size.columns - 2)
        draw_horizontal_line(grid, style, HorizontalGraphic.Lower, Origin(bottom, left + 1), size.columns - 2)

    if size.rows > 2:
        draw_vertical_line(grid, style, VerticalGraphic.Left, Origin(top + 1, left), size.rows - 2)
        draw_vertical_line(grid, style, VerticalGraphic.Right, Origin(top + 1, right), size.rows - 2)


def draw_border(
    grid: Grid,
    left: ComplexGlyph,
    right: ComplexGlyph,
    top: ComplexGlyph,
    bottom: ComplexGlyph,
    upper_left: ComplexGlyph,
    upper_right: ComplexGlyph,
    lower_left: ComplexGlyph,
    lower_right: ComplexGlyph,
) -> None:
    """Draw a border round the whole grid from eight explicit glyphs.

    No composition takes place: whatever was on the edge is overwritten.
    """
    bounds = grid.grid_bounds()
    if bounds.rows < 2 or bounds.columns < 2:
        raise InvalidBoxGeometry(f"border needs a grid of at least 2x2, got {bounds.rows}x{bounds.columns}")
    last_row = bounds.rows - 1
    last_col = bounds.columns - 1

    for x in range(1, last_col):
        grid.write_cell(Origin(0, x), top)
        grid.write_cell(Origin(last_row, x), bottom)
    for y in range(1, last_row):
        grid.write_cell(Origin(y, 0), left)
        grid.write_cell(Origin(y, last_col), right)

    grid.write_cell(Origin(0, 0), upper_left)
    grid.write_cell(Origin(0, last_col), upper_right)
    grid.write_cell(Origin(last_row, 0), lower_left)
    grid.write_cell(Origin(last_row, last_col), lower_right)


def draw_box_outline(
    grid: Grid,
    vertical: ComplexGlyph,
    horizontal: ComplexGlyph,
    style: DrawingStyle | None = None,
) -> None:
    """Border the grid with *vertical* and *horizontal* sides.

    Corners come from *style* (light lines by default) and carry the
    attributes of *horizontal*.
    """
    style = style if style is not None else Light()

    def corner(kind: GraphicKind) -> ComplexGlyph:
        return horizontal.with_glyph(style_glyph(style, kind))

    draw_border(
        grid,
        vertical,
        vertical,
        horizontal,
        horizontal,
        corner(GraphicKind.UpperLeftCorner),
        corner(GraphicKind.UpperRightCorner),
        corner(GraphicKind.LowerLeftCorner),
        corner(GraphicKind.LowerRightCorner),
    )
