"""Position-aware override: the corner cells of a region always draw as corners."""

from __future__ import annotations

from boxcompose.types import Axis, GraphicKind, Origin, Size


def corner_kind(origin: Origin, bounds: Size) -> GraphicKind | None:
    """Return the corner kind for *origin* if it is a corner cell of *bounds*."""
    last_row = bounds.rows - 1
    last_col = bounds.columns - 1
    y, x = origin
    if y == 0 and x == 0:
        return GraphicKind.UpperLeftCorner
    if y == last_row and x == 0:
        return GraphicKind.LowerLeftCorner
    if y == 0 and x == last_col:
        return GraphicKind.UpperRightCorner
    if y == last_row and x == last_col:
        return GraphicKind.LowerRightCorner
    return None


def resolve_for_position(kind: GraphicKind, origin: Origin, bounds: Size, axis: Axis | None) -> GraphicKind:
    """Override a composed kind depending on where it lands.

    Straight lines (*axis* given) never turn into corners mid-segment. When
    stamping junctions (*axis* None) a cell on one of the four corners of
    *bounds* is forced to that corner, whatever composition produced.
    """
    if axis is not None:
        return kind
    corner = corner_kind(origin, bounds)
    return kind if corner is None else corner
