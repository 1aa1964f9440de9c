"""Junction merging: combine the kind already in a cell with the kind being drawn."""

from __future__ import annotations

import logging

from boxcompose.errors import InvalidMask
from boxcompose.graphics.kind import from_mask, to_mask
from boxcompose.types import GraphicKind

log = logging.getLogger(__name__)

_CANONICAL: dict[GraphicKind, GraphicKind] = {
    GraphicKind.UpperHorizontalLine: GraphicKind.HorizontalLine,
    GraphicKind.LowerHorizontalLine: GraphicKind.HorizontalLine,
    GraphicKind.LeftVerticalLine: GraphicKind.VerticalLine,
    GraphicKind.RightVerticalLine: GraphicKind.VerticalLine,
}


def canonical(kind: GraphicKind) -> GraphicKind:
    """Map an edge-pinned line onto the plain line of the same direction."""
    return _CANONICAL.get(kind, kind)


def compose(existing: GraphicKind, incoming: GraphicKind, remap_directional: bool) -> GraphicKind:
    """Merge *incoming* into a cell that already shows *existing*.

    Args:
        existing: Kind of the glyph already in the cell.
        incoming: Kind being drawn.
        remap_directional: Treat upper/lower/left/right lines as plain lines
            before merging. Used for straight lines; box corners pass False.

    Returns:
        The kind whose mask is the union of both masks. When that union is
        not a defined kind the drawing still goes ahead with *incoming*.
    """
    # A kind over itself stays itself, pinned lines included.
    if existing is incoming:
        return incoming
    # Cross absorbs everything, pinned lines included.
    if GraphicKind.Cross in (existing, incoming):
        return GraphicKind.Cross
    if remap_directional:
        existing_mask = to_mask(canonical(existing))
        incoming_mask = to_mask(canonical(incoming))
    else:
        existing_mask = to_mask(existing)
        incoming_mask = to_mask(incoming)

    merged = existing_mask | incoming_mask
    try:
        return from_mask(merged)
    except InvalidMask:
        log.debug(
            "No kind for %s over %s (mask %s, remap=%s); keeping %s",
            incoming.name,
            existing.name,
            f"{merged:#011b}",
            remap_directional,
            incoming.name,
        )
        return incoming
