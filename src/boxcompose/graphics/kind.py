"""Bitmask encoding of the box-drawing graphic kinds.

Each kind is drawn on a 3x3 matrix of its cell; the matrix is packed into 9
bits, top row first, west bit leftmost. OR-ing two masks gives the shape of
the two glyphs drawn over each other:

    ┌ : 000 011 010
    ─ : 000 111 000
        -----------
    ┬ : 000 111 010

The upper/lower horizontal and left/right vertical lines use pseudo masks
along the cell edge so they stay distinct from the plain lines.
"""

from __future__ import annotations

from types import MappingProxyType

from boxcompose.errors import InvalidMask
from boxcompose.types import GraphicKind

MASK_BITS = 9

_KIND_MASKS: tuple[tuple[GraphicKind, int], ...] = (
    (GraphicKind.UpperLeftCorner, 0b000_011_010),
    (GraphicKind.LowerLeftCorner, 0b010_011_000),
    (GraphicKind.UpperRightCorner, 0b000_110_010),
    (GraphicKind.LowerRightCorner, 0b010_110_000),
    (GraphicKind.RightTee, 0b010_110_010),
    (GraphicKind.LeftTee, 0b010_011_010),
    (GraphicKind.LowerTee, 0b010_111_000),
    (GraphicKind.UpperTee, 0b000_111_010),
    (GraphicKind.HorizontalLine, 0b000_111_000),
    (GraphicKind.UpperHorizontalLine, 0b111_000_000),
    (GraphicKind.LowerHorizontalLine, 0b000_000_111),
    (GraphicKind.VerticalLine, 0b010_010_010),
    (GraphicKind.LeftVerticalLine, 0b100_100_100),
    (GraphicKind.RightVerticalLine, 0b001_001_001),
    (GraphicKind.Cross, 0b010_111_010),
)

KIND_TO_MASK: MappingProxyType[GraphicKind, int] = MappingProxyType(dict(_KIND_MASKS))
MASK_TO_KIND: MappingProxyType[int, GraphicKind] = MappingProxyType({m: k for k, m in _KIND_MASKS})

assert len(KIND_TO_MASK) == len(MASK_TO_KIND) == len(GraphicKind)


def to_mask(kind: GraphicKind) -> int:
    return KIND_TO_MASK[kind]


def from_mask(mask: int) -> GraphicKind:
    """Return the kind drawn by *mask*.

    Raises:
        InvalidMask: If no kind has that exact pattern.
    """
    try:
        return MASK_TO_KIND[mask]
    except KeyError:
        raise InvalidMask(mask) from None


def render_mask(mask: int) -> str:
    """Draw a mask as three rows of ``#`` and ``.``; handy in test failures."""
    bits = f"{mask:0{MASK_BITS}b}"
    return "\n".join(bits[i : i + 3].replace("1", "#").replace("0", ".") for i in range(0, MASK_BITS, 3))
