"""Exceptions raised by boxcompose.

Each error also derives from the builtin it refines so callers that only
know about ``ValueError`` / ``IndexError`` keep working.
"""

from __future__ import annotations


class BoxDrawingError(Exception):
    """Base class for every boxcompose error."""


class InvalidMask(BoxDrawingError, ValueError):
    """A bit pattern that names no graphic kind."""

    def __init__(self, mask: int) -> None:
        super().__init__(f"no graphic kind has mask {mask:#011b}")
        self.mask = mask


class OutOfBounds(BoxDrawingError, IndexError):
    """A coordinate or length outside the grid."""


class InvalidBoxGeometry(BoxDrawingError, ValueError):
    """A box smaller than 2x2 or one that does not fit the grid."""


class GridWriteError(BoxDrawingError):
    """The grid refused a write."""
