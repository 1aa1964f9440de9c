"""The cell grid the drawer reads from and writes to."""

from __future__ import annotations

from typing import Protocol

from boxcompose.types import ComplexGlyph, Origin, Size


class Grid(Protocol):
    """Protocol that every drawing target must implement.

    The drawer does a read, compose, write round trip per cell and takes no
    locks; an implementation shared between threads must serialise access.
    """

    def read_cell(self, origin: Origin) -> ComplexGlyph:
        """Return the glyph and attributes at *origin*; raise OutOfBounds outside the grid."""
        ...

    def write_cell(self, origin: Origin, cell: ComplexGlyph) -> None:
        """Store *cell* at *origin*; raise GridWriteError if the write fails."""
        ...

    def grid_bounds(self) -> Size:
        """Return the grid size."""
        ...
