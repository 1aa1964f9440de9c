"""Cell grids: the drawing target protocol and the in-memory canvas."""

from __future__ import annotations

from boxcompose.grid.base import Grid
from boxcompose.grid.canvas import BLANK, Canvas

__all__ = ["BLANK", "Canvas", "Grid"]
