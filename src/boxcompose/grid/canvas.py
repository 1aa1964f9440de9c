"""Canvas: in-memory cell grid for drawing and rendering to text."""

from __future__ import annotations

from boxcompose.errors import OutOfBounds
from boxcompose.types import Attribute, ComplexGlyph, Origin, Size

BLANK = ComplexGlyph()


class Canvas:
    """A 2D grid of cells onto which boxes and lines are drawn.

    Coordinates are ``(y, x)`` with the origin at the top left. Every write
    marks its cell dirty until :meth:`clear_dirty` is called.
    """

    def __init__(self, width: int, height: int, background: ComplexGlyph = BLANK) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"canvas must be at least 1x1, got {width}x{height}")
        self.width = width
        self.height = height
        self.cells: list[list[ComplexGlyph]] = [[background] * width for _ in range(height)]
        self.dirty: set[Origin] = set()

    def __repr__(self) -> str:
        return f"Canvas(width={self.width}, height={self.height})"

    def contains(self, origin: Origin) -> bool:
        y, x = origin
        return 0 <= y < self.height and 0 <= x < self.width

    def _check(self, origin: Origin) -> None:
        if not self.contains(origin):
            raise OutOfBounds(f"origin {tuple(origin)} outside {self.height}x{self.width} grid")

    # ─── Grid protocol ───────────────────────────────────────────────────

    def grid_bounds(self) -> Size:
        return Size(self.height, self.width)

    def read_cell(self, origin: Origin) -> ComplexGlyph:
        self._check(origin)
        y, x = origin
        return self.cells[y][x]

    def write_cell(self, origin: Origin, cell: ComplexGlyph) -> None:
        self._check(origin)
        y, x = origin
        self.cells[y][x] = cell
        self.dirty.add(Origin(y, x))

    # ─── Conveniences ────────────────────────────────────────────────────

    def get(self, y: int, x: int) -> str:
        """Glyph at (y, x), or a space outside the canvas."""
        if self.contains(Origin(y, x)):
            return self.cells[y][x].glyph
        return " "

    def set(self, y: int, x: int, glyph: str, attrs: Attribute = Attribute.NORMAL, color_pair: int = 0) -> None:
        """Write a glyph with explicit attributes; ignored outside the canvas."""
        if self.contains(Origin(y, x)):
            self.write_cell(Origin(y, x), ComplexGlyph(glyph, attrs, color_pair))

    def put_str(self, y: int, x: int, text: str, attrs: Attribute = Attribute.NORMAL, color_pair: int = 0) -> None:
        """Write *text* rightwards from (y, x), clipped at the right edge."""
        for i, ch in enumerate(text):
            col = x + i
            if col >= self.width or y >= self.height:
                break
            self.set(y, col, ch, attrs, color_pair)

    def fill(self, glyph: str = " ", attrs: Attribute = Attribute.NORMAL, color_pair: int = 0) -> None:
        """Overwrite every cell."""
        cell = ComplexGlyph(glyph, attrs, color_pair)
        for y in range(self.height):
            for x in range(self.width):
                self.write_cell(Origin(y, x), cell)

    def clear_dirty(self) -> None:
        self.dirty.clear()

    def row(self, y: int) -> str:
        return "".join(cell.glyph for cell in self.cells[y])

    def to_string(self) -> str:
        """Render the glyphs, trimming trailing blanks and trailing empty lines."""
        lines = [self.row(y).rstrip() for y in range(self.height)]
        out = "\n".join(lines)
        trimmed = out.rstrip("\n")
        return trimmed + "\n"
