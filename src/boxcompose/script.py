"""Drawing scripts: a line-oriented command language for boxes and lines.

One command per line, ``#`` starts a comment:

    style heavy
    box 0 0 5 20              # box Y X ROWS COLS
    hline 2 0 20 center       # hline Y X LENGTH [upper|center|lower]
    vline 0 10 5              # vline Y X LENGTH [left|center|right]
    text 1 2 "hello"          # text Y X STRING

Coordinates are row first, like everywhere else in boxcompose.
"""

from __future__ import annotations

import logging
import re
import shlex
from dataclasses import dataclass

from boxcompose.config import DrawConfig, parse_style
from boxcompose.drawing import draw_box, draw_horizontal_line, draw_vertical_line
from boxcompose.graphics.style import DrawingStyle
from boxcompose.grid.canvas import Canvas
from boxcompose.types import HorizontalGraphic, Origin, Size, VerticalGraphic

log = logging.getLogger(__name__)

_INT_RE = re.compile(r"-?\d+")

_HORIZONTAL: dict[str, HorizontalGraphic] = {g.name.lower(): g for g in HorizontalGraphic}
_VERTICAL: dict[str, VerticalGraphic] = {g.name.lower(): g for g in VerticalGraphic}


@dataclass
class BoxCommand:
    origin: Origin
    size: Size


@dataclass
class HLineCommand:
    origin: Origin
    length: int
    graphic: HorizontalGraphic = HorizontalGraphic.Center


@dataclass
class VLineCommand:
    origin: Origin
    length: int
    graphic: VerticalGraphic = VerticalGraphic.Center


@dataclass
class TextCommand:
    origin: Origin
    text: str


@dataclass
class StyleCommand:
    style: DrawingStyle


Command = BoxCommand | HLineCommand | VLineCommand | TextCommand | StyleCommand


# ─── Parsing ─────────────────────────────────────────────────────────────────


def _ints(args: list[str], count: int, lineno: int, usage: str) -> list[int]:
    if len(args) < count:
        raise ValueError(f"line {lineno}: expected {usage}")
    values = []
    for arg in args[:count]:
        if not _INT_RE.fullmatch(arg):
            raise ValueError(f"line {lineno}: {arg!r} is not an integer")
        values.append(int(arg))
    return values


def _choice(
    table: dict[str, HorizontalGraphic] | dict[str, VerticalGraphic], word: str, lineno: int
) -> HorizontalGraphic | VerticalGraphic:
    try:
        return table[word.lower()]
    except KeyError:
        options = ", ".join(table)
        raise ValueError(f"line {lineno}: unknown line position {word!r}; use {options}") from None


def _parse_line(words: list[str], lineno: int) -> Command:
    name, args = words[0].lower(), words[1:]

    if name == "box":
        y, x, rows, cols = _ints(args, 4, lineno, "box Y X ROWS COLS")
        if len(args) > 4:
            raise ValueError(f"line {lineno}: too many arguments to box")
        return BoxCommand(Origin(y, x), Size(rows, cols))

    if name == "hline":
        y, x, length = _ints(args, 3, lineno, "hline Y X LENGTH [upper|center|lower]")
        if len(args) > 4:
            raise ValueError(f"line {lineno}: too many arguments to hline")
        graphic = _choice(_HORIZONTAL, args[3], lineno) if len(args) == 4 else HorizontalGraphic.Center
        return HLineCommand(Origin(y, x), length, graphic)

    if name == "vline":
        y, x, length = _ints(args, 3, lineno, "vline Y X LENGTH [left|center|right]")
        if len(args) > 4:
            raise ValueError(f"line {lineno}: too many arguments to vline")
        graphic = _choice(_VERTICAL, args[3], lineno) if len(args) == 4 else VerticalGraphic.Center
        return VLineCommand(Origin(y, x), length, graphic)

    if name == "text":
        y, x = _ints(args, 2, lineno, "text Y X STRING")
        if len(args) != 3:
            raise ValueError(f"line {lineno}: text takes exactly one (quoted) string")
        return TextCommand(Origin(y, x), args[2])

    if name == "style":
        if len(args) != 1:
            raise ValueError(f"line {lineno}: expected style NAME")
        try:
            return StyleCommand(parse_style(args[0]))
        except ValueError as e:
            raise ValueError(f"line {lineno}: {e}") from None

    raise ValueError(f"line {lineno}: unknown command {words[0]!r}")


def parse_script(src: str) -> list[Command]:
    """Parse a drawing script into commands.

    Raises:
        ValueError: On the first malformed line, naming its line number.
    """
    commands: list[Command] = []
    for lineno, raw in enumerate(src.splitlines(), start=1):
        try:
            words = shlex.split(raw, comments=True)
        except ValueError as e:
            raise ValueError(f"line {lineno}: {e}") from None
        if not words:
            continue
        commands.append(_parse_line(words, lineno))
    return commands


# ─── Execution ───────────────────────────────────────────────────────────────


def run_script(commands: list[Command], canvas: Canvas, style: DrawingStyle) -> Canvas:
    """Draw *commands* onto *canvas*, starting in *style*."""
    for command in commands:
        match command:
            case StyleCommand(style=new_style):
                style = new_style
            case BoxCommand(origin=origin, size=size):
                draw_box(canvas, style, origin, size)
            case HLineCommand(origin=origin, length=length, graphic=graphic):
                draw_horizontal_line(canvas, style, graphic, origin, length)
            case VLineCommand(origin=origin, length=length, graphic=graphic):
                draw_vertical_line(canvas, style, graphic, origin, length)
            case TextCommand(origin=origin, text=text):
                canvas.put_str(origin.y, origin.x, text)
        log.debug("Ran %s", command)
    return canvas


def render_script(src: str, config: DrawConfig | None = None) -> str:
    """Parse and draw a script on a fresh canvas, returning the rendered text.

    Raises:
        ValueError: If the script cannot be parsed.
        BoxDrawingError: If a command does not fit the canvas.
    """
    config = config or DrawConfig()
    canvas = Canvas(config.width, config.height)
    if config.fill != " ":
        canvas.fill(config.fill)
    run_script(parse_script(src), canvas, config.style)
    return canvas.to_string()
