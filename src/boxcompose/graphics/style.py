"""Drawing styles: which palette of glyphs a graphic kind is drawn with."""

from __future__ import annotations

from dataclasses import dataclass, field, fields

from boxcompose.types import BoxDrawingDetail, GraphicKind


@dataclass(frozen=True)
class BoxDrawing:
    """A caller-supplied glyph for every graphic kind.

    Field order follows :class:`GraphicKind`; when two fields hold the same
    glyph the earlier field wins on reverse lookup.
    """

    upper_left_corner: str
    lower_left_corner: str
    upper_right_corner: str
    lower_right_corner: str
    right_tee: str
    left_tee: str
    lower_tee: str
    upper_tee: str
    horizontal_line: str
    upper_horizontal_line: str
    lower_horizontal_line: str
    vertical_line: str
    left_vertical_line: str
    right_vertical_line: str
    cross: str

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, str) or len(value) != 1:
                raise ValueError(f"{f.name} must be a single character, got {value!r}")

    def glyph(self, kind: GraphicKind) -> str:
        return getattr(self, _FIELD_FOR_KIND[kind])

    def items(self) -> list[tuple[GraphicKind, str]]:
        """(kind, glyph) pairs in declaration order."""
        return [(kind, self.glyph(kind)) for kind in GraphicKind]

    @classmethod
    def from_mapping(cls, glyphs: dict[GraphicKind, str]) -> BoxDrawing:
        missing = [k.name for k in GraphicKind if k not in glyphs]
        if missing:
            raise ValueError(f"custom glyph set is missing: {', '.join(missing)}")
        return cls(**{_FIELD_FOR_KIND[k]: glyphs[k] for k in GraphicKind})


_FIELD_FOR_KIND: dict[GraphicKind, str] = {
    kind: f.name for kind, f in zip(GraphicKind, fields(BoxDrawing), strict=True)
}


@dataclass(frozen=True)
class Ascii:
    def __str__(self) -> str:
        return "ascii"


@dataclass(frozen=True)
class Light:
    detail: BoxDrawingDetail = field(default_factory=BoxDrawingDetail.default)

    def __str__(self) -> str:
        return f"light:{_detail_name(self.detail)}"


@dataclass(frozen=True)
class Heavy:
    detail: BoxDrawingDetail = field(default_factory=BoxDrawingDetail.default)

    def __str__(self) -> str:
        return f"heavy:{_detail_name(self.detail)}"


@dataclass(frozen=True)
class Double:
    def __str__(self) -> str:
        return "double"


@dataclass(frozen=True)
class Custom:
    glyphs: BoxDrawing

    def __str__(self) -> str:
        return "custom"


DrawingStyle = Ascii | Light | Heavy | Double | Custom


def _detail_name(detail: BoxDrawingDetail) -> str:
    """``DoubleDash`` -> ``double-dash``."""
    name = detail.name
    out = [name[0].lower()]
    for ch in name[1:]:
        if ch.isupper():
            out.append("-")
        out.append(ch.lower())
    return "".join(out)


ALL_STYLES: tuple[DrawingStyle, ...] = (
    Ascii(),
    *(Light(d) for d in BoxDrawingDetail),
    *(Heavy(d) for d in BoxDrawingDetail),
    Double(),
)
