"""Tests for graphics/tables.py and graphics/style.py."""

import pytest

from boxcompose.graphics.style import ALL_STYLES, Ascii, BoxDrawing, Custom, Double, Heavy, Light
from boxcompose.graphics.tables import (
    chtype_glyph,
    classify,
    complex_glyph,
    glyph_table,
    style_glyph,
    wide_glyph,
)
from boxcompose.types import Attribute, BoxDrawingDetail, ComplexGlyph, GraphicKind

STYLE_IDS = [str(s) for s in ALL_STYLES]


def _owner(style, glyph):
    """First kind in declaration order that draws *glyph* in *style*."""
    return next(k for k in GraphicKind if style_glyph(style, k) == glyph)


class TestStyleGlyph:
    def test_light_normal(self):
        style = Light()
        assert style_glyph(style, GraphicKind.UpperLeftCorner) == "┌"
        assert style_glyph(style, GraphicKind.LowerRightCorner) == "┘"
        assert style_glyph(style, GraphicKind.UpperTee) == "┬"
        assert style_glyph(style, GraphicKind.HorizontalLine) == "─"
        assert style_glyph(style, GraphicKind.Cross) == "┼"

    def test_heavy_normal(self):
        assert style_glyph(Heavy(), GraphicKind.Cross) == "╋"
        assert style_glyph(Heavy(), GraphicKind.VerticalLine) == "┃"

    def test_double(self):
        assert style_glyph(Double(), GraphicKind.UpperLeftCorner) == "╔"
        assert style_glyph(Double(), GraphicKind.HorizontalLine) == "═"

    def test_ascii(self):
        assert style_glyph(Ascii(), GraphicKind.UpperLeftCorner) == "+"
        assert style_glyph(Ascii(), GraphicKind.LowerHorizontalLine) == "-"
        assert style_glyph(Ascii(), GraphicKind.RightVerticalLine) == "|"

    def test_dashed_lines_keep_solid_junctions(self):
        style = Light(BoxDrawingDetail.TripleDash)
        assert style_glyph(style, GraphicKind.HorizontalLine) == "┄"
        assert style_glyph(style, GraphicKind.VerticalLine) == "┆"
        assert style_glyph(style, GraphicKind.UpperLeftCorner) == "┌"

    @pytest.mark.parametrize("style", ALL_STYLES, ids=STYLE_IDS)
    def test_every_style_is_total(self, style):
        table = glyph_table(style)
        assert set(table) == set(GraphicKind)
        assert all(len(g) == 1 for g in table.values())

    def test_wide_glyph_alias(self):
        assert wide_glyph(Light(), GraphicKind.Cross) == style_glyph(Light(), GraphicKind.Cross)

    def test_unknown_style(self):
        with pytest.raises(ValueError, match="Unknown drawing style"):
            glyph_table(object())

    def test_fourteen_built_in_styles(self):
        assert len(ALL_STYLES) == 14
        assert len(set(ALL_STYLES)) == 14


class TestClassify:
    @pytest.mark.parametrize("style", ALL_STYLES, ids=STYLE_IDS)
    def test_round_trip_preserves_glyph(self, style):
        for kind in GraphicKind:
            glyph = style_glyph(style, kind)
            found = classify(style, glyph)
            assert found is not None
            assert style_glyph(style, found) == glyph

    @pytest.mark.parametrize("style", ALL_STYLES, ids=STYLE_IDS)
    def test_round_trip_exact_for_owned_glyphs(self, style):
        for kind in GraphicKind:
            glyph = style_glyph(style, kind)
            if _owner(style, glyph) == kind:
                assert classify(style, glyph) == kind

    def test_shared_glyph_resolves_to_first_kind(self):
        assert classify(Light(), "─") == GraphicKind.HorizontalLine
        assert classify(Light(), "│") == GraphicKind.VerticalLine
        assert classify(Ascii(), "+") == GraphicKind.UpperLeftCorner

    def test_accepts_code_point(self):
        assert classify(Light(), ord("┼")) == GraphicKind.Cross

    def test_out_of_range_code_point(self):
        assert classify(Light(), 0x110000) is None
        assert classify(Light(), -1) is None

    def test_text_is_not_a_glyph(self):
        assert classify(Light(), "A") is None
        assert classify(Light(), " ") is None

    def test_other_style_glyph_is_not_classified(self):
        assert classify(Light(), "╋") is None
        assert classify(Double(), "┼") is None


class TestCustomStyle:
    GLYPHS = "abcdefghijklmno"

    def _style(self):
        return Custom(BoxDrawing(*self.GLYPHS))

    def test_lookup(self):
        style = self._style()
        assert style_glyph(style, GraphicKind.UpperLeftCorner) == "a"
        assert style_glyph(style, GraphicKind.Cross) == "o"

    def test_classify(self):
        style = self._style()
        assert classify(style, "h") == GraphicKind.UpperTee
        assert classify(style, "z") is None

    def test_glyph_table(self):
        assert "".join(glyph_table(self._style()).values()) == self.GLYPHS

    def test_from_mapping(self):
        glyphs = BoxDrawing.from_mapping({k: "*" for k in GraphicKind})
        assert classify(Custom(glyphs), "*") == GraphicKind.UpperLeftCorner

    def test_from_mapping_missing_kind(self):
        partial = {k: "*" for k in GraphicKind if k is not GraphicKind.Cross}
        with pytest.raises(ValueError, match="Cross"):
            BoxDrawing.from_mapping(partial)

    def test_rejects_multi_character_glyph(self):
        with pytest.raises(ValueError, match="single character"):
            BoxDrawing(*self.GLYPHS[:-1], "++")


class TestStyleNames:
    def test_names(self):
        assert str(Ascii()) == "ascii"
        assert str(Light()) == "light:normal"
        assert str(Heavy(BoxDrawingDetail.QuadrupleDash)) == "heavy:quadruple-dash"
        assert str(Double()) == "double"

    def test_default_detail(self):
        assert Light() == Light(BoxDrawingDetail.Normal)


class TestChtypeAndComplex:
    def test_acs_letters(self):
        assert chtype_glyph(GraphicKind.UpperLeftCorner) == "l"
        assert chtype_glyph(GraphicKind.LowerRightCorner) == "j"
        assert chtype_glyph(GraphicKind.LowerTee) == "v"
        assert chtype_glyph(GraphicKind.UpperTee) == "w"
        assert chtype_glyph(GraphicKind.Cross) == "n"
        assert chtype_glyph(GraphicKind.UpperHorizontalLine) == "q"
        assert chtype_glyph(GraphicKind.RightVerticalLine) == "x"

    def test_complex_glyph(self):
        cell = complex_glyph(Heavy(), GraphicKind.Cross, Attribute.BOLD, 3)
        assert cell == ComplexGlyph("╋", Attribute.BOLD, 3)
        assert cell.code_point == 0x254B

    def test_complex_glyph_defaults(self):
        cell = complex_glyph(Light(), GraphicKind.HorizontalLine)
        assert cell.attrs == Attribute.NORMAL
        assert cell.color_pair == 0
