"""Tests for graphics/compose.py: junction merging."""

import logging
from itertools import product

import pytest

from boxcompose.graphics.compose import canonical, compose
from boxcompose.graphics.kind import from_mask, to_mask
from boxcompose.types import GraphicKind

UL = GraphicKind.UpperLeftCorner
UR = GraphicKind.UpperRightCorner
LL = GraphicKind.LowerLeftCorner
LR = GraphicKind.LowerRightCorner
HL = GraphicKind.HorizontalLine
VL = GraphicKind.VerticalLine
UT = GraphicKind.UpperTee
LT = GraphicKind.LowerTee
CROSS = GraphicKind.Cross

PLAIN = [k for k in GraphicKind if not k.is_directional()]


class TestComposeExamples:
    def test_corner_and_line_make_tee(self):
        assert compose(UL, HL, True) == UT
        assert compose(HL, UL, True) == UT

    def test_lines_make_cross(self):
        assert compose(HL, VL, True) == CROSS
        assert compose(VL, HL, True) == CROSS

    def test_cross_stays_cross(self):
        assert compose(CROSS, HL, True) == CROSS
        assert compose(CROSS, VL, True) == CROSS

    def test_line_over_itself(self):
        assert compose(HL, HL, True) == HL

    def test_adjacent_corners_make_tee(self):
        assert compose(UR, UL, False) == UT
        assert compose(LL, LR, False) == LT

    def test_opposite_corners_make_cross(self):
        assert compose(UL, LR, True) == CROSS

    def test_corner_and_vertical_make_side_tee(self):
        assert compose(UL, VL, True) == GraphicKind.LeftTee
        assert compose(UR, VL, True) == GraphicKind.RightTee


class TestComposeProperties:
    @pytest.mark.parametrize("remap", [True, False])
    @pytest.mark.parametrize("kind", list(GraphicKind), ids=lambda k: k.name)
    def test_idempotent(self, kind, remap):
        assert compose(kind, kind, remap) == kind

    @pytest.mark.parametrize("remap", [True, False])
    @pytest.mark.parametrize("kind", list(GraphicKind), ids=lambda k: k.name)
    def test_cross_absorbs(self, kind, remap):
        assert compose(kind, CROSS, remap) == CROSS

    @pytest.mark.parametrize("remap", [True, False])
    @pytest.mark.parametrize("kind", list(GraphicKind), ids=lambda k: k.name)
    def test_existing_cross_absorbs(self, kind, remap):
        assert compose(CROSS, kind, remap) == CROSS

    def test_commutative_under_remap(self):
        for a, b in product(PLAIN, PLAIN):
            assert compose(a, b, True) == compose(b, a, True), (a, b)

    def test_commutative_without_remap_for_plain_kinds(self):
        for a, b in product(PLAIN, PLAIN):
            assert compose(a, b, False) == compose(b, a, False), (a, b)


class TestRemap:
    def test_canonical(self):
        assert canonical(GraphicKind.UpperHorizontalLine) == HL
        assert canonical(GraphicKind.LowerHorizontalLine) == HL
        assert canonical(GraphicKind.LeftVerticalLine) == VL
        assert canonical(GraphicKind.RightVerticalLine) == VL
        assert canonical(UL) == UL

    def test_remap_joins_pinned_line_with_corner(self):
        assert compose(UL, GraphicKind.UpperHorizontalLine, True) == UT
        assert compose(UL, GraphicKind.LeftVerticalLine, True) == GraphicKind.LeftTee

    def test_pinned_lines_merge_as_plain_lines(self):
        assert compose(GraphicKind.UpperHorizontalLine, GraphicKind.RightVerticalLine, True) == CROSS

    def test_pinned_and_plain_line_with_remap(self):
        assert compose(HL, GraphicKind.LowerHorizontalLine, True) == HL


class TestFallback:
    """An undefined union falls back to the incoming kind instead of raising."""

    def test_pinned_line_over_corner_without_remap(self):
        assert compose(UL, GraphicKind.UpperHorizontalLine, False) == GraphicKind.UpperHorizontalLine

    def test_corner_over_pinned_line_without_remap(self):
        assert compose(GraphicKind.LeftVerticalLine, UL, False) == UL

    def test_directional_kinds_break_commutativity(self):
        a, b = UL, GraphicKind.UpperHorizontalLine
        assert compose(a, b, False) == b
        assert compose(b, a, False) == a

    def test_cross_wins_over_pinned_lines_without_remap(self):
        for kind in [k for k in GraphicKind if k.is_directional()]:
            assert compose(CROSS, kind, False) == CROSS
            assert compose(kind, CROSS, False) == CROSS

    def test_fallback_never_happens_with_remap(self):
        for a, b in product(GraphicKind, GraphicKind):
            if a is b:
                continue
            merged = to_mask(canonical(a)) | to_mask(canonical(b))
            assert compose(a, b, True) == from_mask(merged), (a, b)

    def test_pinned_line_idempotent_with_remap(self):
        assert compose(GraphicKind.UpperHorizontalLine, GraphicKind.UpperHorizontalLine, True) == (
            GraphicKind.UpperHorizontalLine
        )

    def test_fallback_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="boxcompose.graphics.compose"):
            compose(UL, GraphicKind.UpperHorizontalLine, False)
        assert "keeping UpperHorizontalLine" in caplog.text

    def test_defined_union_is_not_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="boxcompose.graphics.compose"):
            compose(UL, HL, False)
        assert caplog.text == ""
