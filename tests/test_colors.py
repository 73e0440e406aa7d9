"""Tests for color lookup.

Tests for tileimg.render.colors:
    - Table is read-only and includes the "none" sentinel
    - Known names resolve to opaque RGBA
    - "R,G,B" triplets (range and arity checks)
    - Lookup misses are errors, not transparent

Run:
    pytest tests/test_colors.py -v
"""

from __future__ import annotations

import pytest

from tileimg.errors import ColorParseError
from tileimg.render.colors import (
    NO_COLOR,
    build_color_table,
    parse_triplet,
    resolve_color,
)


@pytest.fixture(scope="module")
def table():
    return build_color_table()


class TestColorTable:
    def test_read_only(self, table) -> None:
        with pytest.raises(TypeError):
            table["white"] = (0, 0, 0, 255)  # type: ignore[index]

    def test_none_is_sentinel(self, table) -> None:
        assert "none" in table
        assert table["none"] is NO_COLOR

    def test_basic_names(self, table) -> None:
        assert table["white"] == (255, 255, 255, 255)
        assert table["black"] == (0, 0, 0, 255)
        assert table["red"] == (255, 0, 0, 255)
        assert table["blue"] == (0, 0, 255, 255)


class TestResolveColor:
    def test_name(self, table) -> None:
        assert resolve_color("green", table) == table["green"]

    def test_case_insensitive(self, table) -> None:
        assert resolve_color("RED", table) == (255, 0, 0, 255)

    def test_none(self, table) -> None:
        assert resolve_color("none", table) is NO_COLOR

    def test_triplet(self, table) -> None:
        assert resolve_color("75,0,0", table) == (75, 0, 0, 255)

    def test_unknown_name(self, table) -> None:
        with pytest.raises(ColorParseError, match="unknown color"):
            resolve_color("blurple", table)

    def test_empty(self, table) -> None:
        with pytest.raises(ColorParseError):
            resolve_color("", table)


class TestParseTriplet:
    def test_bounds(self) -> None:
        assert parse_triplet("0,0,0") == (0, 0, 0, 255)
        assert parse_triplet("255,255,255") == (255, 255, 255, 255)

    @pytest.mark.parametrize("text", ["256,0,0", "0,-1,0", "a,b,c", "1.0,2,3", "0,0,"])
    def test_bad_channel(self, text: str) -> None:
        with pytest.raises(ColorParseError):
            parse_triplet(text)

    @pytest.mark.parametrize("text", ["1,2", "1,2,3,4"])
    def test_wrong_arity(self, text: str) -> None:
        with pytest.raises(ColorParseError):
            parse_triplet(text)
