"""Tests for style broadcasting, resolution and number formatting."""

from __future__ import annotations

import numpy as np
import pytest

from slopegraph.config import SlopegraphConfig
from slopegraph.errors import InvalidStyleError, StyleLengthError
from slopegraph.style import broadcast, check_decimals, format_value, normalize_line_type, resolve_style


def test_broadcast_scalar() -> None:
    assert broadcast("gray", 3) == ["gray", "gray", "gray"]
    assert broadcast(2, 2) == [2, 2]


def test_broadcast_full_length_is_copied() -> None:
    src = ["a", "b", "c"]
    out = broadcast(src, 3)
    assert out == src
    assert out is not src


def test_broadcast_tiles_even_divisor() -> None:
    assert broadcast(["a", "b"], 6) == ["a", "b", "a", "b", "a", "b"]
    assert broadcast(np.array([1.0, 2.0]), 4) == [1.0, 2.0, 1.0, 2.0]


@pytest.mark.parametrize("value", [["a", "b"], [], ["a", "b", "c", "d"]])
def test_broadcast_rejects_unrepeatable_lengths(value: list) -> None:
    with pytest.raises(StyleLengthError) as exc_info:
        broadcast(value, 3, name="col_lines")
    assert "col_lines" in str(exc_info.value)


def test_resolve_style_defaults_to_foreground() -> None:
    style = resolve_style(SlopegraphConfig(), 2, foreground="#000000")
    assert style.line_colors == ("#000000", "#000000")
    assert style.label_colors == style.line_colors
    assert style.number_colors == style.line_colors
    assert style.line_types == ("solid", "solid")
    assert style.line_widths == (1.0, 1.0)
    assert len(style) == 2


def test_resolve_style_label_and_number_colors_follow_lines() -> None:
    cfg = SlopegraphConfig(col_lines=["red", "blue"], col_num="green")
    style = resolve_style(cfg, 4, foreground="#000000")
    assert style.line_colors == ("red", "blue", "red", "blue")
    assert style.label_colors == ("red", "blue", "red", "blue")
    assert style.number_colors == ("green",) * 4


def test_resolve_style_for_row_is_one_based() -> None:
    cfg = SlopegraphConfig(col_lines=["red", "blue", "black"], lty=["solid", 2, "dot"], lwd=[1, 2, 3])
    style = resolve_style(cfg, 3, foreground="#000000")
    assert style.for_row(1)["line_color"] == "red"
    assert style.for_row(2) == {
        "line_color": "blue",
        "label_color": "blue",
        "number_color": "blue",
        "line_type": "dashed",
        "line_width": 2.0,
    }
    assert style.for_row(3)["line_type"] == "dotted"


def test_resolve_style_mismatched_vector_raises() -> None:
    with pytest.raises(StyleLengthError):
        resolve_style(SlopegraphConfig(lwd=[1, 2]), 3, foreground="#000000")


@pytest.mark.parametrize(
    "value, expected",
    [(1, "solid"), (0, "blank"), ("dashed", "dashed"), ("dash", "dashed"), ("LongDashDot", "twodash")],
)
def test_normalize_line_type(value, expected) -> None:
    assert normalize_line_type(value) == expected


@pytest.mark.parametrize("value", ["wavy", 7, -1, True, 1.5])
def test_normalize_line_type_rejects_unknown(value) -> None:
    with pytest.raises(InvalidStyleError):
        normalize_line_type(value)


def test_format_value_defaults_to_integers() -> None:
    assert format_value(10.0) == "10"
    assert format_value(10.6) == "11"
    assert format_value(3.14159, 2) == "3.14"
    assert format_value(5.0, 1) == "5.0"


def test_check_decimals() -> None:
    assert check_decimals(None) == 0
    assert check_decimals(3) == 3
    assert check_decimals(np.int64(2)) == 2


@pytest.mark.parametrize("value", [-1, 1.5, True, "2"])
def test_check_decimals_rejects_invalid(value) -> None:
    with pytest.raises(InvalidStyleError):
        check_decimals(value)
    with pytest.raises(InvalidStyleError):
        format_value(1.0, value)
