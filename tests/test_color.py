"""Tests for themekit.core.color."""

from __future__ import annotations

import pytest

from themekit.core.color import HslColor, hex_to_hsl, is_hex_color


def _hsl_to_rgb(h: int, s: int, l: int) -> tuple[int, int, int]:  # noqa: E741
    s_frac = s / 100
    l_frac = l / 100
    c = (1 - abs(2 * l_frac - 1)) * s_frac
    hp = (h % 360) / 60
    x = c * (1 - abs(hp % 2 - 1))
    if hp < 1:
        rgb = (c, x, 0.0)
    elif hp < 2:
        rgb = (x, c, 0.0)
    elif hp < 3:
        rgb = (0.0, c, x)
    elif hp < 4:
        rgb = (0.0, x, c)
    elif hp < 5:
        rgb = (x, 0.0, c)
    else:
        rgb = (c, 0.0, x)
    m = l_frac - c / 2
    return tuple(round((channel + m) * 255) for channel in rgb)  # type: ignore[return-value]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("#ffffff", HslColor(0, 0, 100)),
        ("#000000", HslColor(0, 0, 0)),
        ("#ff0000", HslColor(0, 100, 50)),
        ("#00ff00", HslColor(120, 100, 50)),
        ("0000ff", HslColor(240, 100, 50)),
        ("#112233", HslColor(210, 50, 13)),
        ("#808080", HslColor(0, 0, 50)),
        ("#9F50E3", HslColor(272, 72, 60)),
        ("#eee7f7", HslColor(266, 50, 94)),
        ("#50E3D6", HslColor(175, 72, 60)),
    ],
)
def test_hex_to_hsl_known_values(value: str, expected: HslColor) -> None:
    assert hex_to_hsl(value) == expected


@pytest.mark.parametrize(
    "value",
    ["red", "#12", "", "#1234567", "#gggggg", "12 34 56", "#fff", "#112233\n", " #112233"],
)
def test_hex_to_hsl_rejects_other_shapes(value: str) -> None:
    assert hex_to_hsl(value) is None


def test_hex_to_hsl_non_string_returns_none() -> None:
    assert hex_to_hsl(None) is None  # type: ignore[arg-type]
    assert hex_to_hsl(0x112233) is None  # type: ignore[arg-type]


def test_hue_can_round_up_to_360() -> None:
    assert hex_to_hsl("#ff0001") == HslColor(360, 100, 50)


def test_case_and_hash_are_optional() -> None:
    assert hex_to_hsl("ABCDEF") == hex_to_hsl("#abcdef")


@pytest.mark.parametrize(
    "value",
    ["#9F50E3", "#EEE7F7", "#50E3D6", "#1e1e2e", "#f5deb3", "#336699", "#c0ffee", "#7f7f7f"],
)
def test_hsl_approximates_source_rgb(value: str) -> None:
    hsl = hex_to_hsl(value)
    assert hsl is not None
    assert 0 <= hsl.h <= 360
    assert 0 <= hsl.s <= 100
    assert 0 <= hsl.l <= 100

    original = tuple(int(value.lstrip("#")[i : i + 2], 16) for i in (0, 2, 4))
    rebuilt = _hsl_to_rgb(hsl.h, hsl.s, hsl.l)
    # Whole-percent rounding costs up to a few units per channel.
    assert all(abs(a - b) <= 6 for a, b in zip(original, rebuilt))


def test_css_triple_format() -> None:
    assert HslColor(210, 50, 13).css() == "210 50% 13%"


def test_is_hex_color() -> None:
    assert is_hex_color("#AABBCC")
    assert not is_hex_color("rgb(1,2,3)")
    assert not is_hex_color(None)
    assert not is_hex_color("#AABBCC\n")
