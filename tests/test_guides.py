from __future__ import annotations

import pytest

from book_builder.cover.spine import Binding
from book_builder.renderer.guides import Rect, compute_guides, fit_scale


def test_single_page_guides(us_trade_120) -> None:
    layout = compute_guides(us_trade_120, scale=72)

    assert layout.page == Rect(0, 0, 6.25 * 72, 9.25 * 72)
    assert layout.trim == Rect(9, 9, 6.0 * 72, 9.0 * 72)
    assert layout.safety == Rect(27, 27, 5.5 * 72, 8.5 * 72)
    assert layout.center_x is None
    assert layout.gutter is None
    assert layout.spine is None


def test_spread_guides_center_gutter_and_spine(resolver) -> None:
    fmt = resolver.from_catalog("digestSpread", 300, Binding.HARDCOVER)
    layout = compute_guides(fmt, scale=100)

    assert layout.center_x == pytest.approx(575)
    assert layout.gutter.width == pytest.approx(50)
    assert layout.gutter.left == pytest.approx(550)
    assert layout.gutter.height == pytest.approx(875)
    assert layout.spine.width == pytest.approx(93.8)
    assert (layout.spine.left + layout.spine.right) / 2 == pytest.approx(575)


def test_zero_width_gutter_band_is_kept(resolver) -> None:
    fmt = resolver.from_catalog("pocketbookSpread", 30, Binding.HARDCOVER)
    layout = compute_guides(fmt)

    assert layout.gutter is not None
    assert layout.gutter.width == 0
    assert layout.spine.width == pytest.approx(0.25 * 72)


def test_gutter_can_be_hidden_and_zero_spine_is_skipped(resolver) -> None:
    fmt = resolver.from_catalog("pocketbookSpread", 10, Binding.HARDCOVER)
    layout = compute_guides(fmt, show_gutter=False)

    assert layout.gutter is None
    assert layout.spine is None


def test_guides_follow_scale(us_trade_120) -> None:
    screen = compute_guides(us_trade_120, scale=72)
    print_ = compute_guides(us_trade_120, scale=300)

    assert print_.trim.left == pytest.approx(37.5)
    assert print_.safety.width / screen.safety.width == pytest.approx(300 / 72)


def test_fit_scale_uses_limiting_side(us_trade_120) -> None:
    scale = fit_scale(us_trade_120, 900, 666)
    assert scale == pytest.approx(666 / (9.25 * 72) * 0.9)


def test_trim_and_safety_can_be_hidden(us_trade_120) -> None:
    no_trim = compute_guides(us_trade_120, scale=72, show_bleed=False)
    assert no_trim.trim is None
    assert no_trim.safety == Rect(27, 27, 5.5 * 72, 8.5 * 72)

    no_safety = compute_guides(us_trade_120, scale=72, show_safety=False)
    assert no_safety.trim == Rect(9, 9, 6.0 * 72, 9.0 * 72)
    assert no_safety.safety is None


def test_hidden_guides_on_spread_keep_gutter(resolver) -> None:
    fmt = resolver.from_catalog("digestSpread", 300, Binding.PAPERBACK)
    layout = compute_guides(fmt, show_bleed=False, show_safety=False)

    assert layout.trim is None
    assert layout.safety is None
    assert layout.gutter is not None
    assert layout.spine is not None


def test_fit_scale_margin(us_trade_120) -> None:
    full = fit_scale(us_trade_120, 900, 666, margin=1.0)
    assert fit_scale(us_trade_120, 900, 666, margin=0.5) == pytest.approx(full / 2)
