from __future__ import annotations

import pytest

from book_builder.cover.spine import (
    Binding,
    gutter_width,
    hardcover_spine_width,
    paperback_spine_width,
    spine_width,
)


@pytest.mark.parametrize(
    ("pages", "expected"),
    [
        (0, 0.0),
        (59, 0.0),
        (60, 0.125),
        (150, 0.125),
        (151, 0.5),
        (400, 0.5),
        (401, 0.625),
        (600, 0.625),
        (601, 0.75),
        (10000, 0.75),
    ],
)
def test_gutter_width_brackets(pages: int, expected: float) -> None:
    assert gutter_width(pages) == expected


def test_paperback_spine_width_formula() -> None:
    assert paperback_spine_width(444) == pytest.approx(1.06)
    assert paperback_spine_width(0) == pytest.approx(0.06)
    assert paperback_spine_width(222) == pytest.approx(0.56)


def test_hardcover_spine_width_boundaries() -> None:
    assert hardcover_spine_width(23) == 0
    assert hardcover_spine_width(24) == 0.25
    assert hardcover_spine_width(84) == 0.25
    assert hardcover_spine_width(85) == 0.5
    assert hardcover_spine_width(582) == 1.563
    assert hardcover_spine_width(583) == 1.625
    assert hardcover_spine_width(600) == 1.625


def test_hardcover_spine_width_is_non_decreasing() -> None:
    widths = [hardcover_spine_width(pages) for pages in range(0, 1000)]
    assert all(a <= b for a, b in zip(widths, widths[1:]))


def test_rules_do_not_raise_on_negative_counts() -> None:
    assert gutter_width(-5) == 0.0
    assert hardcover_spine_width(-5) == 0.0
    assert isinstance(paperback_spine_width(-5), float)


def test_spine_width_dispatches_on_binding() -> None:
    assert spine_width(300, Binding.HARDCOVER) == hardcover_spine_width(300)
    assert spine_width(300, "paperback") == paperback_spine_width(300)
