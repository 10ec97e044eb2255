from __future__ import annotations

import pytest

from stepgraph.core import TolPalette
from stepgraph.core.palette import MAX_TOL_COLORS


@pytest.mark.parametrize("count", range(1, MAX_TOL_COLORS + 1))
def test_tol_palette_returns_distinct_colors(count: int) -> None:
    colors = TolPalette().generate("tol", count)

    assert colors is not None
    assert len(colors) == count
    assert len(set(colors)) == count
    assert all(len(color) == 6 for color in colors)


def test_tol_palette_handles_zero_components() -> None:
    assert TolPalette().generate("tol", 0) == []


def test_tol_palette_fails_above_twelve_colors() -> None:
    assert MAX_TOL_COLORS == 12
    assert TolPalette().generate("tol", 13) is None


def test_tol_palette_rejects_unknown_scheme() -> None:
    assert TolPalette().generate("viridis", 3) is None
