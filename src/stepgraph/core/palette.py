"""Colour palettes for component nodes."""

from __future__ import annotations

from typing import Protocol

# Paul Tol's qualitative schemes, one list per palette size.
_TOL_SCHEMES: tuple[tuple[str, ...], ...] = (
    ("4477aa",),
    ("4477aa", "cc6677"),
    ("4477aa", "ddcc77", "cc6677"),
    ("4477aa", "117733", "ddcc77", "cc6677"),
    ("332288", "88ccee", "117733", "ddcc77", "cc6677"),
    ("332288", "88ccee", "117733", "ddcc77", "cc6677", "aa4499"),
    ("332288", "88ccee", "44aa99", "117733", "ddcc77", "cc6677", "aa4499"),
    ("332288", "88ccee", "44aa99", "117733", "999933", "ddcc77", "cc6677", "aa4499"),
    ("332288", "88ccee", "44aa99", "117733", "999933", "ddcc77", "cc6677", "882255", "aa4499"),
    (
        "332288", "88ccee", "44aa99", "117733", "999933",
        "ddcc77", "661100", "cc6677", "882255", "aa4499",
    ),
    (
        "332288", "6699cc", "88ccee", "44aa99", "117733", "999933",
        "ddcc77", "661100", "cc6677", "882255", "aa4499",
    ),
    (
        "332288", "6699cc", "88ccee", "44aa99", "117733", "999933",
        "ddcc77", "661100", "cc6677", "aa4466", "882255", "aa4499",
    ),
)  # fmt: skip

MAX_TOL_COLORS = len(_TOL_SCHEMES)


class PaletteGenerator(Protocol):
    """Returns ``count`` distinct hex colours (no ``#``), or ``None`` if it cannot."""

    def generate(self, scheme: str, count: int) -> list[str] | None: ...


class TolPalette:
    """Colour-blind friendly palette supporting up to twelve colours."""

    def generate(self, scheme: str, count: int) -> list[str] | None:
        if scheme != "tol" or count < 0 or count > MAX_TOL_COLORS:
            return None
        if count == 0:
            return []
        return list(_TOL_SCHEMES[count - 1])
