"""Layout engine interface.

The layout algorithm itself lives outside this package; the controller only
asks a ``LayoutEngine`` to lay out the currently visible subgraph.
"""

from __future__ import annotations

from typing import Protocol

from pydantic import BaseModel, ConfigDict

from ..models import GraphModel, RenderState


class LayoutOptions(BaseModel):
    """Named layout strategy plus structural hints. Hints never affect correctness."""

    model_config = ConfigDict(frozen=True)

    name: str
    component_adjacency: tuple[tuple[str, str], ...] = ()
    visible: frozenset[str] = frozenset()


class LayoutEngine(Protocol):
    def run(self, graph: GraphModel, state: RenderState, options: LayoutOptions) -> None: ...


class NullLayout:
    """Does nothing. The HTML renderer lays out in the browser instead."""

    def run(self, graph: GraphModel, state: RenderState, options: LayoutOptions) -> None:
        pass
