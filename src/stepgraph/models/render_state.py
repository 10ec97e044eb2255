"""Render state derived from a graph model and a filter query."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class FadeLevel(StrEnum):
    NONE = "none"
    NEAR = "near"
    FAR = "far"


class RenderState(BaseModel):
    """Visibility and fade assignment for every node and edge of one graph.

    ``edge_fade`` is aligned with ``GraphModel.edges``.
    """

    model_config = ConfigDict(frozen=True)

    query: str = ""
    matched: frozenset[str] = frozenset()
    visible: frozenset[str] = frozenset()
    node_fade: dict[str, FadeLevel]
    edge_fade: tuple[FadeLevel, ...] = ()

    def is_visible(self, node_id: str) -> bool:
        return node_id in self.visible

    def fade_of(self, node_id: str) -> FadeLevel:
        return self.node_fade.get(node_id, FadeLevel.FAR)

    @property
    def hidden(self) -> frozenset[str]:
        return frozenset(node_id for node_id in self.node_fade if node_id not in self.visible)
