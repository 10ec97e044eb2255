"""GraphModel — flat node/edge graph built from a single master trace."""

from __future__ import annotations

from collections import defaultdict

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator

from .edge import GraphEdge
from .node import GraphNode, NodeKind

CURRENT_SCHEMA_VERSION = "0.1.0"


class GraphModel(BaseModel):
    """Component nodes, step nodes and linked-feature edges, in traversal order."""

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)

    schema_version: str = CURRENT_SCHEMA_VERSION
    nodes: list[GraphNode] = Field(default_factory=list)
    edges: list[GraphEdge] = Field(default_factory=list)
    nodes_without_captions: int = 0

    _index: dict[str, int] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context: object) -> None:
        self._index = {node.id: position for position, node in enumerate(self.nodes)}

    @property
    def component_nodes(self) -> list[GraphNode]:
        return [node for node in self.nodes if node.kind == NodeKind.COMPONENT]

    @property
    def step_nodes(self) -> list[GraphNode]:
        return [node for node in self.nodes if node.kind == NodeKind.STEP]

    def get_node(self, node_id: str) -> GraphNode | None:
        position = self._index.get(node_id)
        return self.nodes[position] if position is not None else None

    def position_of(self, node_id: str) -> int | None:
        """Traversal position of a node, or ``None`` if it was never emitted."""
        return self._index.get(node_id)

    def children_of(self, component_id: str) -> list[GraphNode]:
        return [node for node in self.nodes if node.parent == component_id]

    def incident_edges(self) -> dict[str, list[int]]:
        """Map each step node id to the positions of the edges touching it."""
        result: dict[str, list[int]] = defaultdict(list)
        for position, edge in enumerate(self.edges):
            result[edge.source].append(position)
            if edge.target != edge.source:
                result[edge.target].append(position)
        return dict(result)

    @model_validator(mode="after")
    def validate_references(self) -> GraphModel:
        positions: dict[str, int] = {}
        for position, node in enumerate(self.nodes):
            if node.id in positions:
                raise ValueError(f"Duplicate node id: {node.id}")
            positions[node.id] = position

        kinds = {node.id: node.kind for node in self.nodes}
        for node in self.nodes:
            if node.kind == NodeKind.COMPONENT and node.parent is not None:
                raise ValueError(f"Component node cannot have a parent: {node.id}")
            if node.kind == NodeKind.STEP and kinds.get(node.parent or "") != NodeKind.COMPONENT:
                raise ValueError(f"Step node parent is not a component: {node.id}")

        for edge in self.edges:
            if kinds.get(edge.source) != NodeKind.STEP:
                raise ValueError(f"Edge source not found among step nodes: {edge.source}")
            if kinds.get(edge.target) != NodeKind.STEP:
                raise ValueError(f"Edge target not found among step nodes: {edge.target}")
            if positions[edge.source] >= positions[edge.target]:
                raise ValueError(f"Edge source must precede its target: {edge.source} -> {edge.target}")
        return self
