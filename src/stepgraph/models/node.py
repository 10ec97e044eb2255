"""Graph node model and node kind enumeration."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from .trace import LinkedFeatureTrace


class NodeKind(StrEnum):
    COMPONENT = "component"
    STEP = "step"


class GraphNode(BaseModel):
    """A component container or a step nested under one."""

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)

    id: str
    kind: NodeKind
    text: str
    color: str
    component_idx: int
    parent: str | None = None
    step_idx: int | None = None
    state_info: str = ""
    fixed_features: list[dict[str, object]] = Field(default_factory=list)
    linked_features: list[LinkedFeatureTrace] = Field(default_factory=list)

    @property
    def is_step(self) -> bool:
        return self.kind == NodeKind.STEP

    @property
    def is_component(self) -> bool:
        return self.kind == NodeKind.COMPONENT
