"""Edge model for resolved linked-feature values."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class GraphEdge(BaseModel):
    """Directed link from an earlier step to the step that reads it."""

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)

    source: str
    target: str
    feature_name: str = ""
    feature_value: str = ""
    curvature: float = 0.0

    def touches(self, node_id: str) -> bool:
        return node_id in (self.source, self.target)
