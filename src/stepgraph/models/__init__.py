"""Data models for traces, graphs and render state."""

from .edge import GraphEdge
from .graph_model import CURRENT_SCHEMA_VERSION, GraphModel
from .node import GraphNode, NodeKind
from .render_state import FadeLevel, RenderState
from .trace import (
    ComponentSpec,
    ComponentTrace,
    LinkedFeatureChannel,
    LinkedFeatureTrace,
    LinkedValueTrace,
    MasterSpec,
    MasterTrace,
    StepTrace,
)

__all__ = [
    "CURRENT_SCHEMA_VERSION",
    "ComponentSpec",
    "ComponentTrace",
    "FadeLevel",
    "GraphEdge",
    "GraphModel",
    "GraphNode",
    "LinkedFeatureChannel",
    "LinkedFeatureTrace",
    "LinkedValueTrace",
    "MasterSpec",
    "MasterTrace",
    "NodeKind",
    "RenderState",
    "StepTrace",
]
