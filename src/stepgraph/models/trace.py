"""Input models for master traces and master specs.

Field names follow the JSON rendering of the pipeline's trace protos, so a
dumped trace loads directly. Unknown fields are ignored.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LinkedValueTrace(BaseModel):
    """One fanned-out value of a linked feature: which earlier step it reads."""

    model_config = ConfigDict(extra="ignore")

    step_idx: int
    feature_name: str = ""
    feature_value: str = ""


class LinkedFeatureTrace(BaseModel):
    """Dependency of a step on one or more earlier steps of ``source_component``."""

    model_config = ConfigDict(extra="ignore")

    source_component: str
    source_translator: str = ""
    source_layer: str = ""
    value_trace: list[LinkedValueTrace] = Field(default_factory=list)


class StepTrace(BaseModel):
    model_config = ConfigDict(extra="ignore")

    caption: str | None = None
    html_representation: str = ""
    fixed_feature_trace: list[dict[str, object]] = Field(default_factory=list)
    linked_feature_trace: list[LinkedFeatureTrace] = Field(default_factory=list)


class ComponentTrace(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    step_trace: list[StepTrace] = Field(default_factory=list)


class MasterTrace(BaseModel):
    """Complete hierarchical execution record for one input."""

    model_config = ConfigDict(extra="ignore")

    component_trace: list[ComponentTrace] = Field(default_factory=list)


class LinkedFeatureChannel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    source_component: str


class ComponentSpec(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    linked_feature: list[LinkedFeatureChannel] = Field(default_factory=list)


class MasterSpec(BaseModel):
    """Static pipeline description. Only used to improve the layout."""

    model_config = ConfigDict(extra="ignore")

    component: list[ComponentSpec] = Field(default_factory=list)

    def component_adjacency(self) -> list[tuple[str, str]]:
        """Ordered, de-duplicated ``(source_component, component)`` pairs."""
        pairs: list[tuple[str, str]] = []
        for component in self.component:
            for channel in component.linked_feature:
                pair = (channel.source_component, component.name)
                if pair not in pairs:
                    pairs.append(pair)
        return pairs
