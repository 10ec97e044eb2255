"""Configuration for building and displaying a trace graph."""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_CYTOSCAPE_URL = "https://unpkg.com/cytoscape@3.30.2/dist/cytoscape.min.js"


class VizConfig(BaseModel):
    """Validated configuration. Passed via DI to the builder and controller."""

    palette_scheme: str = "tol"
    id_separator: str = Field(default="-", min_length=1)
    layout_name: str = "cose"
    cytoscape_url: str = DEFAULT_CYTOSCAPE_URL
    height_px: int = Field(default=600, gt=0)
    width_px: int | None = None
