"""Public exception types for stepgraph."""

from __future__ import annotations


class StepgraphError(Exception):
    """Base class for all stepgraph exceptions."""


class TraceLoadError(StepgraphError):
    """Raised when a trace or spec file cannot be loaded or parsed."""


class PaletteExhaustedError(StepgraphError):
    """Raised when the palette cannot supply one colour per component.

    This is a configuration error: the whole build is aborted and no graph
    is produced.
    """

    def __init__(self, scheme: str, count: int) -> None:
        self.scheme = scheme
        self.count = count
        super().__init__(
            f"Palette {scheme!r} cannot provide {count} distinct colours; "
            "too many components in this trace."
        )


class DanglingLinkError(StepgraphError):
    """Raised when a linked feature points at a step node that was not emitted earlier."""

    def __init__(self, source: str, target: str) -> None:
        self.source = source
        self.target = target
        super().__init__(f"Linked feature from unknown or later step {source!r} into {target!r}")


class InvalidFilterError(StepgraphError, ValueError):
    """Raised when a filter query is not a valid regular expression."""

    def __init__(self, query: str, reason: str) -> None:
        self.query = query
        super().__init__(f"Invalid filter pattern {query!r}: {reason}")


class DuplicateNodeIdError(StepgraphError):
    """Raised when two graph nodes would share one id.

    Happens when two components share a name, or a component name equals a
    step id of another component (``a-1`` next to step 1 of ``a``).
    """

    def __init__(self, node_id: str) -> None:
        self.node_id = node_id
        super().__init__(f"Duplicate node id: {node_id!r}")
