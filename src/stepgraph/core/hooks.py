"""View hook protocol for observing filter and hover results."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..models import RenderState


@runtime_checkable
class ViewHook(Protocol):
    """Protocol for receiving view updates, e.g. to push them to a page.

    Hook methods must not raise; exceptions are swallowed by the controller
    with a warning.
    """

    def on_render_state(self, state: RenderState) -> None: ...
    def on_highlight(self, element: str | int, edges: frozenset[int]) -> None: ...


class NullHook:
    """No-op hook. Useful as a reference implementation and in tests."""

    def on_render_state(self, state: RenderState) -> None:
        pass

    def on_highlight(self, element: str | int, edges: frozenset[int]) -> None:
        pass
