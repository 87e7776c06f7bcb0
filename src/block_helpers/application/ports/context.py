"""Port for the enclosing rendering context."""

from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class RenderingContextPort(Protocol):
    """Capabilities the invocation protocol needs from the host environment."""

    def concat(self, content: str, binding: Any = None) -> None:
        """Emit ``content`` into the current output stream."""

    def capture(self, block: Callable[..., Any], *args: Any) -> str:
        """Evaluate ``block`` with ``args`` and return what it emitted."""

    def resolve(self, name: str) -> Callable[..., Any]:
        """Return the ambient callable registered under ``name``."""

    def invoke_type(
        self,
        helper_type: type,
        *args: Any,
        block: Callable[..., Any] | None = None,
        parent: Any = None,
        **kwargs: Any,
    ) -> Any:
        """Run the invocation protocol for ``helper_type`` in this context."""


__all__ = ["RenderingContextPort"]
