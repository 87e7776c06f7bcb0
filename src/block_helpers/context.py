"""Rendering context that templates and helper objects write into.

Purpose
-------
Play the role of the enclosing template environment: own the live output
sink, offer ``concat`` and ``capture``, and expose one invocation method per
registered block helper alongside the ambient helper functions.

Contents
--------
* :class:`RenderContext` – composition root wiring a frozen
  :class:`HelperRegistry`, a :class:`SinkStack` and the invocation use case.

System Role
-----------
A context lives for one render pass. Templates are plain callables receiving
the context; blocks are callables receiving the helper object::

    def page(view):
        view.concat("<h1>Menu</h1>")
        view.food_helper(block=lambda food: view.concat(food.yog()))

    html = RenderContext(registry).render(page)
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Any, Callable

from .application.use_cases.invoke import DiagnosticHook, create_invoke_helper
from .domain import OutputBuffer, SinkStack
from .registry import HelperRegistry
from .tags import STANDARD_HELPERS

logger = logging.getLogger(__name__)


class RenderContext:
    """Enclosing context for one render pass.

    Parameters
    ----------
    registry:
        Helpers this context resolves. The registry is frozen on construction.
    sink:
        Live output target (anything with ``write``). Defaults to an
        :class:`OutputBuffer` readable through :meth:`output`.
    diagnostic:
        Optional observer forwarded to the invocation use case.

    Examples
    --------
    >>> view = RenderContext()
    >>> view.concat("Hello")
    >>> view.capture(lambda: view.concat(" hidden"))
    ' hidden'
    >>> view.output()
    'Hello'
    """

    def __init__(
        self,
        registry: HelperRegistry | None = None,
        *,
        sink: Any = None,
        diagnostic: DiagnosticHook = None,
    ) -> None:
        self._registry = registry if registry is not None else HelperRegistry()
        self._registry.freeze()
        self._sinks = SinkStack(sink if sink is not None else OutputBuffer())
        self._invoke = create_invoke_helper(diagnostic=diagnostic)
        logger.debug("render context created with sink %s", type(self._sinks.root).__name__)

    @property
    def registry(self) -> HelperRegistry:
        return self._registry

    @property
    def sink(self) -> Any:
        """Return the live sink output reaches outside capture scopes."""

        return self._sinks.root

    @property
    def capture_depth(self) -> int:
        return self._sinks.depth

    def concat(self, content: Any, binding: Any = None) -> None:
        """Write ``content`` to the current sink.

        ``binding`` is accepted for callers using the two-argument form and is
        otherwise ignored.
        """

        if content is None:
            return
        self._sinks.write(str(content))

    def capture(self, block: Callable[..., Any], *args: Any) -> str:
        """Run ``block(*args)`` and return its output instead of emitting it.

        When the block writes nothing but returns a string, that string is the
        captured value.
        """

        with self._sinks.capture() as buffer:
            result = block(*args)
        if not buffer and isinstance(result, str):
            return result
        return buffer.getvalue()

    def resolve(self, name: str) -> Callable[..., Any]:
        """Return the callable that ``name`` refers to in this context.

        Block helpers resolve to their invocation method, ambient helpers to
        the function bound to this context, then the standard tag helpers.
        """

        if name.startswith("_"):
            raise AttributeError(name)
        block_helpers = self._registry.block_helpers()
        if name in block_helpers:
            return partial(self.invoke_type, block_helpers[name])
        ambient = self._registry.ambient_helpers().get(name) or STANDARD_HELPERS.get(name)
        if ambient is not None:
            return partial(ambient, self)
        raise AttributeError(f"No helper named {name!r} is available in this rendering context")

    def invoke_type(
        self,
        helper_type: type,
        *args: Any,
        block: Callable[..., Any] | None = None,
        parent: Any = None,
        **kwargs: Any,
    ) -> Any:
        """Run the invocation protocol for ``helper_type`` in this context."""

        return self._invoke(self, helper_type, *args, block=block, parent=parent, **kwargs)

    def invoke(self, name: str, *args: Any, block: Callable[..., Any] | None = None, **kwargs: Any) -> Any:
        """Invoke the block helper registered as ``name``."""

        try:
            helper_type = self._registry.block_helpers()[name]
        except KeyError as exc:
            raise KeyError(f"No block helper registered as {name!r}") from exc
        return self.invoke_type(helper_type, *args, block=block, **kwargs)

    def render(self, template: Callable[["RenderContext"], Any]) -> str:
        """Run ``template(self)`` in a capture scope and return its output."""

        return self.capture(template, self)

    def output(self) -> str:
        """Return what reached the live sink, when the sink can report it."""

        getvalue = getattr(self._sinks.root, "getvalue", None)
        if getvalue is None:
            raise TypeError(f"{type(self._sinks.root).__name__} sink does not retain output")
        return getvalue()

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return self.resolve(name)


__all__ = ["RenderContext"]
