"""Use case implementing the helper invocation protocol.

Purpose
-------
Turn a call such as ``view.test_helper(block=body)`` into the documented
sequence: check whether the type renders, construct the helper object wired to
its enclosing context, capture the block's output, let ``display`` transform
it, and emit the result at the point of invocation.

Contents
--------
* :data:`DiagnosticHook` – optional observer callback type.
* :func:`create_invoke_helper` – factory returning the invocation callable.

System Role
-----------
Application-layer orchestrator used by :class:`block_helpers.RenderContext` and
by helper objects invoking their nested helper types. It depends only on
:class:`RenderingContextPort` and the domain traits.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Protocol

from block_helpers.application.ports.context import RenderingContextPort
from block_helpers.domain.traits import HelperTraits

from .emit import emit

logger = logging.getLogger(__name__)

DiagnosticHook = Optional[Callable[[str, dict[str, Any]], None]]


class InvokeCallable(Protocol):
    def __call__(
        self,
        context: RenderingContextPort,
        helper_type: type,
        *args: Any,
        block: Callable[..., Any] | None = None,
        parent: Any = None,
        **kwargs: Any,
    ) -> Any: ...


def create_invoke_helper(*, diagnostic: DiagnosticHook = None) -> InvokeCallable:
    """Build the invocation callable.

    Parameters
    ----------
    diagnostic:
        Optional callback receiving ``("skipped" | "constructed" | "emitted",
        payload)`` milestones. Exceptions raised by the hook are logged and
        ignored so observers cannot break a render pass.

    Returns
    -------
    InvokeCallable
        ``invoke(context, helper_type, *args, block=None, parent=None,
        **kwargs)`` returning the helper object, or ``None`` when the type
        never renders.

    Examples
    --------
    >>> from block_helpers import BlockHelper, HelperRegistry, RenderContext
    >>> class Shout(BlockHelper):
    ...     def display(self, body):
    ...         return body.upper()
    >>> view = RenderContext(HelperRegistry())
    >>> invoke = create_invoke_helper()
    >>> _ = invoke(view, Shout, block=lambda h: view.concat("hey"))
    >>> view.output()
    'HEY'
    """

    def _diagnose(event: str, payload: dict[str, Any]) -> None:
        if diagnostic is None:
            return
        try:
            diagnostic(event, payload)
        except Exception:  # noqa: BLE001
            logger.debug("diagnostic hook failed for %s", event, exc_info=True)

    def invoke(
        context: RenderingContextPort,
        helper_type: type,
        *args: Any,
        block: Callable[..., Any] | None = None,
        parent: Any = None,
        **kwargs: Any,
    ) -> Any:
        name = helper_type.__name__
        traits = HelperTraits.of(helper_type)

        if not traits.renders:
            logger.debug("helper %s never renders; block skipped", name)
            _diagnose("skipped", {"helper": name})
            return None

        helper = helper_type.build(context, parent, *args, **kwargs)
        _diagnose("constructed", {"helper": name, "nested": parent is not None, "block": block is not None})

        if block is None:
            if traits.displays:
                emitted = emit(context, helper.display(None))
                _diagnose("emitted", {"helper": name, "emitted": emitted})
            return helper

        body = context.capture(block, helper)
        result = helper.display(body) if traits.displays else body
        emitted = emit(context, result)
        logger.debug("helper %s captured %d chars, emitted=%s", name, len(body), emitted)
        _diagnose("emitted", {"helper": name, "emitted": emitted})
        return helper

    return invoke


__all__ = ["DiagnosticHook", "InvokeCallable", "create_invoke_helper"]
