"""Emit helper output through the context's ``concat``.

Purpose
-------
Host contexts may override ``concat`` with one argument (``content``), two
arguments (``content`` plus a legacy binding) or an optional second argument.
This module inspects the bound method and calls it with the shape it accepts,
so every override produces identical output.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable

from block_helpers.application.ports.context import RenderingContextPort

logger = logging.getLogger(__name__)

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def requires_binding(concat: Callable[..., Any]) -> bool:
    """Return ``True`` when ``concat`` needs a second positional argument.

    Examples
    --------
    >>> requires_binding(lambda html: None)
    False
    >>> requires_binding(lambda html, binding: None)
    True
    >>> requires_binding(lambda html, binding=None: None)
    False
    """

    try:
        signature = inspect.signature(concat)
    except (TypeError, ValueError):  # pragma: no cover - builtins without metadata
        return False
    required = [
        param for param in signature.parameters.values() if param.kind in _POSITIONAL and param.default is inspect.Parameter.empty
    ]
    return len(required) >= 2


def emit(context: RenderingContextPort, content: Any) -> bool:
    """Concatenate ``content`` into ``context`` unless it is ``None`` or empty.

    Returns ``True`` when something was emitted.
    """

    if content is None:
        return False
    text = str(content)
    if not text:
        return False

    concat = context.concat
    if requires_binding(concat):
        logger.debug("concat requires a binding argument; passing the context")
        concat(text, context)
    else:
        concat(text)
    return True


__all__ = ["emit", "requires_binding"]
