"""Derive invocation names from helper class names."""

from __future__ import annotations

import re

_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def helper_name(source: type | str) -> str:
    """Return the ``snake_case`` invocation name for a class or class name.

    Examples
    --------
    >>> helper_name("TestHelperWithArgs")
    'test_helper_with_args'
    >>> helper_name("HTMLListHelper")
    'html_list_helper'
    """

    name = source if isinstance(source, str) else source.__name__
    if not name.strip():
        raise ValueError("helper name must not be empty")
    return _BOUNDARY_RE.sub("_", name.strip()).lower()


__all__ = ["helper_name"]
