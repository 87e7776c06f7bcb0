"""Static registry mapping invocation names to helper types and functions.

Purpose
-------
Collect, at import time, every block helper type and ambient helper function a
set of templates may call, so rendering contexts resolve names from a fixed
table instead of defining methods at runtime.

Contents
--------
* :class:`HelperRegistry` – ``block_helper``/``helper`` decorators, lookups,
  and :meth:`HelperRegistry.freeze`.

System Role
-----------
A :class:`block_helpers.RenderContext` freezes its registry on construction;
registering afterwards raises :class:`RuntimeError`.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Callable, Mapping, TypeVar, overload

from .base import BlockHelper
from .domain.naming import helper_name

logger = logging.getLogger(__name__)

H = TypeVar("H", bound=type[BlockHelper])
F = TypeVar("F", bound=Callable[..., Any])


@lru_cache(maxsize=1)
def reserved_names() -> frozenset[str]:
    """Return the names a helper may not take.

    These are the public members of :class:`block_helpers.RenderContext` and
    :class:`BlockHelper` plus ``display``; attribute lookup finds them before
    any registered helper.

    Examples
    --------
    >>> {"output", "render", "concat", "parent", "display"} <= reserved_names()
    True
    """

    from .context import RenderContext

    members = {name for owner in (RenderContext, BlockHelper) for name in dir(owner) if not name.startswith("_")}
    return frozenset(members | {"display"})


class HelperRegistry:
    """Name table for block helper types and ambient helper functions.

    Examples
    --------
    >>> registry = HelperRegistry()
    >>> @registry.helper
    ... def yoghurt(view):
    ...     return "Yoghurt"
    >>> @registry.block_helper
    ... class FoodHelper(BlockHelper):
    ...     pass
    >>> sorted(registry.names())
    ['food_helper', 'yoghurt']
    """

    def __init__(self) -> None:
        self._block_helpers: dict[str, type[BlockHelper]] = {}
        self._ambient: dict[str, Callable[..., Any]] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Reject further registrations; idempotent."""

        if not self._frozen:
            logger.debug("registry frozen with %d block helpers and %d ambient helpers", len(self._block_helpers), len(self._ambient))
        self._frozen = True

    def register(self, helper_type: type[BlockHelper], name: str | None = None) -> type[BlockHelper]:
        """Register ``helper_type`` under ``name`` (derived from the class name by default)."""

        if not (isinstance(helper_type, type) and issubclass(helper_type, BlockHelper)):
            raise TypeError(f"block helpers must subclass BlockHelper, got {helper_type!r}")
        key = self._claim(name or helper_name(helper_type))
        self._block_helpers[key] = helper_type
        logger.debug("registered block helper %s as %r", helper_type.__qualname__, key)
        return helper_type

    @overload
    def block_helper(self, helper_type: H, *, name: str | None = None) -> H: ...

    @overload
    def block_helper(self, helper_type: None = None, *, name: str | None = None) -> Callable[[H], H]: ...

    def block_helper(self, helper_type: Any = None, *, name: str | None = None) -> Any:
        """Class decorator registering a :class:`BlockHelper` subclass."""

        if helper_type is None:
            return lambda cls: self.register(cls, name)
        return self.register(helper_type, name)

    def helper(self, func: F | None = None, *, name: str | None = None) -> Any:
        """Function decorator registering an ambient helper.

        Ambient helpers receive the rendering context as their first argument.
        """

        def decorate(fn: F) -> F:
            if not callable(fn):
                raise TypeError(f"ambient helpers must be callable, got {fn!r}")
            key = self._claim(name or fn.__name__)
            self._ambient[key] = fn
            logger.debug("registered ambient helper %r", key)
            return fn

        if func is None:
            return decorate
        return decorate(func)

    def lookup(self, name: str) -> type[BlockHelper] | Callable[..., Any]:
        """Return the block helper type or ambient function registered as ``name``."""

        if name in self._block_helpers:
            return self._block_helpers[name]
        try:
            return self._ambient[name]
        except KeyError as exc:
            raise KeyError(f"No helper registered as {name!r}") from exc

    def block_helpers(self) -> Mapping[str, type[BlockHelper]]:
        return MappingProxyType(self._block_helpers)

    def ambient_helpers(self) -> Mapping[str, Callable[..., Any]]:
        return MappingProxyType(self._ambient)

    def names(self) -> list[str]:
        return [*self._block_helpers, *self._ambient]

    def __contains__(self, name: object) -> bool:
        return name in self._block_helpers or name in self._ambient

    def __len__(self) -> int:
        return len(self._block_helpers) + len(self._ambient)

    def _claim(self, name: str) -> str:
        if self._frozen:
            raise RuntimeError(f"Cannot register {name!r}: registry is frozen once a RenderContext uses it")
        key = name.strip()
        if not key or not key.isidentifier():
            raise ValueError(f"Helper name must be a valid identifier, got {name!r}")
        if key.startswith("_"):
            raise ValueError(f"Helper name must not start with an underscore: {name!r}")
        if key in reserved_names():
            raise ValueError(f"Helper name {key!r} is taken by a RenderContext or BlockHelper member")
        if key in self:
            raise ValueError(f"A helper named {key!r} is already registered")
        return key


__all__ = ["HelperRegistry", "reserved_names"]
