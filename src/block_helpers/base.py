"""Base class for helper objects handed to template blocks.

Purpose
-------
Give every helper type the wiring it needs to act inside a template: a
reference to the enclosing rendering context, a reference to the helper object
it is nested in, and a fixed set of capabilities (``concat``, ``capture``)
plus delegation to the ambient helpers the context knows about.

Contents
--------
* :class:`BlockHelper` – subclass it, add methods, optionally define
  ``display(body)`` and set ``renders = False`` to silence a type.

System Role
-----------
Helper objects are created per invocation by
:func:`block_helpers.application.use_cases.invoke.create_invoke_helper` through
:meth:`BlockHelper.build` and discarded once their output is emitted.

Attribute resolution
--------------------
1. Attributes defined on the helper type (normal Python lookup).
2. Helper types declared in the class body, invoked with ``parent=self``.
3. Names the enclosing context resolves: registered ambient helpers,
   registered block helpers and the standard tag helpers.

Anything else raises :class:`AttributeError`. ``helper`` is the explicit way
to reach the context when a helper method shadows an ambient one.
"""

from __future__ import annotations

from functools import partial
from types import MappingProxyType
from typing import Any, Callable, ClassVar, Mapping

from block_helpers.application.ports.context import RenderingContextPort
from block_helpers.application.use_cases.emit import emit
from block_helpers.domain.naming import helper_name
from block_helpers.domain.traits import check_render_flag


class BlockHelper:
    """Object backing one invocation of a custom template construct.

    Examples
    --------
    >>> from block_helpers import HelperRegistry, RenderContext
    >>> registry = HelperRegistry()
    >>> @registry.block_helper
    ... class Greeting(BlockHelper):
    ...     def hello(self):
    ...         return "Hi there"
    >>> view = RenderContext(registry)
    >>> _ = view.greeting(block=lambda g: view.concat(g.hello()))
    >>> view.output()
    'Hi there'
    """

    renders: ClassVar[bool] = True
    """Set to ``False`` to skip the block and emit nothing."""

    _nested_helpers: ClassVar[Mapping[str, type["BlockHelper"]]] = MappingProxyType({})

    _helper: RenderingContextPort | None = None
    _parent: "BlockHelper | None" = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        check_render_flag(cls)
        nested = dict(cls._nested_helpers)
        for value in vars(cls).values():
            if isinstance(value, type) and issubclass(value, BlockHelper):
                nested[helper_name(value)] = value
        cls._nested_helpers = MappingProxyType(nested)

    @classmethod
    def build(cls, context: RenderingContextPort, parent: "BlockHelper | None" = None, /, *args: Any, **kwargs: Any) -> "BlockHelper":
        """Create an instance wired to ``context`` and ``parent`` before ``__init__`` runs.

        ``__init__`` can therefore already call ambient helpers or read state
        from ``parent``.
        """

        helper = cls.__new__(cls)
        helper._helper = context
        helper._parent = parent
        helper.__init__(*args, **kwargs)
        return helper

    @classmethod
    def nested_helpers(cls) -> Mapping[str, type["BlockHelper"]]:
        """Return the helper types declared in this class body or inherited."""

        return cls._nested_helpers

    @property
    def helper(self) -> RenderingContextPort:
        """Return the enclosing rendering context."""

        if self._helper is None:
            raise RuntimeError(f"{type(self).__name__} is not bound to a rendering context; create it through a RenderContext")
        return self._helper

    @property
    def parent(self) -> "BlockHelper | None":
        """Return the helper object this one is nested in, if any."""

        return self._parent

    def concat(self, content: Any) -> None:
        """Emit ``content`` into the current output of the enclosing context."""

        emit(self.helper, content)

    def capture(self, block: Callable[..., Any], *args: Any) -> str:
        """Evaluate ``block`` and return its output instead of emitting it."""

        return self.helper.capture(block, *args)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        nested = type(self)._nested_helpers.get(name)
        if nested is not None:
            return partial(self.helper.invoke_type, nested, parent=self)
        try:
            return self.helper.resolve(name)
        except AttributeError:
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}") from None


__all__ = ["BlockHelper"]
