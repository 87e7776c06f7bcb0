"""Optional capabilities a helper type may declare.

Purpose
-------
Turn the two optional behaviours of a helper type into explicit variants that
the invocation protocol checks once per call instead of probing the object
repeatedly.

Contents
--------
* :class:`DisplayMode` – ``TRANSFORM`` when the type defines ``display``,
  ``PASS_THROUGH`` otherwise.
* :class:`RenderMode` – ``RENDERS`` or ``NEVER``.
* :class:`HelperTraits` – immutable pair computed by :meth:`HelperTraits.of`.

System Role
-----------
Consumed by :mod:`block_helpers.application.use_cases.invoke`. Traits are
derived from the class at call time, so a ``display`` added to a base class
after registration is honoured by every subclass.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from enum import Enum
from typing import Any


class DisplayMode(Enum):
    """How captured output reaches the template."""

    TRANSFORM = "transform"
    PASS_THROUGH = "pass_through"


class RenderMode(Enum):
    """Whether a helper type renders at all."""

    RENDERS = "renders"
    NEVER = "never"


@dataclass(slots=True, frozen=True)
class HelperTraits:
    """Capabilities resolved for one helper type."""

    display_mode: DisplayMode
    render_mode: RenderMode

    @property
    def displays(self) -> bool:
        return self.display_mode is DisplayMode.TRANSFORM

    @property
    def renders(self) -> bool:
        return self.render_mode is RenderMode.RENDERS

    @classmethod
    def of(cls, helper_type: type) -> "HelperTraits":
        """Inspect ``helper_type`` for ``display`` and the ``renders`` flag.

        ``renders`` may be a plain class attribute, a ``staticmethod`` or a
        ``classmethod`` answering the same question (see :func:`check_render_flag`).

        Examples
        --------
        >>> class Wrapping:
        ...     def display(self, body):
        ...         return f"[{body}]"
        >>> HelperTraits.of(Wrapping).display_mode
        <DisplayMode.TRANSFORM: 'transform'>
        >>> class Silent:
        ...     renders = False
        >>> HelperTraits.of(Silent).render_mode
        <RenderMode.NEVER: 'never'>
        """

        display = getattr(helper_type, "display", None)
        display_mode = DisplayMode.TRANSFORM if callable(display) else DisplayMode.PASS_THROUGH

        flag = check_render_flag(helper_type)
        if callable(flag):
            flag = flag()
        render_mode = RenderMode.RENDERS if flag else RenderMode.NEVER
        return cls(display_mode=display_mode, render_mode=render_mode)


def check_render_flag(helper_type: type) -> Any:
    """Return the class-level ``renders`` declaration of ``helper_type``.

    The flag is read before any helper object exists, so only forms that
    answer at class level are accepted: a plain value, a ``staticmethod`` or a
    ``classmethod``. Instance methods and properties raise :class:`TypeError`.

    Examples
    --------
    >>> class Quiet:
    ...     @property
    ...     def renders(self):
    ...         return False
    >>> check_render_flag(Quiet)
    Traceback (most recent call last):
    ...
    TypeError: Quiet.renders must be a value, staticmethod or classmethod, not property
    """

    declared = inspect.getattr_static(helper_type, "renders", True)
    if hasattr(declared, "__get__") and not isinstance(declared, (staticmethod, classmethod)):
        raise TypeError(f"{helper_type.__name__}.renders must be a value, staticmethod or classmethod, not {type(declared).__name__}")
    return getattr(helper_type, "renders", True)


__all__ = ["DisplayMode", "HelperTraits", "RenderMode", "check_render_flag"]
