"""Standard ambient helpers available to every rendering context.

These mirror the handful of tag helpers template authors expect out of the
box. Each takes the rendering context as its first argument, like helpers
registered through :meth:`block_helpers.HelperRegistry.helper`. Content and
attribute values are inserted verbatim; escaping is the caller's concern.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable


def tag_attributes(attrs: dict[str, Any]) -> str:
    """Render keyword arguments as an HTML attribute string.

    Trailing underscores are dropped (``class_`` -> ``class``), remaining
    underscores become dashes, ``None``/``False`` values are omitted and
    ``True`` renders the attribute name as its value.

    Examples
    --------
    >>> tag_attributes({"class_": "note", "data_id": 7, "hidden": None})
    ' class="note" data-id="7"'
    """

    parts: list[str] = []
    for key, value in attrs.items():
        if value is None or value is False:
            continue
        name = key.rstrip("_").replace("_", "-")
        rendered = name if value is True else value
        parts.append(f'{name}="{rendered}"')
    return "".join(f" {part}" for part in parts)


def content_tag(view: Any, name: str, content: Any = None, *, block: Callable[..., Any] | None = None, **attrs: Any) -> str:
    """Wrap ``content`` (or the captured ``block``) in a ``name`` element.

    Examples
    --------
    >>> content_tag(None, "div", "jelly")
    '<div>jelly</div>'
    """

    if block is not None:
        content = view.capture(block)
    body = "" if content is None else str(content)
    return f"<{name}{tag_attributes(attrs)}>{body}</{name}>"


def humanize(name: str) -> str:
    """Return a label-friendly version of a field name.

    Examples
    --------
    >>> humanize("user_id")
    'User'
    >>> humanize("first_name")
    'First name'
    """

    text = name[:-3] if name.endswith("_id") else name
    text = text.replace("_", " ").strip()
    return text[:1].upper() + text[1:]


def label_tag(view: Any, name: str, text: Any = None, **attrs: Any) -> str:
    """Return a ``<label>`` pointing at the field ``name``.

    Examples
    --------
    >>> label_tag(None, "hi")
    '<label for="hi">Hi</label>'
    """

    caption = humanize(name) if text is None else str(text)
    return content_tag(view, "label", caption, **{"for": name, **attrs})


def truncate(view: Any, text: str, length: int = 30, omission: str = "...", separator: str | None = None) -> str:
    """Shorten ``text`` to at most ``length`` characters including ``omission``.

    With ``separator`` the cut moves back to the last separator starting at or
    before the cut point, even if that leaves only ``omission``.

    Examples
    --------
    >>> truncate(None, "What's the different between half a duck?", length=6)
    'Wha...'
    >>> truncate(None, "Once upon a time in a world far far away", length=17, separator=" ")
    'Once upon a...'
    """

    if length < 0:
        raise ValueError("length must not be negative")
    if len(text) <= length:
        return text
    stop = max(length - len(omission), 0)
    if separator:
        cut = text.rfind(separator, 0, stop + len(separator))
        if cut != -1:
            stop = cut
    return text[:stop] + omission


STANDARD_HELPERS = MappingProxyType(
    {
        "content_tag": content_tag,
        "label_tag": label_tag,
        "truncate": truncate,
    }
)
"""Ambient helpers every context resolves after its registry."""


__all__ = ["STANDARD_HELPERS", "content_tag", "humanize", "label_tag", "truncate"]
