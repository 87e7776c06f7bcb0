"""In-memory text buffer collecting captured template output.

Purpose
-------
Hold the text a block emits while a capture scope is open so the invocation
protocol can hand it to ``display`` instead of the live output stream.

Contents
--------
* :class:`OutputBuffer` – append-only chunk list with ``write``/``getvalue``.

System Role
-----------
The default root sink of a :class:`block_helpers.RenderContext` and the buffer
pushed by :meth:`block_helpers.domain.sinks.SinkStack.capture`.
"""

from __future__ import annotations


class OutputBuffer:
    """Collect text chunks written during a render or capture scope.

    Examples
    --------
    >>> buffer = OutputBuffer()
    >>> buffer.write("Hi ")
    3
    >>> buffer.write("there")
    5
    >>> buffer.getvalue()
    'Hi there'
    """

    __slots__ = ("_chunks",)

    def __init__(self) -> None:
        self._chunks: list[str] = []

    def write(self, text: str) -> int:
        """Append ``text`` and return the number of characters written."""

        text = str(text)
        if text:
            self._chunks.append(text)
        return len(text)

    def getvalue(self) -> str:
        """Return everything written so far as one string."""

        return "".join(self._chunks)

    def __len__(self) -> int:
        return sum(len(chunk) for chunk in self._chunks)

    def __bool__(self) -> bool:
        return bool(self._chunks)

    def __repr__(self) -> str:
        return f"OutputBuffer({self.getvalue()!r})"


__all__ = ["OutputBuffer"]
