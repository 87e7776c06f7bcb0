"""Scoped output redirection built atop :mod:`contextvars`.

Purpose
-------
Route template output either to the live sink of a render pass or, while a
capture scope is open, into a fresh :class:`OutputBuffer` whose text is handed
back to the caller instead of reaching the live stream.

Contents
--------
* :class:`SinkStack` – root sink plus a stack of capture buffers with a
  :meth:`SinkStack.capture` context manager that restores the previous sink on
  exit.

System Role
-----------
Backs ``concat`` and ``capture`` on :class:`block_helpers.RenderContext`.
Capture scopes nest, so captured output may itself contain further
capture/emit cycles.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator
import contextvars

from .buffer import OutputBuffer


class SinkStack:
    """Manage the sink that template output is currently written to."""

    _stack_var: contextvars.ContextVar[tuple[OutputBuffer, ...]]

    def __init__(self, root: Any) -> None:
        if not callable(getattr(root, "write", None)):
            raise TypeError(f"sink must provide a write() method, got {type(root).__name__}")
        self._root = root
        self._stack_var = contextvars.ContextVar("block_helpers_sink_stack", default=())

    @property
    def root(self) -> Any:
        """Return the live sink output reaches when no capture is open."""

        return self._root

    @property
    def depth(self) -> int:
        """Return the number of capture scopes currently open."""

        return len(self._stack_var.get())

    def current(self) -> Any:
        """Return the innermost capture buffer, or the root sink."""

        stack = self._stack_var.get()
        return stack[-1] if stack else self._root

    def write(self, text: str) -> None:
        """Write ``text`` to the current sink."""

        self.current().write(text)

    @contextmanager
    def capture(self) -> Iterator[OutputBuffer]:
        """Redirect output into a new buffer for the duration of the scope.

        Examples
        --------
        >>> stack = SinkStack(OutputBuffer())
        >>> with stack.capture() as captured:
        ...     stack.write("inner")
        >>> captured.getvalue(), stack.root.getvalue()
        ('inner', '')
        """

        buffer = OutputBuffer()
        token = self._stack_var.set(self._stack_var.get() + (buffer,))
        try:
            yield buffer
        finally:
            self._stack_var.reset(token)


__all__ = ["SinkStack"]
