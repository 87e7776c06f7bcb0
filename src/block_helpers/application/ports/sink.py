"""Sink port describing where rendered text is written.

Purpose
-------
Define the abstraction for adapters that receive template output, letting the
rendering context depend on a narrow protocol rather than a concrete stream.

Contents
--------
* :class:`OutputSinkPort` – runtime-checkable protocol with a single ``write``
  method.

System Role
-----------
Clarifies the output-facing boundary so adapters (in-memory buffers, text
streams, Rich consoles) can plug in without leaking implementation details.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class OutputSinkPort(Protocol):
    """Receive text emitted by a render pass."""

    def write(self, text: str) -> Any:
        """Accept ``text``; the return value is ignored."""


__all__ = ["OutputSinkPort"]
