"""Adapters implementing :class:`OutputSinkPort` for concrete targets."""

from __future__ import annotations

from .console import RichConsoleSink
from .stream import StreamSink

__all__ = ["RichConsoleSink", "StreamSink"]
