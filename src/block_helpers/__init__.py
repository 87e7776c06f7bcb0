"""Public package surface for defining and rendering block helpers.

A block helper is a small object created per invocation of a template
construct. It is handed to the caller's block, exposes methods to it and may
wrap the block's captured output through ``display(body)``::

    registry = HelperRegistry()

    @registry.block_helper
    class Wrapping(BlockHelper):
        def display(self, body):
            return f"Before...{body}...after"

    view = RenderContext(registry)
    view.wrapping(block=lambda w: view.concat(" HELLO "))
    view.output()  # 'Before... HELLO ...after'
"""

from __future__ import annotations

from .adapters import RichConsoleSink, StreamSink
from .application.ports import OutputSinkPort, RenderingContextPort
from .base import BlockHelper
from .context import RenderContext
from .domain import DisplayMode, HelperTraits, OutputBuffer, RenderMode, helper_name
from .registry import HelperRegistry

__all__ = [
    "BlockHelper",
    "DisplayMode",
    "HelperRegistry",
    "HelperTraits",
    "OutputBuffer",
    "OutputSinkPort",
    "RenderContext",
    "RenderMode",
    "RenderingContextPort",
    "RichConsoleSink",
    "StreamSink",
    "helper_name",
]
