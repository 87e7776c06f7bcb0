"""Domain value objects used by the block helper runtime."""

from __future__ import annotations

from .buffer import OutputBuffer
from .naming import helper_name
from .sinks import SinkStack
from .traits import DisplayMode, HelperTraits, RenderMode, check_render_flag

__all__ = [
    "DisplayMode",
    "HelperTraits",
    "OutputBuffer",
    "RenderMode",
    "SinkStack",
    "check_render_flag",
    "helper_name",
]
