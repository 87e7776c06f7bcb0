"""Protocols the application layer depends on."""

from __future__ import annotations

from .context import RenderingContextPort
from .sink import OutputSinkPort

__all__ = ["OutputSinkPort", "RenderingContextPort"]
