"""Use cases orchestrating helper invocation and output emission."""

from __future__ import annotations

from .emit import emit, requires_binding
from .invoke import DiagnosticHook, InvokeCallable, create_invoke_helper

__all__ = ["DiagnosticHook", "InvokeCallable", "create_invoke_helper", "emit", "requires_binding"]
