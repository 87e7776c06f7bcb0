"""Static package metadata surfaced by the CLI ``info`` command."""

from __future__ import annotations

from importlib import metadata as _metadata
from typing import Any, Callable

name = "block_helpers"
title = "Block helpers: custom block constructs for Python templates"
shell_command = "block-helpers"
homepage = "https://github.com/block-helpers/block_helpers"
author = "block_helpers contributors"


def _resolve_version() -> str:
    try:
        return _metadata.version(name)
    except _metadata.PackageNotFoundError:  # pragma: no cover - running from a source checkout
        return "0.0.0"


version = _resolve_version()


def info_lines() -> list[str]:
    """Return the metadata banner as individual lines."""

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    return [f"Info for {name}:", ""] + [f"    {label.ljust(pad)} = {value}" for label, value in fields]


def print_info(writer: Callable[[str], Any] | None = None) -> None:
    """Write the metadata banner, newline-terminated, through ``writer`` (``print`` by default)."""

    text = "\n".join(info_lines()) + "\n"
    if writer is None:
        print(text, end="")
    else:
        writer(text)


__all__ = ["info_lines", "print_info", "shell_command", "version"]
