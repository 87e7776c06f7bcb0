"""Rich-powered sink adapter implementing :class:`OutputSinkPort`.

Purpose
-------
Send rendered template text to a terminal through Rich so the CLI honours the
colour controls of :mod:`block_helpers.config`.

Contents
--------
* :class:`RichConsoleSink` - adapter constructed by ``block_helpers render``.

System Role
-----------
Human-facing sink. Rendered markup is printed literally: Rich markup parsing
and highlighting are disabled so square brackets and tags survive unchanged.
"""

from __future__ import annotations

from rich.console import Console

from block_helpers.application.ports.sink import OutputSinkPort


class RichConsoleSink(OutputSinkPort):
    """Print output chunks to a Rich console."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
        style: str | None = None,
    ) -> None:
        """Configure the sink with colour overrides and an optional style."""
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=force_color or None, no_color=no_color)
        self._no_color = no_color
        self._style = style

    @property
    def console(self) -> Console:
        return self._console

    def write(self, text: str) -> None:
        """Print ``text`` without adding a newline.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True)
        >>> sink = RichConsoleSink(console=console)
        >>> sink.write("[b]literal[/b]")
        >>> console.export_text()
        '[b]literal[/b]'
        """
        style = None if self._no_color else self._style
        self._console.print(text, style=style, markup=False, highlight=False, emoji=False, end="", soft_wrap=True)


__all__ = ["RichConsoleSink"]
