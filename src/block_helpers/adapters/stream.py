"""Sink adapter writing rendered text to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO

from block_helpers.application.ports.sink import OutputSinkPort


class StreamSink(OutputSinkPort):
    """Forward output to ``stream`` (``sys.stdout`` by default).

    Examples
    --------
    >>> from io import StringIO
    >>> target = StringIO()
    >>> sink = StreamSink(target)
    >>> sink.write("<p>Hi</p>")
    >>> target.getvalue()
    '<p>Hi</p>'
    """

    def __init__(self, stream: TextIO | None = None, *, flush: bool = False) -> None:
        self._stream = stream
        self._flush = flush

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, text: str) -> None:
        self.stream.write(text)
        if self._flush:
            self.stream.flush()


__all__ = ["StreamSink"]
