from __future__ import annotations

import pytest

from block_helpers.domain import OutputBuffer, SinkStack


def test_output_buffer_collects_chunks() -> None:
    buffer = OutputBuffer()
    assert not buffer

    buffer.write("<p>")
    buffer.write("")
    buffer.write("hi</p>")

    assert buffer
    assert len(buffer) == 9
    assert buffer.getvalue() == "<p>hi</p>"


def test_output_buffer_stringifies_values() -> None:
    buffer = OutputBuffer()
    buffer.write(42)  # type: ignore[arg-type]

    assert buffer.getvalue() == "42"


def test_sink_stack_writes_to_root_without_capture() -> None:
    root = OutputBuffer()
    stack = SinkStack(root)

    stack.write("live")

    assert stack.current() is root
    assert root.getvalue() == "live"
    assert stack.depth == 0


def test_capture_redirects_and_restores() -> None:
    root = OutputBuffer()
    stack = SinkStack(root)

    with stack.capture() as captured:
        assert stack.depth == 1
        assert stack.current() is captured
        stack.write("hidden")

    stack.write("shown")

    assert captured.getvalue() == "hidden"
    assert root.getvalue() == "shown"
    assert stack.depth == 0


def test_captures_nest() -> None:
    stack = SinkStack(OutputBuffer())

    with stack.capture() as outer:
        stack.write("a")
        with stack.capture() as inner:
            stack.write("b")
            assert stack.depth == 2
        stack.write(inner.getvalue().upper())

    assert outer.getvalue() == "aB"
    assert inner.getvalue() == "b"


def test_capture_restores_previous_sink_on_error() -> None:
    root = OutputBuffer()
    stack = SinkStack(root)

    with pytest.raises(ZeroDivisionError):
        with stack.capture():
            stack.write("lost")
            1 / 0

    assert stack.current() is root
    assert stack.depth == 0
    assert root.getvalue() == ""


def test_independent_stacks_do_not_share_state() -> None:
    first = SinkStack(OutputBuffer())
    second = SinkStack(OutputBuffer())

    with first.capture():
        assert second.depth == 0


def test_root_sink_must_be_writable() -> None:
    with pytest.raises(TypeError, match="write"):
        SinkStack(object())
