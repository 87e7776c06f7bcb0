from __future__ import annotations

import pytest

from block_helpers import RenderContext
from block_helpers.tags import STANDARD_HELPERS, content_tag, humanize, label_tag, tag_attributes, truncate


def test_standard_helpers_table() -> None:
    assert set(STANDARD_HELPERS) == {"content_tag", "label_tag", "truncate"}


def test_content_tag_with_attributes() -> None:
    html = content_tag(None, "span", "x", class_="pill", data_role="tag", disabled=True, hidden=False)

    assert html == '<span class="pill" data-role="tag" disabled="disabled">x</span>'


def test_content_tag_without_content() -> None:
    assert content_tag(None, "div") == "<div></div>"


def test_content_tag_captures_a_block() -> None:
    view = RenderContext()

    html = view.content_tag("p", block=lambda: view.concat("inside"))

    assert html == "<p>inside</p>"
    assert view.output() == ""


def test_label_tag_uses_explicit_text() -> None:
    assert label_tag(None, "email", "E-mail", class_="req") == '<label for="email" class="req">E-mail</label>'


@pytest.mark.parametrize(
    ("name", "expected"),
    [("hi", "Hi"), ("user_id", "User"), ("first_name", "First name"), ("", "")],
)
def test_humanize(name: str, expected: str) -> None:
    assert humanize(name) == expected


@pytest.mark.parametrize(
    ("text", "kwargs", "expected"),
    [
        ("short", {"length": 10}, "short"),
        ("exactly10!", {"length": 10}, "exactly10!"),
        ("What's the different between half a duck?", {"length": 6}, "Wha..."),
        ("Hello World", {"length": 8, "omission": "~"}, "Hello W~"),
        ("Hello big World", {"length": 12, "separator": " "}, "Hello big..."),
        ("ab--cd--efgh", {"length": 9, "separator": "--"}, "ab--cd..."),
        (" abcdefgh", {"length": 6, "separator": " "}, "..."),
        ("abcdefgh", {"length": 6, "separator": " "}, "abc..."),
        ("abcdef", {"length": 2}, "..."),
    ],
)
def test_truncate(text: str, kwargs: dict, expected: str) -> None:
    assert truncate(None, text, **kwargs) == expected


def test_truncate_rejects_negative_length() -> None:
    with pytest.raises(ValueError):
        truncate(None, "abc", length=-1)


def test_tag_attributes_empty() -> None:
    assert tag_attributes({}) == ""
