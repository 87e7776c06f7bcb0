"""Sample helpers and template rendered by ``block-helpers render``.

The module doubles as a worked example: a wrapping helper with ``display``, a
helper with a nested helper type that reads state from its outer helper, and
an ambient helper function.
"""

from __future__ import annotations

from typing import Any

from .base import BlockHelper
from .registry import HelperRegistry

registry = HelperRegistry()


@registry.helper
def site_name(view: Any) -> str:
    return "Block Helpers"


@registry.block_helper
class Card(BlockHelper):
    def __init__(self, title: str) -> None:
        self.title = title

    def heading(self) -> str:
        return self.content_tag("h2", self.title)

    def display(self, body: str | None) -> str:
        inner = self.heading() + (body or "")
        return self.content_tag("section", inner, class_="card")


@registry.block_helper
class Checklist(BlockHelper):
    def __init__(self) -> None:
        self.done = 0

    class Item(BlockHelper):
        def __init__(self, done: bool = False) -> None:
            self.done = done
            self.number = self.parent.done + 1 if done else None
            if done:
                self.parent.done += 1

        def display(self, body: str | None) -> str:
            mark = f"[x{self.number}]" if self.done else "[ ]"
            return self.content_tag("li", f"{mark} {(body or '').strip()}")

    def display(self, body: str | None) -> str:
        return self.content_tag("ul", body or "", data_done=self.done)


def page(view: Any) -> None:
    """Render a card holding a checklist."""

    def card_body(card: Card) -> None:
        def items(checklist: Checklist) -> None:
            checklist.item(done=True, block=lambda item: "Define helper types")
            checklist.item(done=True, block=lambda item: "Register them")
            checklist.item(block=lambda item: f"Render with {view.site_name()}")

        view.checklist(block=items)

    view.card("Getting started", block=card_body)
    view.concat("\n")


__all__ = ["Card", "Checklist", "page", "registry"]
