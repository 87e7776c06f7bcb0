from __future__ import annotations

from typing import Any

import pytest

from block_helpers import BlockHelper, HelperRegistry, RenderContext


class Badge(BlockHelper):
    pass


def test_block_helper_decorator_derives_snake_case_names() -> None:
    registry = HelperRegistry()

    registry.block_helper(Badge)

    assert "badge" in registry
    assert registry.lookup("badge") is Badge


def test_block_helper_decorator_accepts_explicit_name() -> None:
    registry = HelperRegistry()

    @registry.block_helper(name="pill")
    class PillHelper(BlockHelper):
        pass

    assert registry.block_helpers() == {"pill": PillHelper}


def test_helper_decorator_registers_ambient_functions() -> None:
    registry = HelperRegistry()

    @registry.helper
    def shout(view: Any, text: str) -> str:
        return text.upper()

    @registry.helper(name="whisper")
    def _quiet(view: Any, text: str) -> str:
        return text.lower()

    view = RenderContext(registry)
    assert view.shout("hi") == "HI"
    assert view.whisper("HI") == "hi"
    assert set(registry.ambient_helpers()) == {"shout", "whisper"}


def test_ambient_helpers_receive_the_context() -> None:
    registry = HelperRegistry()
    seen: list[Any] = []

    @registry.helper
    def remember(view: Any) -> None:
        seen.append(view)

    view = RenderContext(registry)
    view.remember()

    assert seen == [view]


def test_duplicate_names_are_rejected() -> None:
    registry = HelperRegistry()
    registry.register(Badge)

    with pytest.raises(ValueError, match="already registered"):
        registry.register(Badge)
    with pytest.raises(ValueError, match="already registered"):
        registry.helper(lambda view: "x", name="badge")


@pytest.mark.parametrize("name", ["two words", "_hidden", "1st", "   "])
def test_invalid_names_are_rejected(name: str) -> None:
    registry = HelperRegistry()

    with pytest.raises(ValueError):
        registry.register(Badge, name)


@pytest.mark.parametrize(
    "name",
    ["output", "render", "concat", "capture", "invoke", "resolve", "sink", "registry", "helper", "parent", "build", "display", "renders"],
)
def test_names_of_context_and_helper_members_are_rejected(name: str) -> None:
    registry = HelperRegistry()

    with pytest.raises(ValueError, match="taken by a RenderContext or BlockHelper member"):
        registry.register(Badge, name)
    with pytest.raises(ValueError, match="taken by a RenderContext or BlockHelper member"):
        registry.helper(lambda view: "x", name=name)
    assert name not in registry


def test_helper_class_named_after_a_context_method_is_rejected() -> None:
    registry = HelperRegistry()

    class Output(BlockHelper):
        pass

    with pytest.raises(ValueError, match="'output'"):
        registry.block_helper(Output)

    view = RenderContext(registry)
    view.concat("kept")

    assert view.output() == "kept"


def test_non_helper_types_are_rejected() -> None:
    registry = HelperRegistry()

    with pytest.raises(TypeError):
        registry.register(object)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        registry.helper("not callable")  # type: ignore[arg-type]


def test_registry_freezes_when_a_context_uses_it() -> None:
    registry = HelperRegistry()
    registry.register(Badge)

    RenderContext(registry)

    assert registry.frozen
    with pytest.raises(RuntimeError, match="frozen"):
        registry.helper(lambda view: "late", name="late")


def test_lookup_of_unknown_name_raises_key_error() -> None:
    with pytest.raises(KeyError, match="nothing"):
        HelperRegistry().lookup("nothing")


def test_registered_ambient_helpers_shadow_standard_helpers() -> None:
    registry = HelperRegistry()

    @registry.helper
    def truncate(view: Any, text: str, length: int = 3) -> str:
        return text[:length]

    view = RenderContext(registry)

    assert view.truncate("abcdef") == "abc"


def test_nested_helper_types_are_collected_and_inherited() -> None:
    class Menu(BlockHelper):
        class MenuItem(BlockHelper):
            pass

    class SideMenu(Menu):
        class Divider(BlockHelper):
            pass

    assert dict(Menu.nested_helpers()) == {"menu_item": Menu.MenuItem}
    assert dict(SideMenu.nested_helpers()) == {"menu_item": Menu.MenuItem, "divider": SideMenu.Divider}
    assert dict(BlockHelper.nested_helpers()) == {}


def test_helpers_created_outside_a_context_are_unbound() -> None:
    badge = Badge()

    assert badge.parent is None
    with pytest.raises(RuntimeError, match="not bound"):
        badge.helper
