"""Unit tests for the state classes."""
from __future__ import annotations

from docstore_browser.tui_state import (
    AppContext,
    InCollection,
    InContainer,
    Root,
    SelectionList,
    header_rows,
    path_of,
)


def test_selection_list_positions_follow_display_order():
    items = SelectionList(["alpha", "beta", "gamma"])

    assert [item.position for item in items] == [0, 1, 2]
    assert items.labels() == ["alpha", "beta", "gamma"]
    assert len(items) == 3


def test_selection_list_resolve():
    items = SelectionList(["alpha", "beta"])

    assert items.resolve(0) == "alpha"
    assert items.resolve(1) == "beta"
    assert items.resolve(2) is None
    assert items.resolve(-1) is None


def test_selection_list_position_of():
    items = SelectionList(["alpha", "beta"])

    assert items.position_of("beta") == 1
    assert items.position_of("missing") is None


def test_selection_list_clamp():
    items = SelectionList(["a", "b", "c"])

    assert items.clamp(-3) == 0
    assert items.clamp(1) == 1
    assert items.clamp(10) == 2
    assert SelectionList().clamp(5) == 0


def test_selection_list_equality():
    assert SelectionList(["a", "b"]) == SelectionList(["a", "b"])
    assert SelectionList(["a", "b"]) != SelectionList(["b", "a"])


def test_header_rows_per_level():
    assert header_rows(Root()) == 0
    assert header_rows(InContainer("alpha")) == 1
    assert header_rows(InCollection("alpha", "beta")) == 1


def test_path_of_each_level():
    assert path_of(Root()) == ""
    assert path_of(InContainer("alpha")) == "/alpha"
    assert path_of(InCollection("alpha", "beta")) == "alpha/beta"


def test_app_context_starts_at_root_with_root_list():
    root = SelectionList(["alpha", "beta"])
    ctx = AppContext(root_items=root)

    assert ctx.state == Root()
    assert ctx.items is root
    assert ctx.selected == 0
    assert ctx.message is None
    assert ctx.previous_row == 0


def test_app_context_previous_row_comes_from_state():
    ctx = AppContext(root_items=SelectionList(["a", "b", "c"]))

    ctx.state = InContainer("c", root_row=2)
    assert ctx.previous_row == 2

    ctx.state = InCollection("c", "users", root_row=2, container_row=4)
    assert ctx.previous_row == 4
