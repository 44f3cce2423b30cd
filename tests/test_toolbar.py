import pytest

from simplenotes.toolbar import (
    SEPARATOR,
    ToolBar,
    ToolBarState,
    status_message,
    toolbar_items,
)


def test_initial_state_is_file():
    bar = ToolBar()
    assert bar.state is ToolBarState.FILE
    assert bar.status_message() == "文件工具栏"
    assert bar.items() == toolbar_items(ToolBarState.FILE)


@pytest.mark.parametrize(
    "state, message",
    [
        (ToolBarState.FILE, "文件工具栏"),
        (ToolBarState.EDIT, "编辑工具栏"),
        (ToolBarState.FORMAT, "格式工具栏"),
        (ToolBarState.INSERT, "插入工具栏"),
        (ToolBarState.HELP, "帮助工具栏"),
    ],
)
def test_status_messages(state, message):
    assert status_message(state) == message
    assert status_message(state.value) == message


@pytest.mark.parametrize("state", list(ToolBarState))
def test_separators_never_at_edges_or_doubled(state):
    items = toolbar_items(state)
    assert items
    assert items[0] != SEPARATOR
    assert items[-1] != SEPARATOR
    for left, right in zip(items, items[1:]):
        assert not (left == SEPARATOR and right == SEPARATOR)


def test_item_names_unique_across_states():
    names = [
        item
        for state in ToolBarState
        for item in toolbar_items(state)
        if item != SEPARATOR
    ]
    assert len(names) == len(set(names))


def test_show_switches_and_reports_rebuild():
    bar = ToolBar()
    assert bar.show(ToolBarState.EDIT) is True
    assert bar.state is ToolBarState.EDIT
    assert bar.items() == toolbar_items(ToolBarState.EDIT)
    assert bar.status_message() == "编辑工具栏"


def test_show_same_state_does_not_rebuild():
    bar = ToolBar()
    assert bar.show(ToolBarState.FILE) is False
    bar.show("help")
    assert bar.show(ToolBarState.HELP) is False
    assert bar.state is ToolBarState.HELP


def test_format_active_only_for_format():
    bar = ToolBar()
    assert bar.format_active is False
    bar.show(ToolBarState.FORMAT)
    assert bar.format_active is True
    bar.show(ToolBarState.INSERT)
    assert bar.format_active is False


def test_single_action_toolbars():
    assert len(toolbar_items(ToolBarState.INSERT)) == 1
    assert len(toolbar_items(ToolBarState.HELP)) == 1


def test_unknown_state_raises():
    with pytest.raises(ValueError):
        toolbar_items("view")
    with pytest.raises(ValueError):
        ToolBar().show("view")
    with pytest.raises(ValueError):
        status_message("")


def test_failed_show_keeps_state():
    bar = ToolBar()
    bar.show(ToolBarState.EDIT)
    with pytest.raises(ValueError):
        bar.show("bogus")
    assert bar.state is ToolBarState.EDIT