"""The single main toolbar, whose contents follow the menu last opened."""

from __future__ import annotations

from enum import Enum

SEPARATOR = "separator"


class ToolBarState(Enum):
    """Which set of controls the main toolbar is showing."""

    FILE = "file"
    EDIT = "edit"
    FORMAT = "format"
    INSERT = "insert"
    HELP = "help"


_ITEMS: dict[ToolBarState, tuple[str, ...]] = {
    ToolBarState.FILE: (
        "new", "open", SEPARATOR,
        "save", "save_as", SEPARATOR,
        "exit",
    ),
    ToolBarState.EDIT: (
        "undo", "redo", SEPARATOR,
        "cut", "copy", "paste", SEPARATOR,
        "select_all",
    ),
    ToolBarState.FORMAT: (
        "font_family", "font_size", SEPARATOR,
        "bold", "italic", "underline", SEPARATOR,
        "text_color", "font", "color",
    ),
    ToolBarState.INSERT: ("insert_image",),
    ToolBarState.HELP: ("about",),
}

_MESSAGES: dict[ToolBarState, str] = {
    ToolBarState.FILE: "文件工具栏",
    ToolBarState.EDIT: "编辑工具栏",
    ToolBarState.FORMAT: "格式工具栏",
    ToolBarState.INSERT: "插入工具栏",
    ToolBarState.HELP: "帮助工具栏",
}


def _coerce(state: ToolBarState | str) -> ToolBarState:
    if isinstance(state, ToolBarState):
        return state
    try:
        return ToolBarState(state)
    except ValueError:
        raise ValueError(f"unknown toolbar state: {state!r}") from None


def toolbar_items(state: ToolBarState | str) -> tuple[str, ...]:
    """Names of the controls shown for *state*, in order, with separators."""
    return _ITEMS[_coerce(state)]


def status_message(state: ToolBarState | str) -> str:
    """Status-bar text shown when the toolbar switches to *state*."""
    return _MESSAGES[_coerce(state)]


class ToolBar:
    """The main toolbar; it starts with the file controls."""

    def __init__(self) -> None:
        self.state = ToolBarState.FILE

    def show(self, state: ToolBarState | str) -> bool:
        """Switch to *state*; return True if the contents were rebuilt."""
        target = _coerce(state)
        if target is self.state:
            return False
        self.state = target
        return True

    def items(self) -> tuple[str, ...]:
        """Controls currently on the toolbar."""
        return toolbar_items(self.state)

    def status_message(self) -> str:
        """Status-bar text for the current contents."""
        return status_message(self.state)

    @property
    def format_active(self) -> bool:
        """Whether the format controls are shown, so they track the cursor."""
        return self.state is ToolBarState.FORMAT