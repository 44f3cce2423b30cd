from pathlib import Path

import pytest

from simplenotes.document import Document, length_label, line_col_label
from simplenotes.formatting import IMAGE_WIDTH, CharFormat
from simplenotes.gui import (
    ABOUT_TITLE,
    Menu,
    NotePadWindow,
    main,
    menu_layout,
)
from simplenotes.toolbar import ToolBarState, status_message, toolbar_items


class FakeView:
    def __init__(self):
        self.text = ""
        self.cursor = 0
        self.selection = False
        self.labels = {}
        self.title = ""
        self.toolbars = []
        self.enabled = {}
        self.edits = []
        self.formats = []
        self.images = []
        self.warnings = []
        self.abouts = []
        self.prompts = []
        self.open_requests = []
        self.closed = False
        self.open_answer = ""
        self.save_answer = ""
        self.save_changes_answer = None
        self.color_answer = None
        self.font_answer = None
        self.format_state = None
        self.current = CharFormat()
        self.controller = None

    def attach(self, controller):
        self.controller = controller

    def set_label(self, name, text):
        self.labels[name] = text

    def set_title(self, title):
        self.title = title

    def show_toolbar(self, state, items):
        self.toolbars.append((state, items))

    def set_text(self, text):
        self.text = text
        self.cursor = 0

    def get_text(self):
        return self.text

    def cursor_index(self):
        return self.cursor

    def has_selection(self):
        return self.selection

    def can_undo(self):
        return bool(self.text)

    def can_redo(self):
        return False

    def clipboard_has_text(self):
        return True

    def set_action_enabled(self, name, enabled):
        self.enabled[name] = enabled

    def edit(self, name):
        self.edits.append(name)

    def apply_format(self, fmt):
        self.formats.append(fmt)

    def current_format(self):
        return self.current

    def current_color(self):
        return "#000000"

    def show_format_state(self, fmt):
        self.format_state = fmt

    def insert_image(self, path, width):
        self.images.append((path, width))

    def ask_open_filename(self, title, filetypes):
        self.open_requests.append(title)
        return self.open_answer

    def ask_save_filename(self, title, initial, filetypes):
        return self.save_answer

    def ask_save_changes(self, title, message):
        self.prompts.append((title, message))
        return self.save_changes_answer

    def warning(self, title, message):
        self.warnings.append((title, message))

    def show_about(self, title, text):
        self.abouts.append((title, text))

    def ask_color(self, initial):
        return self.color_answer

    def ask_font(self, current):
        return self.font_answer

    def close(self):
        self.closed = True


def type_text(window, view, text):
    view.text = text
    view.cursor = len(text)
    window.actions["text_changed"]()


@pytest.fixture
def view():
    return FakeView()


@pytest.fixture
def window(view):
    return NotePadWindow(view)


def test_menu_titles_and_states():
    layout = menu_layout()
    assert all(isinstance(menu, Menu) for menu in layout)
    assert [m.title for m in layout] == ["文件(&F)", "编辑(&E)", "格式(&O)", "帮助(&H)", "插入(&I)"]
    assert [m.state for m in layout] == [
        ToolBarState.FILE, ToolBarState.EDIT, ToolBarState.FORMAT,
        ToolBarState.HELP, ToolBarState.INSERT,
    ]


def test_file_menu_entries_and_separators():
    file_menu = menu_layout()[0]
    names = [e.name if e else None for e in file_menu.entries]
    assert names == ["new", "open", None, "save", "save_as", None, "exit"]


def test_every_menu_entry_has_an_action(window):
    names = {e.name for m in menu_layout() for e in m.entries if e is not None}
    assert names <= set(window.actions)


def test_initial_window_state(window, view):
    assert view.title == "未命名.txt - 简单笔记"
    assert view.labels["status"] == status_message(ToolBarState.FILE)
    assert view.toolbars[-1] == (ToolBarState.FILE, toolbar_items(ToolBarState.FILE))
    assert view.labels["length"] == length_label("")
    assert view.labels["line_col"] == line_col_label(1, 1)


def test_typing_marks_document_modified(window, view):
    type_text(window, view, "hello")
    assert window.document.modified
    assert view.title == window.document.window_title()
    assert "*" in view.title


def test_maybe_save_cancel_keeps_text(window, view):
    type_text(window, view, "draft")
    view.save_changes_answer = None
    assert window.new_file() is False
    assert view.text == "draft"
    assert view.prompts and view.prompts[0][0] == "简单笔记"


def test_maybe_save_discard_clears(window, view):
    type_text(window, view, "draft")
    view.save_changes_answer = False
    assert window.new_file() is True
    assert view.text == ""
    assert not window.document.modified
    assert window.document.is_untitled


def test_maybe_save_save_writes_via_save_as(window, view, tmp_path):
    target = tmp_path / "notes.txt"
    type_text(window, view, "keep me")
    view.save_changes_answer = True
    view.save_answer = str(target)
    assert window.maybe_save() is True
    assert target.read_text(encoding="utf-8") == "keep me"
    assert window.document.current_file == str(target)


def test_no_prompt_when_unmodified(window, view):
    assert window.maybe_save() is True
    assert view.prompts == []


def test_open_file_loads_contents(window, view, tmp_path):
    source = tmp_path / "open.txt"
    source.write_text("line one\nline two", encoding="utf-8")
    view.open_answer = str(source)
    assert window.open_file() is True
    assert view.text == "line one\nline two"
    assert view.title == "open.txt - 简单笔记"
    assert view.labels["status"] == "文件已打开"
    assert not window.document.modified


def test_open_missing_file_warns(window, view, tmp_path):
    view.open_answer = str(tmp_path / "missing.txt")
    assert window.open_file() is False
    assert view.warnings[0][0] == "警告"
    assert view.warnings[0][1].startswith("无法打开文件:\n")


def test_open_cancelled_by_save_prompt_asks_nothing(window, view):
    type_text(window, view, "x")
    view.save_changes_answer = None
    assert window.open_file() is False
    assert view.open_requests == []


def test_save_bound_file(view, tmp_path):
    target = tmp_path / "bound.txt"
    target.write_text("old", encoding="utf-8")
    document = Document()
    document.set_current_file(str(target))
    window = NotePadWindow(view, document)
    type_text(window, view, "new contents")
    assert window.save_file() is True
    assert target.read_text(encoding="utf-8") == "new contents"
    assert view.labels["status"] == "文件已保存"
    assert "*" not in view.title


def test_save_as_cancelled(window, view):
    type_text(window, view, "text")
    view.save_answer = ""
    assert window.save_as_file() is False
    assert window.document.is_untitled
    assert window.document.modified


def test_save_to_directory_warns(window, view, tmp_path):
    type_text(window, view, "text")
    view.save_answer = str(tmp_path)
    assert window.save_file() is False
    assert view.warnings[0][1].startswith("无法保存文件:\n")


def test_about(window, view):
    window.about()
    assert ABOUT_TITLE == "关于简单笔记"
    assert len(view.abouts) == 1
    title, text = view.abouts[0]
    assert title == ABOUT_TITLE
    assert text.startswith("简单笔记 v1.0")
    assert window.document.modified is False
    assert window.document.window_title() == "未命名.txt - 简单笔记"


def test_insert_image(window, view):
    view.open_answer = ""
    assert window.insert_image() is False
    assert view.images == []
    view.open_answer = "picture.png"
    assert window.insert_image() is True
    assert view.images == [("picture.png", IMAGE_WIDTH)]
    assert view.labels["status"] == "图片已插入"


def test_update_status_bar(window, view):
    view.text = "ab\ncd"
    view.cursor = 4
    view.selection = True
    window.update_status_bar()
    assert view.labels["length"] == length_label("ab\ncd")
    assert view.labels["line_col"] == line_col_label(2, 2)
    assert view.enabled["cut"] is True and view.enabled["copy"] is True
    assert view.enabled["undo"] is True and view.enabled["redo"] is False


def test_show_toolbar_switches_once(window, view):
    assert window.show_toolbar(ToolBarState.FORMAT) is True
    assert view.toolbars[-1] == (ToolBarState.FORMAT, toolbar_items(ToolBarState.FORMAT))
    assert view.labels["status"] == status_message(ToolBarState.FORMAT)
    count = len(view.toolbars)
    assert window.show_toolbar(ToolBarState.FORMAT) is False
    assert len(view.toolbars) == count


def test_format_buttons_follow_cursor_only_on_format_toolbar(window, view):
    view.current = CharFormat(bold=True, point_size=14)
    window.actions["cursor_moved"]()
    assert view.format_state is None
    window.show_toolbar("format")
    window.actions["cursor_moved"]()
    assert view.format_state == CharFormat(bold=True, point_size=14)


def test_font_size_action(window, view):
    window.actions["font_size"]("abc")
    window.actions["font_size"]("0")
    assert view.formats == []
    window.actions["font_size"]("14")
    assert view.formats == [CharFormat(point_size=14)]


def test_toggle_actions(window, view):
    window.actions["bold"](True)
    window.actions["italic"](False)
    window.actions["underline"](True)
    assert view.formats == [CharFormat(bold=True), CharFormat(italic=False), CharFormat(underline=True)]


def test_color_and_font_dialogs(window, view):
    window.actions["color"]()
    window.actions["font"]()
    assert view.formats == []
    view.color_answer = "#ff0000"
    view.font_answer = CharFormat(family="Arial", point_size=20)
    window.actions["text_color"]()
    window.actions["font"]()
    assert view.formats == [CharFormat(color="#ff0000"), CharFormat(family="Arial", point_size=20)]


def test_edit_actions_reach_view(window, view):
    names = ("undo", "redo", "cut", "copy", "paste", "select_all")
    assert set(names) <= set(window.actions)
    for name in names:
        window.actions[name]()
    assert view.edits == ["undo", "redo", "cut", "copy", "paste", "select_all"]
    assert window.document.modified is False
    assert window.document.window_title() == "未命名.txt - 简单笔记"


def test_exit_respects_cancel(window, view):
    type_text(window, view, "unsaved")
    view.save_changes_answer = None
    assert window.actions["exit"]() is False
    assert view.closed is False
    view.save_changes_answer = False
    assert window.actions["exit"]() is True
    assert view.closed is True


def test_main_version_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--version"])
    assert info.value.code == 0
    assert "1.0" in capsys.readouterr().out


def test_save_round_trip_through_open(window, view, tmp_path):
    target = tmp_path / "trip.txt"
    type_text(window, view, "第一行\n第二行")
    view.save_answer = str(target)
    assert window.save_file() is True
    other_view = FakeView()
    other = NotePadWindow(other_view)
    other_view.open_answer = str(target)
    assert other.open_file() is True
    assert other_view.text == view.text
    assert Path(other.document.current_file).name == "trip.txt"