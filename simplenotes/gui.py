"""The editor window: menus, toolbar, status bar and the file operations behind them."""

from __future__ import annotations

import argparse
import math
import os
import re
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable

from .document import APP_TITLE, Document, cursor_position, length_label, line_col_label
from .formatting import (
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE,
    FONT_SIZES,
    IMAGE_WIDTH,
    CharFormat,
    parse_font_size,
)
from .toolbar import SEPARATOR, ToolBar, ToolBarState

APP_VERSION = "1.0"
READY = "就绪"
WARNING_TITLE = "警告"
TEXT_FILE_TYPES = (("文本文件", "*.txt"), ("所有文件", "*.*"))
IMAGE_FILE_TYPES = (("图片文件", "*.png *.jpg *.jpeg *.bmp *.gif"),)
ABOUT_TITLE = "关于简单笔记"
ABOUT_TEXT = (
    f"简单笔记 v{APP_VERSION}\n\n"
    "一个简单的文本编辑器\n"
    "支持基本的文本编辑和格式化功能"
)
SAVE_CHANGES_TEXT = "文档已被修改。\n是否要保存更改?"

_MNEMONIC = re.compile(r"\(&.\)")


@dataclass(frozen=True)
class MenuEntry:
    """One command in a menu."""

    name: str
    label: str
    status_tip: str
    shortcut: str = ""
    tool_tip: str = ""


@dataclass(frozen=True)
class Menu:
    """A top-level menu; opening it switches the toolbar to *state*."""

    title: str
    state: ToolBarState
    entries: tuple[MenuEntry | None, ...]


def menu_layout() -> tuple[Menu, ...]:
    """The menu bar, in order; None in a menu's entries marks a separator."""
    return (
        Menu("文件(&F)", ToolBarState.FILE, (
            MenuEntry("new", "新建(&N)", "创建新文档", "Ctrl+N"),
            MenuEntry("open", "打开(&O)", "打开现有文档", "Ctrl+O"),
            None,
            MenuEntry("save", "保存(&S)", "保存当前文档", "Ctrl+S"),
            MenuEntry("save_as", "另存为(&A)", "将文档另存为新文件", "Ctrl+Shift+S"),
            None,
            MenuEntry("exit", "退出(&X)", "退出应用程序", "Ctrl+Q"),
        )),
        Menu("编辑(&E)", ToolBarState.EDIT, (
            MenuEntry("undo", "撤销(&U)", "撤销上一步操作", "Ctrl+Z"),
            MenuEntry("redo", "重做(&R)", "重做上一步操作", "Ctrl+Y"),
            None,
            MenuEntry("cut", "剪切(&T)", "剪切选定内容", "Ctrl+X"),
            MenuEntry("copy", "复制(&C)", "复制选定内容", "Ctrl+C"),
            MenuEntry("paste", "粘贴(&P)", "粘贴剪贴板内容", "Ctrl+V"),
            None,
            MenuEntry("select_all", "全选(&A)", "选择全部内容", "Ctrl+A"),
        )),
        Menu("格式(&O)", ToolBarState.FORMAT, (
            MenuEntry("font", "字体(&F)", "设置文本字体"),
            MenuEntry("color", "颜色(&C)", "设置文本颜色"),
        )),
        Menu("帮助(&H)", ToolBarState.HELP, (
            MenuEntry("about", "关于(&A)", "关于此应用程序"),
        )),
        Menu("插入(&I)", ToolBarState.INSERT, (
            MenuEntry("insert_image", "", "在光标位置插入图片", tool_tip="插入图片"),
        )),
    )


class NotePadWindow:
    """The editor's behaviour, drawn and asked for input through a *view*."""

    def __init__(self, view: Any, document: Document | None = None) -> None:
        self.view = view
        self.document = document if document is not None else Document()
        self.toolbar = ToolBar()
        self.actions: dict[str, Callable[..., Any]] = {
            "new": self.new_file,
            "open": self.open_file,
            "save": self.save_file,
            "save_as": self.save_as_file,
            "exit": self._close,
            "undo": partial(self._edit, "undo"),
            "redo": partial(self._edit, "redo"),
            "cut": partial(self._edit, "cut"),
            "copy": partial(self._edit, "copy"),
            "paste": partial(self._edit, "paste"),
            "select_all": partial(self._edit, "select_all"),
            "font": self._choose_font,
            "color": self._choose_color,
            "text_color": self._choose_color,
            "about": self.about,
            "insert_image": self.insert_image,
            "font_family": self._font_family_changed,
            "font_size": self._font_size_changed,
            "bold": self._bold_clicked,
            "italic": self._italic_clicked,
            "underline": self._underline_clicked,
            "text_changed": self._text_changed,
            "cursor_moved": self._cursor_moved,
        }
        view.attach(self)
        view.set_label("status", READY)
        self._render_toolbar()
        view.set_text(self.document.text)
        self._set_current_file(self.document.current_file)
        self.update_status_bar()

    # File operations

    def new_file(self) -> bool:
        """Start an empty untitled document, after offering to save changes."""
        if not self.maybe_save():
            return False
        self.document.clear()
        self.view.set_text("")
        self._set_current_file("")
        self.update_status_bar()
        return True

    def open_file(self) -> bool:
        """Ask for a file and load it; return True if a file was opened."""
        if not self.maybe_save():
            return False
        path = self.view.ask_open_filename("打开文件", TEXT_FILE_TYPES)
        if not path:
            return False
        try:
            self.document.load(path)
        except (OSError, UnicodeDecodeError) as exc:
            self.view.warning(WARNING_TITLE, "无法打开文件:\n" + str(exc))
            return False
        self.view.set_text(self.document.text)
        self._set_current_file(self.document.current_file)
        self.view.set_label("status", "文件已打开")
        self.update_status_bar()
        return True

    def save_file(self) -> bool:
        """Save to the bound file, or ask for one when untitled."""
        if self.document.is_untitled:
            return self.save_as_file()
        return self._write(None)

    def save_as_file(self) -> bool:
        """Ask for a file name and save there; return True if saved."""
        path = self.view.ask_save_filename("保存文件", self.document.current_file, TEXT_FILE_TYPES)
        if not path:
            return False
        return self._write(path)

    def _write(self, path: str | None) -> bool:
        self.document.set_text(self.view.get_text())
        try:
            self.document.save(path)
        except OSError as exc:
            self.view.warning(WARNING_TITLE, "无法保存文件:\n" + str(exc))
            return False
        self._refresh_title()
        self.view.set_label("status", "文件已保存")
        return True

    def maybe_save(self) -> bool:
        """Offer to save unsaved changes; return False if the user cancels."""
        if not self.document.modified:
            return True
        answer = self.view.ask_save_changes(APP_TITLE, SAVE_CHANGES_TEXT)
        if answer is None:
            return False
        if answer:
            self.save_file()
        return True

    def _close(self) -> bool:
        if not self.maybe_save():
            return False
        self.view.close()
        return True

    def _set_current_file(self, path: str) -> None:
        self.document.set_current_file(path)
        self._refresh_title()

    def _refresh_title(self) -> None:
        self.view.set_title(self.document.window_title())

    # Help and insertion

    def about(self) -> None:
        """Show the about box."""
        self.view.show_about(ABOUT_TITLE, ABOUT_TEXT)

    def insert_image(self) -> bool:
        """Ask for a picture and put it at the cursor; return True if inserted."""
        path = self.view.ask_open_filename("选择图片", IMAGE_FILE_TYPES)
        if not path:
            return False
        try:
            self.view.insert_image(path, IMAGE_WIDTH)
        except OSError as exc:
            self.view.warning(WARNING_TITLE, "无法插入图片:\n" + str(exc))
            return False
        self.view.set_label("status", "图片已插入")
        return True

    # Editing

    def _edit(self, name: str) -> None:
        self.view.edit(name)
        self.update_status_bar()

    def _text_changed(self) -> None:
        self.document.set_text(self.view.get_text())
        self._refresh_title()
        self.update_status_bar()

    def _cursor_moved(self) -> None:
        self.update_status_bar()
        self._update_format_buttons()

    def update_status_bar(self) -> None:
        """Refresh length, cursor position and the enabled state of edit actions."""
        text = self.view.get_text()
        self.view.set_label("length", length_label(text))
        index = min(max(self.view.cursor_index(), 0), len(text))
        self.view.set_label("line_col", line_col_label(*cursor_position(text, index)))
        self.view.set_action_enabled("undo", self.view.can_undo())
        self.view.set_action_enabled("redo", self.view.can_redo())
        selected = self.view.has_selection()
        self.view.set_action_enabled("cut", selected)
        self.view.set_action_enabled("copy", selected)
        self.view.set_action_enabled("paste", self.view.clipboard_has_text())

    # Formatting

    def _choose_font(self) -> None:
        chosen = self.view.ask_font(self.view.current_format())
        if chosen is not None:
            self.view.apply_format(chosen)

    def _choose_color(self) -> None:
        color = self.view.ask_color(self.view.current_color())
        if color:
            self.view.apply_format(CharFormat(color=color))

    def _font_family_changed(self, family: str) -> None:
        if family:
            self.view.apply_format(CharFormat(family=family))

    def _font_size_changed(self, text: str) -> None:
        try:
            size = parse_font_size(text)
        except ValueError:
            return
        self.view.apply_format(CharFormat(point_size=size))

    def _bold_clicked(self, checked: bool) -> None:
        self.view.apply_format(CharFormat(bold=bool(checked)))

    def _italic_clicked(self, checked: bool) -> None:
        self.view.apply_format(CharFormat(italic=bool(checked)))

    def _underline_clicked(self, checked: bool) -> None:
        self.view.apply_format(CharFormat(underline=bool(checked)))

    def _update_format_buttons(self) -> None:
        if self.toolbar.format_active:
            self.view.show_format_state(self.view.current_format())

    # Toolbar

    def show_toolbar(self, state: ToolBarState | str) -> bool:
        """Switch the toolbar to *state*; return True if its contents changed."""
        if not self.toolbar.show(state):
            return False
        self._render_toolbar()
        self._update_format_buttons()
        return True

    def _render_toolbar(self) -> None:
        self.view.show_toolbar(self.toolbar.state, self.toolbar.items())
        self.view.set_label("status", self.toolbar.status_message())


def _mnemonic(label: str) -> tuple[str, int]:
    """Split a '&'-marked label into display text and underline position."""
    position = label.find("&")
    if position < 0:
        return label, -1
    return label[:position] + label[position + 1:], position


def _tk_sequence(shortcut: str) -> str:
    *modifiers, key = shortcut.split("+")
    shifted = "Shift" in modifiers
    names = ["Control" if m == "Ctrl" else m for m in modifiers if m != "Shift"]
    names.append(key.upper() if shifted else key.lower())
    return "<" + "-".join(names) + ">"


def _breaking(callback: Callable[[], Any]) -> Callable[[Any], str]:
    def handler(_event: Any) -> str:
        callback()
        return "break"
    return handler


_TOGGLE_FONTS = {
    "bold": ("B", ("Arial", 10, "bold"), "加粗"),
    "italic": ("I", ("Arial", 10, "italic"), "斜体"),
    "underline": ("U", ("Arial", 10, "underline"), "下划线"),
}


class _TkView:
    """Draws the editor with tkinter."""

    def __init__(self) -> None:
        import tkinter as tk
        from tkinter import colorchooser, filedialog, messagebox, ttk
        from tkinter import font as tkfont

        self._tk, self._ttk, self._tkfont = tk, ttk, tkfont
        self._filedialog, self._messagebox, self._colorchooser = filedialog, messagebox, colorchooser
        self.root = tk.Tk()
        self.root.minsize(800, 600)
        self.root.geometry("1000x700")
        self._controller: NotePadWindow | None = None
        self._menu_items: dict[str, tuple[Any, int]] = {}
        self._tool_widgets: dict[str, Any] = {}
        self._enabled: dict[str, bool] = {}
        self._formats: dict[str, CharFormat] = {}
        self._pending = CharFormat()
        self._images: list[Any] = []
        self._toggles = {name: tk.BooleanVar(self.root, False) for name in _TOGGLE_FONTS}
        self._family = tk.StringVar(self.root, DEFAULT_FONT_FAMILY)
        self._size = tk.StringVar(self.root, str(DEFAULT_FONT_SIZE))
        self._tool_labels = {"text_color": "A"}
        for menu in menu_layout():
            for entry in menu.entries:
                if entry is not None:
                    self._tool_labels[entry.name] = _MNEMONIC.sub("", entry.label) or entry.tool_tip

        self.toolbar_frame = ttk.Frame(self.root)
        self.toolbar_frame.pack(side="top", fill="x")
        status = ttk.Frame(self.root)
        status.pack(side="bottom", fill="x")
        self._labels = {
            "status": ttk.Label(status, text=READY),
            "line_col": ttk.Label(status, text=line_col_label(1, 1)),
            "length": ttk.Label(status, text=length_label("")),
        }
        self._labels["status"].pack(side="left", padx=8)
        self._labels["line_col"].pack(side="right", padx=8)
        self._labels["length"].pack(side="right", padx=8)
        self.text = tk.Text(self.root, undo=True, wrap="word",
                            font=(DEFAULT_FONT_FAMILY, DEFAULT_FONT_SIZE))
        self.text.pack(side="top", fill="both", expand=True)
        self.text.bindtags((str(self.text), "Text", "PostInsert", ".", "all"))
        self.text.bind_class("PostInsert", "<KeyPress>", self._after_key)

    def attach(self, controller: NotePadWindow) -> None:
        tk = self._tk
        self._controller = controller
        actions = controller.actions
        menubar = tk.Menu(self.root)
        for spec in menu_layout():
            menu = tk.Menu(menubar, tearoff=False,
                           postcommand=partial(controller.show_toolbar, spec.state))
            for entry in spec.entries:
                if entry is None:
                    menu.add_separator()
                    continue
                label, underline = _mnemonic(entry.label or entry.tool_tip)
                menu.add_command(label=label, underline=underline,
                                 accelerator=entry.shortcut, command=actions[entry.name])
                self._menu_items[entry.name] = (menu, menu.index("end"))
                if entry.shortcut and spec.state is ToolBarState.FILE:
                    sequence = _tk_sequence(entry.shortcut)
                    self.text.bind(sequence, _breaking(actions[entry.name]))
                    self.root.bind(sequence, _breaking(actions[entry.name]))
            menu.bind("<<MenuSelect>>", partial(self._menu_hover, menu, spec.entries))
            title, underline = _mnemonic(spec.title)
            menubar.add_cascade(label=title, underline=underline, menu=menu)
        self.root.config(menu=menubar)
        self.root.protocol("WM_DELETE_WINDOW", actions["exit"])
        self.text.bind("<<Modified>>", self._on_modified)
        self.text.bind("<KeyRelease>", lambda _e: actions["cursor_moved"](), add="+")
        self.text.bind("<ButtonRelease-1>", self._on_click, add="+")

    def run(self) -> None:
        self.root.mainloop()

    def close(self) -> None:
        self.root.destroy()

    # Event handlers

    def _menu_hover(self, menu: Any, entries: tuple[MenuEntry | None, ...], _event: Any) -> None:
        index = menu.index("active")
        if index is None or not 0 <= index < len(entries) or entries[index] is None:
            return
        self.set_label("status", entries[index].status_tip)

    def _on_modified(self, _event: Any) -> None:
        if self.text.edit_modified():
            self.text.edit_modified(False)
            if self._controller is not None:
                self._controller.actions["text_changed"]()

    def _on_click(self, _event: Any) -> None:
        self._pending = CharFormat()
        if self._controller is not None:
            self._controller.actions["cursor_moved"]()

    def _after_key(self, event: Any) -> None:
        if not (event.char and event.char.isprintable()):
            return
        if self.text.compare("insert", "<=", "1.0"):
            return
        before = "insert-2c" if self.text.compare("insert-1c", ">", "1.0") else None
        base = self._format_at(before) if before else CharFormat()
        fmt = base.merge(self._pending)
        self._tag_range("insert-1c", "insert", fmt)

    # Text contents

    def set_text(self, text: str) -> None:
        for tag in self._formats:
            self.text.tag_remove(tag, "1.0", "end")
        self.text.delete("1.0", "end")
        self.text.insert("1.0", text)
        self.text.edit_reset()
        self._pending = CharFormat()

    def get_text(self) -> str:
        return self.text.get("1.0", "end-1c")

    def cursor_index(self) -> int:
        return len(self.text.get("1.0", "insert"))

    def has_selection(self) -> bool:
        return bool(self.text.tag_ranges("sel"))

    def can_undo(self) -> bool:
        try:
            return bool(int(self.text.edit("canundo")))
        except (self._tk.TclError, ValueError):
            return True

    def can_redo(self) -> bool:
        try:
            return bool(int(self.text.edit("canredo")))
        except (self._tk.TclError, ValueError):
            return True

    def clipboard_has_text(self) -> bool:
        try:
            return bool(self.root.clipboard_get())
        except self._tk.TclError:
            return False

    def edit(self, name: str) -> None:
        events = {"cut": "<<Cut>>", "copy": "<<Copy>>", "paste": "<<Paste>>"}
        try:
            if name == "undo":
                self.text.edit_undo()
            elif name == "redo":
                self.text.edit_redo()
            elif name == "select_all":
                self.text.tag_add("sel", "1.0", "end-1c")
            else:
                self.text.event_generate(events[name])
        except self._tk.TclError:
            pass

    def insert_image(self, path: str, width: int) -> None:
        try:
            image = self._tk.PhotoImage(master=self.root, file=path)
        except self._tk.TclError as exc:
            raise OSError(str(exc)) from exc
        current = image.width()
        if current > width:
            image = image.subsample(math.ceil(current / width))
        elif 0 < current and width // current > 1:
            image = image.zoom(width // current)
        self.text.image_create("insert", image=image)
        self._images.append(image)

    # Character formats

    def _format_at(self, index: str) -> CharFormat:
        for tag in self.text.tag_names(index):
            if tag in self._formats:
                return self._formats[tag]
        return CharFormat()

    def _tag_range(self, start: str, end: str, fmt: CharFormat) -> None:
        for tag in self.text.tag_names(start):
            if tag in self._formats:
                self.text.tag_remove(tag, start, end)
        name = fmt.tag_name()
        if name not in self._formats:
            styles = [style for style, on in
                      (("bold", fmt.bold), ("italic", fmt.italic), ("underline", fmt.underline)) if on]
            font = (fmt.family or DEFAULT_FONT_FAMILY, fmt.point_size or DEFAULT_FONT_SIZE, *styles)
            options = {"foreground": fmt.color} if fmt.color else {}
            self.text.tag_configure(name, font=font, **options)
            self._formats[name] = fmt
        self.text.tag_add(name, start, end)
        self.text.tag_raise("sel")

    def apply_format(self, fmt: CharFormat) -> None:
        ranges = self.text.tag_ranges("sel")
        if not ranges:
            self._pending = self._pending.merge(fmt)
            return
        index, end = self.text.index(ranges[0]), self.text.index(ranges[1])
        while self.text.compare(index, "<", end):
            following = self.text.index(f"{index}+1c")
            self._tag_range(index, following, self._format_at(index).merge(fmt))
            index = following

    def current_format(self) -> CharFormat:
        index = "insert-1c" if self.text.compare("insert", ">", "1.0") else "insert"
        return self._format_at(index).merge(self._pending)

    def current_color(self) -> str:
        return self.current_format().color or str(self.text.cget("foreground"))

    def show_format_state(self, fmt: CharFormat) -> None:
        self._toggles["bold"].set(bool(fmt.bold))
        self._toggles["italic"].set(bool(fmt.italic))
        self._toggles["underline"].set(bool(fmt.underline))
        self._family.set(fmt.family or DEFAULT_FONT_FAMILY)
        if fmt.point_size:
            self._size.set(str(fmt.point_size))

    # Window chrome

    def set_title(self, title: str) -> None:
        self.root.title(title)

    def set_label(self, name: str, text: str) -> None:
        self._labels[name].config(text=text)

    def set_action_enabled(self, name: str, enabled: bool) -> None:
        self._enabled[name] = enabled
        state = "normal" if enabled else "disabled"
        if name in self._menu_items:
            menu, index = self._menu_items[name]
            menu.entryconfigure(index, state=state)
        widget = self._tool_widgets.get(name)
        if widget is not None:
            widget.configure(state=state)

    def show_toolbar(self, _state: ToolBarState, items: tuple[str, ...]) -> None:
        tk, ttk = self._tk, self._ttk
        actions = self._controller.actions if self._controller else {}
        for child in self.toolbar_frame.winfo_children():
            child.destroy()
        self._tool_widgets.clear()
        for item in items:
            if item == SEPARATOR:
                ttk.Separator(self.toolbar_frame, orient="vertical").pack(
                    side="left", fill="y", padx=4, pady=2)
                continue
            if item == "font_family":
                widget = ttk.Combobox(self.toolbar_frame, textvariable=self._family, width=20,
                                      values=sorted(set(self._tkfont.families(self.root))))
                widget.bind("<<ComboboxSelected>>",
                            lambda _e: actions["font_family"](self._family.get()))
            elif item == "font_size":
                widget = ttk.Combobox(self.toolbar_frame, textvariable=self._size,
                                      values=FONT_SIZES, width=5)
                for sequence in ("<<ComboboxSelected>>", "<Return>"):
                    widget.bind(sequence, lambda _e: actions["font_size"](self._size.get()))
            elif item in _TOGGLE_FONTS:
                text, font, _tip = _TOGGLE_FONTS[item]
                variable = self._toggles[item]
                widget = tk.Checkbutton(
                    self.toolbar_frame, text=text, font=font, variable=variable,
                    indicatoron=False, width=3,
                    command=lambda n=item, v=variable: actions[n](v.get()))
            else:
                widget = ttk.Button(self.toolbar_frame, text=self._tool_labels.get(item, item),
                                    command=actions[item])
            if not self._enabled.get(item, True):
                widget.configure(state="disabled")
            widget.pack(side="left", padx=2, pady=2)
            self._tool_widgets[item] = widget

    # Dialogs

    def ask_open_filename(self, title: str, filetypes: tuple[tuple[str, str], ...]) -> str:
        chosen = self._filedialog.askopenfilename(parent=self.root, title=title, filetypes=filetypes)
        return chosen if isinstance(chosen, str) else ""

    def ask_save_filename(self, title: str, initial: str,
                          filetypes: tuple[tuple[str, str], ...]) -> str:
        chosen = self._filedialog.asksaveasfilename(
            parent=self.root, title=title, filetypes=filetypes, defaultextension=".txt",
            initialfile=os.path.basename(initial), initialdir=os.path.dirname(initial) or None)
        return chosen if isinstance(chosen, str) else ""

    def ask_save_changes(self, title: str, message: str) -> bool | None:
        return self._messagebox.askyesnocancel(title, message, icon="warning", parent=self.root)

    def warning(self, title: str, message: str) -> None:
        self._messagebox.showwarning(title, message, parent=self.root)

    def show_about(self, title: str, text: str) -> None:
        self._messagebox.showinfo(title, text, parent=self.root)

    def ask_color(self, initial: str) -> str | None:
        try:
            _rgb, chosen = self._colorchooser.askcolor(color=initial, parent=self.root)
        except self._tk.TclError:
            _rgb, chosen = self._colorchooser.askcolor(parent=self.root)
        return chosen

    def ask_font(self, current: CharFormat) -> CharFormat | None:
        tk, ttk = self._tk, self._ttk
        top = tk.Toplevel(self.root)
        top.title("字体")
        top.transient(self.root)
        family = tk.StringVar(top, current.family or DEFAULT_FONT_FAMILY)
        size = tk.StringVar(top, str(current.point_size or DEFAULT_FONT_SIZE))
        bold = tk.BooleanVar(top, bool(current.bold))
        italic = tk.BooleanVar(top, bool(current.italic))
        underline = tk.BooleanVar(top, bool(current.underline))
        ttk.Combobox(top, textvariable=family, width=28,
                     values=sorted(set(self._tkfont.families(self.root)))).grid(
            row=0, column=0, columnspan=2, padx=8, pady=4, sticky="ew")
        ttk.Combobox(top, textvariable=size, values=FONT_SIZES, width=6).grid(
            row=0, column=2, padx=8, pady=4)
        for column, (label, variable) in enumerate(
                (("加粗", bold), ("斜体", italic), ("下划线", underline))):
            ttk.Checkbutton(top, text=label, variable=variable).grid(row=1, column=column, padx=8)
        result: dict[str, CharFormat] = {}

        def accept() -> None:
            try:
                point_size = parse_font_size(size.get())
            except ValueError:
                self._messagebox.showwarning(WARNING_TITLE, "字号无效", parent=top)
                return
            result["format"] = CharFormat(family=family.get(), point_size=point_size,
                                          bold=bold.get(), italic=italic.get(),
                                          underline=underline.get())
            top.destroy()

        ttk.Button(top, text="确定", command=accept).grid(row=2, column=1, pady=8)
        ttk.Button(top, text="取消", command=top.destroy).grid(row=2, column=2, pady=8)
        top.grab_set()
        self.root.wait_window(top)
        return result.get("format")


def main(argv: list[str] | None = None) -> int:
    """Open the editor window and run it until it is closed."""
    parser = argparse.ArgumentParser(prog="simplenotes", description=APP_TITLE)
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    parser.parse_args(argv)
    view = _TkView()
    NotePadWindow(view)
    view.run()
    return 0