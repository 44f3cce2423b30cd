"""The text document behind the editor: contents, file binding and status text."""

from __future__ import annotations

import os
from pathlib import Path

APP_TITLE = "简单笔记"
UNTITLED_NAME = "未命名.txt"
ENCODING = "utf-8"


def stripped_name(path: str | os.PathLike[str]) -> str:
    """Return the file-name part of *path*, without its directory."""
    return os.path.basename(os.fspath(path))


def _qt_length(text: str) -> int:
    """Length of *text* in UTF-16 code units, as the editor counts it."""
    return len(text.encode("utf-16-le")) // 2


def cursor_position(text: str, index: int) -> tuple[int, int]:
    """Return the 1-based (line, column) of character offset *index* in *text*."""
    if not 0 <= index <= len(text):
        raise ValueError(f"cursor index {index} outside 0..{len(text)}")
    before = text[:index]
    line = before.count("\n") + 1
    column = index - (before.rfind("\n") + 1) + 1
    return line, column


def length_label(text: str) -> str:
    """Status-bar text giving the length of the document."""
    return f"长度: {_qt_length(text)}"


def line_col_label(line: int, column: int) -> str:
    """Status-bar text giving the cursor line and column."""
    return f"行: {line}, 列: {column}"


class Document:
    """Plain-text contents of the editor together with the file they belong to."""

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.current_file = ""
        self.modified = False

    @property
    def is_untitled(self) -> bool:
        return not self.current_file

    def set_text(self, text: str) -> None:
        """Replace the contents; the document counts as modified if they changed."""
        if text != self.text:
            self.text = text
            self.modified = True

    def clear(self) -> None:
        """Remove all text."""
        self.set_text("")

    def load(self, path: str | os.PathLike[str]) -> None:
        """Read *path* into the document and bind the document to it."""
        with open(path, "r", encoding=ENCODING) as handle:
            contents = handle.read()
        self.text = contents
        self.set_current_file(os.fspath(path))

    def save(self, path: str | os.PathLike[str] | None = None) -> Path:
        """Write the contents to *path*, or to the bound file when *path* is None.

        Raises ValueError when no path is given and the document has no file.
        """
        if path is None:
            if self.is_untitled:
                raise ValueError("document has no file name; a path is required")
            path = self.current_file
        target = os.fspath(path)
        with open(target, "w", encoding=ENCODING) as handle:
            handle.write(self.text)
        self.set_current_file(target)
        return Path(target)

    def set_current_file(self, path: str | os.PathLike[str]) -> None:
        """Bind the document to *path* (empty for none) and mark it unmodified."""
        self.current_file = os.fspath(path) if path else ""
        self.modified = False

    def display_name(self) -> str:
        """Name shown for the document in the window title."""
        if self.is_untitled:
            return UNTITLED_NAME
        return stripped_name(self.current_file)

    def window_title(self) -> str:
        """Window title, with a '*' after the name while there are unsaved changes."""
        marker = "*" if self.modified else ""
        return f"{self.display_name()}{marker} - {APP_TITLE}"