# simplenotes

A small desktop note editor (简单笔记). It edits plain-text files in UTF-8,
offers bold, italic, underline, font family, size and colour formatting in the
window, inserts pictures at the cursor, and swaps the contents of a single
toolbar to match whichever menu (File, Edit, Format, Insert, Help) was opened
last.

The window is built with Tkinter from the standard library, so nothing else
needs to be installed. On some Linux distributions Tkinter ships as a
separate system package (often called `python3-tk`).

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Starting the editor

```
simplenotes
simplenotes --version
```

The window opens on an untitled document named `未命名.txt`; its title is
`<name> - 简单笔记`, with a `*` after the name while there are unsaved
changes. The status bar shows the latest message ("文件已打开", "文件已保存",
"图片已插入" and so on), the document length and the cursor's line and
column. Creating, opening or closing while there are unsaved changes asks
whether to save (yes), discard (no) or cancel. Ctrl+N, Ctrl+O, Ctrl+S,
Ctrl+Shift+S and Ctrl+Q run the file commands.

## Menus and toolbar

| Menu | Toolbar shown when the menu opens |
|------|-----------------------------------|
| 文件 (File) | New, Open, Save, Save As, Exit |
| 编辑 (Edit) | Undo, Redo, Cut, Copy, Paste, Select All |
| 格式 (Format) | Font family, font size, B / I / U, text colour, font and colour dialogs |
| 插入 (Insert) | Insert image |
| 帮助 (Help) | About |

Font sizes 8 to 72 are offered in the size box; any positive whole number
typed there is accepted, anything else is ignored. Formatting applies to the
selection, or, with nothing selected, to the text typed next.

## Using the pieces from Python

The editing logic does not depend on the window and can be used on its own:

```python
from simplenotes.document import Document, cursor_position, length_label, line_col_label, stripped_name
from simplenotes.formatting import CharFormat, parse_font_size
from simplenotes.toolbar import ToolBar, ToolBarState, status_message, toolbar_items

doc = Document()
doc.set_text("hello\nworld")
print(doc.window_title())      # "未命名.txt* - 简单笔记"
doc.save("notes.txt")          # writes the text, binds the file, marks it unmodified
print(doc.window_title())      # "notes.txt - 简单笔记"

print(stripped_name("/home/me/notes.txt"))   # "notes.txt"
print(cursor_position("hello\nworld", 7))    # (2, 2)
print(length_label("hello"))                 # "长度: 5"
print(line_col_label(1, 1))                  # "行: 1, 列: 1"

print(parse_font_size("14"))   # 14; "abc", "0" or "-3" raise ValueError

bold = CharFormat(bold=True)
print(CharFormat(family="Arial").merge(bold))  # family and bold both set

bar = ToolBar()                # starts on ToolBarState.FILE
bar.show(ToolBarState.EDIT)    # True: contents changed
print(bar.items())             # ("undo", "redo", "separator", ...)
print(bar.status_message())    # "编辑工具栏"
```

`Document.save()` without a path writes to the bound file and raises
`ValueError` for an untitled document. `Document.load()` reads a UTF-8 file.

`simplenotes.gui.menu_layout()` describes the menus, their entries, shortcuts
and status tips. `simplenotes.gui.NotePadWindow` holds the window's
behaviour (new, open, save, save as, about, insert image, toolbar switching,
status bar updates) and draws through a view object passed to it;
`simplenotes.gui.main()` starts it with the Tkinter view.

## What it does not do

Files are saved as plain text only: fonts, colours, bold, italic, underline
and inserted pictures exist only in the open window and are lost on saving.
Pictures are limited to the formats Tkinter can load (PNG and GIF, plus
whatever else the local Tk supports).