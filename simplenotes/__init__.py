"""A small desktop note editor: plain-text documents, character formats, a context toolbar and a Tkinter window."""

__version__ = "1.0.0"
__all__ = ["document", "formatting", "toolbar", "gui"]