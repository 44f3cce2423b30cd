"""Character formats applied to editor text, and font-size parsing."""

from __future__ import annotations

import re
from dataclasses import dataclass, fields, replace

DEFAULT_FONT_FAMILY = "Consolas"
DEFAULT_FONT_SIZE = 12
FONT_SIZES = (
    "8", "9", "10", "11", "12", "14", "16", "18",
    "20", "22", "24", "26", "28", "36", "48", "72",
)
IMAGE_WIDTH = 300

_INT_MAX = 2**31 - 1
_INTEGER = re.compile(r"\s*([+-]?\d+)\s*")


@dataclass(frozen=True)
class CharFormat:
    """A set of character properties; None means the property is not set."""

    family: str | None = None
    point_size: int | None = None
    bold: bool | None = None
    italic: bool | None = None
    underline: bool | None = None
    color: str | None = None

    def merge(self, other: CharFormat) -> CharFormat:
        """Return this format with every property set in *other* taking precedence."""
        changes = {
            f.name: getattr(other, f.name)
            for f in fields(other)
            if getattr(other, f.name) is not None
        }
        return replace(self, **changes)

    def tag_name(self) -> str:
        """A stable name identifying exactly this combination of properties."""
        parts = [
            f"{f.name}={getattr(self, f.name)}"
            for f in fields(self)
            if getattr(self, f.name) is not None
        ]
        return "fmt:" + ";".join(parts)


def parse_font_size(text: str) -> int:
    """Parse a font size typed in the size box.

    Raises ValueError unless *text* is a positive integer.
    """
    match = _INTEGER.fullmatch(text)
    if match is None:
        raise ValueError(f"not a font size: {text!r}")
    size = int(match.group(1))
    if size <= 0 or size > _INT_MAX:
        raise ValueError(f"font size out of range: {text!r}")
    return size