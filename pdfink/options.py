"""Options for text breaking, cell layout and font styles."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntFlag
from typing import Any, Optional


class BreakMode(Enum):
    """How over-long text lines are broken."""

    # Break as soon as the next character would not fit; the separator,
    # if any, is appended to the broken line.
    STRICT = 0
    # Break at the last break indicator; fall back to a strict break.
    INDICATOR_SENSITIVE = 1


@dataclass(frozen=True)
class BreakOption:
    """Configuration for splitting text into lines."""

    mode: BreakMode = BreakMode.STRICT
    break_indicator: str = ""
    separator: str = ""

    def has_separator(self) -> bool:
        """Whether a separator is appended to mid-word breaks."""
        return self.separator != ""


DEFAULT_BREAK_OPTION = BreakOption()


class Align(IntFlag):
    """Alignment and border flags for cells."""

    BOTTOM = 1
    RIGHT = 2
    TOP = 4
    LEFT = 8
    CENTER = 16
    MIDDLE = 32
    ALL_BORDERS = 15


class FontStyle(IntFlag):
    """Font style flags."""

    REGULAR = 0
    ITALIC = 1
    BOLD = 2
    UNDERLINE = 4


@dataclass
class CellOption:
    """Layout options for a text cell."""

    align: int = 0
    border: int = 0
    float_: int = 0
    transparency: Optional[Any] = None
    coef_underline_position: float = 0.0
    coef_line_height: float = 0.0
    coef_underline_thickness: float = 0.0
    ext_g_state_indexes: list[int] = field(default_factory=list)


def convert_font_style(style: str) -> FontStyle:
    """Turn a style string such as ``"BI"`` or ``"u"`` into style flags."""
    style = style.upper()
    result = FontStyle.REGULAR
    if "B" in style:
        result |= FontStyle.BOLD
    if "I" in style:
        result |= FontStyle.ITALIC
    if "U" in style:
        result |= FontStyle.UNDERLINE
    return result