"""ANSI SGR escape sequences: attribute and colour codes, applying and stripping them."""

from __future__ import annotations

import re
from enum import IntEnum

__all__ = [
    "Config",
    "Background",
    "Foreground",
    "DEFAULT_CONFIG",
    "DEFAULT_BACKGROUND",
    "DEFAULT_FOREGROUND",
    "set_color",
    "remove_color",
]


class Config(IntEnum):
    """Text attribute codes."""

    DEFAULT = 0
    BOLD = 1
    DIM = 2
    ITALIC = 3
    UNDERLINE = 4
    BLINKING = 5
    REVERSE = 7
    HIDDEN = 8


class Background(IntEnum):
    """Background colour codes."""

    BLACK = 40
    RED = 41
    GREEN = 42
    YELLOW = 43
    BLUE = 44
    MAGENTA = 45
    CYAN = 46
    WHITE = 47
    GRAY = 100
    BRIGHT_RED = 101
    BRIGHT_GREEN = 102
    BRIGHT_YELLOW = 103
    BRIGHT_BLUE = 104
    BRIGHT_MAGENTA = 105
    BRIGHT_CYAN = 106
    BRIGHT_WHITE = 107


class Foreground(IntEnum):
    """Text (foreground) colour codes."""

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37
    GRAY = 90
    BRIGHT_RED = 91
    BRIGHT_GREEN = 92
    BRIGHT_YELLOW = 93
    BRIGHT_BLUE = 94
    BRIGHT_MAGENTA = 95
    BRIGHT_CYAN = 96
    BRIGHT_WHITE = 97


DEFAULT_CONFIG: int = Config.DEFAULT
DEFAULT_BACKGROUND: int = 0
DEFAULT_FOREGROUND: int = Foreground.WHITE

_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*m")


def set_color(
    text: str,
    config: int = DEFAULT_CONFIG,
    background: int = DEFAULT_BACKGROUND,
    foreground: int = DEFAULT_FOREGROUND,
) -> str:
    """Wrap *text* in an SGR sequence with the given codes, followed by a reset."""
    return f"\x1b[{int(config)};{int(background)};{int(foreground)}m{text}\x1b[0m"


def remove_color(text: str) -> str:
    """Strip every SGR escape sequence from *text*."""
    return _ESCAPE_RE.sub("", text)