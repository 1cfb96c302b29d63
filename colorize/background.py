"""Shortcuts that give text one of the sixteen background colours."""

from __future__ import annotations

from colorize.ansi import DEFAULT_CONFIG, DEFAULT_FOREGROUND, Background, set_color

__all__ = [
    "black_background",
    "red_background",
    "green_background",
    "yellow_background",
    "blue_background",
    "magenta_background",
    "cyan_background",
    "white_background",
    "gray_background",
    "bright_red_background",
    "bright_green_background",
    "bright_yellow_background",
    "bright_blue_background",
    "bright_magenta_background",
    "bright_cyan_background",
    "bright_white_background",
]


def _paint(text: str, background: Background) -> str:
    return set_color(text, DEFAULT_CONFIG, background, DEFAULT_FOREGROUND)


def black_background(text: str) -> str:
    """Give *text* a black background."""
    return _paint(text, Background.BLACK)


def red_background(text: str) -> str:
    """Give *text* a red background."""
    return _paint(text, Background.RED)


def green_background(text: str) -> str:
    """Give *text* a green background."""
    return _paint(text, Background.GREEN)


def yellow_background(text: str) -> str:
    """Give *text* a yellow background."""
    return _paint(text, Background.YELLOW)


def blue_background(text: str) -> str:
    """Give *text* a blue background."""
    return _paint(text, Background.BLUE)


def magenta_background(text: str) -> str:
    """Give *text* a magenta background."""
    return _paint(text, Background.MAGENTA)


def cyan_background(text: str) -> str:
    """Give *text* a cyan background."""
    return _paint(text, Background.CYAN)


def white_background(text: str) -> str:
    """Give *text* a white background."""
    return _paint(text, Background.WHITE)


def gray_background(text: str) -> str:
    """Give *text* a gray (bright black) background."""
    return _paint(text, Background.GRAY)


def bright_red_background(text: str) -> str:
    """Give *text* a bright red background."""
    return _paint(text, Background.BRIGHT_RED)


def bright_green_background(text: str) -> str:
    """Give *text* a bright green background."""
    return _paint(text, Background.BRIGHT_GREEN)


def bright_yellow_background(text: str) -> str:
    """Give *text* a bright yellow background."""
    return _paint(text, Background.BRIGHT_YELLOW)


def bright_blue_background(text: str) -> str:
    """Give *text* a bright blue background."""
    return _paint(text, Background.BRIGHT_BLUE)


def bright_magenta_background(text: str) -> str:
    """Give *text* a bright magenta background."""
    return _paint(text, Background.BRIGHT_MAGENTA)


def bright_cyan_background(text: str) -> str:
    """Give *text* a bright cyan background."""
    return _paint(text, Background.BRIGHT_CYAN)


def bright_white_background(text: str) -> str:
    """Give *text* a bright white background."""
    return _paint(text, Background.BRIGHT_WHITE)