"""Shortcuts that colour text in one of the sixteen foreground colours."""

from __future__ import annotations

from colorize.ansi import DEFAULT_BACKGROUND, Config, Foreground, set_color

__all__ = [
    "black_text",
    "red_text",
    "green_text",
    "yellow_text",
    "blue_text",
    "magenta_text",
    "cyan_text",
    "white_text",
    "gray_text",
    "bright_red_text",
    "bright_green_text",
    "bright_yellow_text",
    "bright_blue_text",
    "bright_magenta_text",
    "bright_cyan_text",
    "bright_white_text",
]


def _paint(text: str, foreground: Foreground) -> str:
    return set_color(text, Config.DEFAULT, DEFAULT_BACKGROUND, foreground)


def black_text(text: str) -> str:
    """Colour *text* black."""
    return _paint(text, Foreground.BLACK)


def red_text(text: str) -> str:
    """Colour *text* red."""
    return _paint(text, Foreground.RED)


def green_text(text: str) -> str:
    """Colour *text* green."""
    return _paint(text, Foreground.GREEN)


def yellow_text(text: str) -> str:
    """Colour *text* yellow."""
    return _paint(text, Foreground.YELLOW)


def blue_text(text: str) -> str:
    """Colour *text* blue."""
    return _paint(text, Foreground.BLUE)


def magenta_text(text: str) -> str:
    """Colour *text* magenta."""
    return _paint(text, Foreground.MAGENTA)


def cyan_text(text: str) -> str:
    """Colour *text* cyan."""
    return _paint(text, Foreground.CYAN)


def white_text(text: str) -> str:
    """Colour *text* white."""
    return _paint(text, Foreground.WHITE)


def gray_text(text: str) -> str:
    """Colour *text* gray (bright black)."""
    return _paint(text, Foreground.GRAY)


def bright_red_text(text: str) -> str:
    """Colour *text* bright red."""
    return _paint(text, Foreground.BRIGHT_RED)


def bright_green_text(text: str) -> str:
    """Colour *text* bright green."""
    return _paint(text, Foreground.BRIGHT_GREEN)


def bright_yellow_text(text: str) -> str:
    """Colour *text* bright yellow."""
    return _paint(text, Foreground.BRIGHT_YELLOW)


def bright_blue_text(text: str) -> str:
    """Colour *text* bright blue."""
    return _paint(text, Foreground.BRIGHT_BLUE)


def bright_magenta_text(text: str) -> str:
    """Colour *text* bright magenta."""
    return _paint(text, Foreground.BRIGHT_MAGENTA)


def bright_cyan_text(text: str) -> str:
    """Colour *text* bright cyan."""
    return _paint(text, Foreground.BRIGHT_CYAN)


def bright_white_text(text: str) -> str:
    """Colour *text* bright white."""
    return _paint(text, Foreground.BRIGHT_WHITE)