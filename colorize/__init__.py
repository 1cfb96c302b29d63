"""Wrap text in ANSI colour and style escape codes, and strip them again.

Submodules: ``ansi`` (codes, ``set_color``, ``remove_color``), ``text``
(foreground shortcuts) and ``background`` (background shortcuts).
"""

__version__ = "0.1.0"

__all__ = ["ansi", "text", "background"]