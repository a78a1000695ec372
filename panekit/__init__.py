"""Layouts, focus handling, object-tree walking, menus and resources for user interfaces."""

__version__ = "0.1.0"