"""External tool wrappers."""

from .clipboard import find_clipboard_tool, copy_to_clipboard

__all__ = [
    "find_clipboard_tool",
    "copy_to_clipboard",
]
