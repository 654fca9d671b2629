"""Single-document plain-text editor engine with linear undo/redo."""

__all__ = [
    "adapters",
    "buffer",
    "commands",
    "dispatch",
    "keymaps",
    "runtime",
]

__version__ = "0.1.0"
