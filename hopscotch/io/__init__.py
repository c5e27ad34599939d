"""Reading and writing board layouts."""

from .layout import (
    BoardLayout,
    LayoutError,
    format_layout,
    load_layout,
    parse_layout,
    random_layout,
    save_layout,
)

__all__ = [
    "BoardLayout",
    "LayoutError",
    "format_layout",
    "load_layout",
    "parse_layout",
    "random_layout",
    "save_layout",
]
