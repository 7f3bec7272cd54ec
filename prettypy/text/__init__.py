"""Column arithmetic and source ranges."""

from prettypy.text.text import TextRange, advance_column, slice_text_range, spaces

__all__ = [
    "TextRange",
    "advance_column",
    "slice_text_range",
    "spaces",
]
