from dataclasses import dataclass


def advance_column(column: int, text: str) -> int:
    """Return the output column after writing `text` starting at `column`.

    Text is measured in code points. Embedded newlines reset the column to
    the width of whatever follows the last one.
    """
    last_newline = text.rfind("\n")
    if last_newline < 0:
        return column + len(text)
    return len(text) - last_newline - 1


def spaces(count: int) -> str:
    """A run of `count` spaces (empty for non-positive counts)."""
    if count <= 0:
        return ""
    return " " * count


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) in a template string.

    Invariant:
    - 0 <= start <= end
    """

    start: int
    end: int

    def __post_init__(self):
        if self.start < 0 or self.end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self.start > self.end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def empty(offset: int) -> "TextRange":
        """Create an empty TextRange at the given offset."""
        return TextRange(offset, offset)

    def as_tuple(self) -> tuple[int, int]:
        return (self.start, self.end)

    def __repr__(self) -> str:
        return f"TextRange({self.start}, {self.end})"


def slice_text_range(source: str, range: TextRange) -> str:
    """Get the substring of the source text covered by the given TextRange."""
    return source[range.start : range.end]
