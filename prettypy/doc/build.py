"""Document constructors."""

from __future__ import annotations

from collections.abc import Iterable

from prettypy.doc.model import (
    ALIGN,
    BREAK,
    EMPTY,
    LEFT_FLUSH,
    LINE,
    UNALIGN,
    Doc,
    Literal,
    _concat,
)
from prettypy.text import spaces


def empty() -> Doc:
    return EMPTY


def concat(left: Doc, right: Doc) -> Doc:
    return _concat(left, right)


def concat_all(docs: Iterable[Doc]) -> Doc:
    """Left fold of `concat` over `docs`; `EMPTY` when there are none."""
    result: Doc = EMPTY
    for doc in docs:
        result = _concat(result, doc)
    return result


def text(s: str) -> Doc:
    if not s:
        return EMPTY
    return Literal(s)


def number(n: int) -> Doc:
    """Decimal rendering of an integer."""
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"number() expects an int, got {type(n).__name__}")
    return Literal(str(n))


def char(c: str) -> Doc:
    if len(c) != 1:
        raise ValueError(f"char() expects a single character, got {c!r}")
    return Literal(c)


def mandatory_line() -> Doc:
    return LINE


def left_flush() -> Doc:
    return LEFT_FLUSH


def optional_break() -> Doc:
    return BREAK


def push_align() -> Doc:
    return ALIGN


def pop_align() -> Doc:
    return UNALIGN


def indent(n: int, body: Doc) -> Doc:
    """`n` spaces, then `body` aligned to the column after them."""
    return concat_all((text(spaces(n)), ALIGN, body, UNALIGN))


def embed(doc: Doc) -> Doc:
    return doc
