"""Document nodes.

A document is an immutable tree. Leaves carry text or layout hints; the only
interior node is `Concat`. Nodes are never mutated after construction, so a
single document can be laid out any number of times at different widths.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


class DocNode:
    """Common base for document nodes; `a + b` concatenates."""

    __slots__ = ()

    def __add__(self, other: object) -> Doc:
        if not isinstance(other, DocNode):
            return NotImplemented
        return _concat(self, other)  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class Empty(DocNode):
    """Prints nothing."""


@dataclass(frozen=True, slots=True)
class Literal(DocNode):
    """Fixed text, never broken by the layout engine."""

    text: str


@dataclass(frozen=True, slots=True)
class MandatoryBreak(DocNode):
    """Newline indented to the current alignment column."""


@dataclass(frozen=True, slots=True)
class LeftFlush(DocNode):
    """After a break: skip the indentation of the line that follows."""


@dataclass(frozen=True, slots=True)
class OptionalBreak(DocNode):
    """A space, or a newline + indent when the line would not fit."""


@dataclass(frozen=True, slots=True)
class PushAlign(DocNode):
    """Record the current column as the indentation target."""


@dataclass(frozen=True, slots=True)
class PopAlign(DocNode):
    """Restore the indentation target saved before the matching PushAlign."""


@dataclass(frozen=True, slots=True)
class Concat(DocNode):
    left: Doc
    right: Doc


type Doc = Empty | Literal | MandatoryBreak | LeftFlush | OptionalBreak | PushAlign | PopAlign | Concat

EMPTY: Final[Empty] = Empty()
LINE: Final[MandatoryBreak] = MandatoryBreak()
LEFT_FLUSH: Final[LeftFlush] = LeftFlush()
BREAK: Final[OptionalBreak] = OptionalBreak()
ALIGN: Final[PushAlign] = PushAlign()
UNALIGN: Final[PopAlign] = PopAlign()


def _concat(left: Doc, right: Doc) -> Doc:
    # Empty is the identity of concatenation; skip the node entirely.
    if isinstance(left, Empty):
        return right
    if isinstance(right, Empty):
        return left
    return Concat(left, right)


def is_empty(doc: Doc) -> bool:
    return isinstance(doc, Empty)
