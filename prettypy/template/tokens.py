"""Template tokens."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Final

from prettypy.text import TextRange


class TemplateTokenKind(IntEnum):
    EOF = 1

    # -------------------------
    # Plain text
    # -------------------------
    TEXT = 10
    NEWLINE = 11  # literal "\n"

    # -------------------------
    # `%` conversions
    # -------------------------
    CONVERSION = 20  # %d %5.2f %-8s ...
    PERCENT = 21  # %%
    THUNK = 22  # %t
    APPLY = 23  # %a

    # -------------------------
    # `@` layout escapes
    # -------------------------
    ALIGN = 30  # @[
    UNALIGN = 31  # @]
    LINE = 32  # @!
    BREAK = 33  # @?
    LEFT_FLUSH = 34  # @<
    AT = 35  # @@

    # Malformed directive, already reported as a diagnostic.
    ERROR = 40

    @property
    def consumes_arguments(self) -> int:
        if self in (TemplateTokenKind.CONVERSION, TemplateTokenKind.THUNK):
            return 1
        if self == TemplateTokenKind.APPLY:
            return 2
        return 0

    @property
    def starts_line(self) -> bool:
        return self in (TemplateTokenKind.LINE, TemplateTokenKind.NEWLINE)


ESCAPES: Final[dict[str, TemplateTokenKind]] = {
    "[": TemplateTokenKind.ALIGN,
    "]": TemplateTokenKind.UNALIGN,
    "!": TemplateTokenKind.LINE,
    "?": TemplateTokenKind.BREAK,
    "<": TemplateTokenKind.LEFT_FLUSH,
    "@": TemplateTokenKind.AT,
}

CONVERSION_CHARS: Final[frozenset[str]] = frozenset("diuxXosrcfFeEgG")
NUMERIC_CONVERSIONS: Final[frozenset[str]] = frozenset("diuxXofFeEgG")
FLAG_CHARS: Final[frozenset[str]] = frozenset("-+ #0")


@dataclass(frozen=True, slots=True)
class TemplateToken:
    kind: TemplateTokenKind
    range: TextRange
    # Full `%...` directive for CONVERSION tokens, e.g. "%-5d".
    directive: str = ""

    @property
    def conversion(self) -> str:
        return self.directive[-1:] if self.kind == TemplateTokenKind.CONVERSION else ""
