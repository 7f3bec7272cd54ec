"""Flat layout instructions."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Final


class OpKind(IntEnum):
    TEXT = 1
    LINE = 2  # mandatory break
    BREAK = 3  # optional break
    LEFT_FLUSH = 4
    ALIGN = 5
    UNALIGN = 6

    @property
    def is_breakpoint(self) -> bool:
        return self in (OpKind.LINE, OpKind.BREAK)


@dataclass(frozen=True, slots=True)
class Op:
    kind: OpKind
    text: str = ""
    # Columns occupied before the first newline of `text`.
    width: int = 0
    has_newline: bool = False

    @staticmethod
    def of_text(text: str) -> "Op":
        newline = text.find("\n")
        if newline < 0:
            return Op(OpKind.TEXT, text, len(text), False)
        return Op(OpKind.TEXT, text, newline, True)

    def __repr__(self) -> str:
        if self.kind == OpKind.TEXT:
            return f"Op(TEXT, {self.text!r})"
        return f"Op({self.kind.name})"


ELLIPSIS: Final[str] = "..."

LINE_OP: Final[Op] = Op(OpKind.LINE)
BREAK_OP: Final[Op] = Op(OpKind.BREAK)
LEFT_FLUSH_OP: Final[Op] = Op(OpKind.LEFT_FLUSH)
ALIGN_OP: Final[Op] = Op(OpKind.ALIGN)
UNALIGN_OP: Final[Op] = Op(OpKind.UNALIGN)
ELLIPSIS_OP: Final[Op] = Op.of_text(ELLIPSIS)


@dataclass(frozen=True, slots=True)
class LayoutProgram:
    """A document flattened into instructions, ready for the fitting pass."""

    ops: tuple[Op, ...]
    elided_groups: int = 0
    max_depth: int = 0

    def __len__(self) -> int:
        return len(self.ops)


def dump_ops(program: LayoutProgram) -> str:
    lines: list[str] = []
    depth = 0
    for index, op in enumerate(program.ops):
        if op.kind == OpKind.UNALIGN:
            depth -= 1
        pad = "  " * max(depth, 0)
        if op.kind == OpKind.TEXT:
            lines.append(f"{index:04d} {pad}TEXT {op.text!r} width={op.width}")
        else:
            lines.append(f"{index:04d} {pad}{op.kind.name}")
        if op.kind == OpKind.ALIGN:
            depth += 1
    return "\n".join(lines)
