"""Width-fitting layout over a flattened program.

One forward pass over the instructions decides every optional break. In
fitted mode a break is taken when the text between it and the next
breakpoint (the next optional or mandatory break, or the end of the
document) would push the line past the width if kept on the current line.
Each segment is measured exactly once by a scan pointer that only moves
forward, so the whole pass is linear in the size of the program.

Indentation after a newline is written lazily, in front of the next piece
of text, so blank lines carry no trailing spaces and a following left-flush
can drop it.
"""

from __future__ import annotations

from collections.abc import Iterator

from prettypy.doc.model import Doc
from prettypy.layout.flatten import flatten
from prettypy.layout.options import LayoutOptions, resolve_options
from prettypy.layout.program import LayoutProgram, OpKind
from prettypy.text import advance_column, spaces


class LayoutEngine:
    """Lays out one program at one width. Not reusable across calls."""

    def __init__(self, program: LayoutProgram, width: int, options: LayoutOptions) -> None:
        self._ops = program.ops
        self._width = width
        self._ragged = options.is_ragged
        self._column = 0
        self._align_stack: list[int] = []
        # Indentation owed to the current line; None when nothing is pending.
        self._pending_indent: int | None = None
        self._scan_pos = 0
        self._segment_width = 0
        self._measured = 0
        self._taken_breaks = 0

    @property
    def column(self) -> int:
        return self._column

    @property
    def indentation(self) -> int:
        """Current indentation target; 0 when no alignment is open."""
        return self._align_stack[-1] if self._align_stack else 0

    @property
    def depth(self) -> int:
        return len(self._align_stack)

    @property
    def measured(self) -> int:
        """Number of instructions visited by lookahead so far."""
        return self._measured

    @property
    def taken_breaks(self) -> int:
        return self._taken_breaks

    def fragments(self) -> Iterator[str]:
        ops = self._ops
        for index, op in enumerate(ops):
            kind = op.kind
            if kind == OpKind.TEXT:
                if self._pending_indent:
                    yield spaces(self._pending_indent)
                self._pending_indent = None
                self._column = advance_column(self._column, op.text)
                yield op.text
            elif kind == OpKind.BREAK:
                if self._should_break(index):
                    self._taken_breaks += 1
                    yield from self._newline()
                else:
                    if self._pending_indent:
                        yield spaces(self._pending_indent)
                    self._pending_indent = None
                    self._column += 1
                    yield " "
            elif kind == OpKind.LINE:
                yield from self._newline()
            elif kind == OpKind.LEFT_FLUSH:
                if self._pending_indent is not None:
                    self._pending_indent = None
                    self._column = 0
            elif kind == OpKind.ALIGN:
                self._align_stack.append(self._column)
            elif kind == OpKind.UNALIGN:
                self._align_stack.pop()

    def _newline(self) -> Iterator[str]:
        target = self.indentation
        self._pending_indent = target
        self._column = target
        yield "\n"

    def _should_break(self, index: int) -> bool:
        if self._width <= 0:
            return True
        if self._ragged:
            return self._column > self._width
        return self._column + 1 + self._measure_segment(index) > self._width

    def _measure_segment(self, index: int) -> int:
        """Width of the text between the break at `index` and the next breakpoint."""
        ops = self._ops
        if self._scan_pos <= index:
            pos = index + 1
            width = 0
            while pos < len(ops):
                op = ops[pos]
                self._measured += 1
                if op.kind.is_breakpoint:
                    break
                width += op.width
                pos += 1
                if op.has_newline:
                    break
            self._scan_pos = pos
            self._segment_width = width
        return self._segment_width


def layout(doc: Doc, width: int, options: LayoutOptions | None = None) -> Iterator[str]:
    """Lay out `doc` at `width` and return an iterator of output fragments.

    Raises UnbalancedAlignmentError before any fragment is produced when the
    document's alignment nesting does not balance.
    """
    resolved = resolve_options(options)
    program = flatten(doc, resolved.print_depth)
    return LayoutEngine(program, width, resolved).fragments()
