"""Document tree -> flat instruction list.

The walk uses an explicit stack, so documents built from long left- or
right-leaning `Concat` chains never hit the interpreter recursion limit.
Alignment balance is checked here, before the fitting pass produces any
output, and groups nested deeper than the configured print depth collapse to
a single ellipsis.
"""

from __future__ import annotations

import structlog

from prettypy.diagnostics import LAYOUT_UNCLOSED_ALIGN, LAYOUT_UNMATCHED_UNALIGN, Diagnostic
from prettypy.doc.model import (
    Concat,
    Doc,
    Empty,
    LeftFlush,
    Literal,
    MandatoryBreak,
    OptionalBreak,
    PopAlign,
    PushAlign,
)
from prettypy.errors import UnbalancedAlignmentError
from prettypy.layout.program import (
    ALIGN_OP,
    BREAK_OP,
    ELLIPSIS_OP,
    LEFT_FLUSH_OP,
    LINE_OP,
    UNALIGN_OP,
    LayoutProgram,
    Op,
)

logger = structlog.get_logger(__name__)


def flatten(doc: Doc, print_depth: int | None = None) -> LayoutProgram:
    ops: list[Op] = []
    depth = 0
    max_depth = 0
    # Nesting inside the group currently being elided; 0 when not eliding.
    skipping = 0
    elided = 0
    leaf_index = 0

    stack: list[Doc] = [doc]
    while stack:
        node = stack.pop()

        if isinstance(node, Concat):
            # push in reverse so the left side is processed first
            stack.append(node.right)
            stack.append(node.left)
            continue

        if isinstance(node, Empty):
            continue

        leaf_index += 1

        if skipping:
            if isinstance(node, PushAlign):
                skipping += 1
            elif isinstance(node, PopAlign):
                skipping -= 1
            continue

        if isinstance(node, Literal):
            if node.text:
                ops.append(Op.of_text(node.text))
        elif isinstance(node, OptionalBreak):
            ops.append(BREAK_OP)
        elif isinstance(node, MandatoryBreak):
            ops.append(LINE_OP)
        elif isinstance(node, LeftFlush):
            # Only meaningful right after a break or at the start of output.
            if not ops or ops[-1].kind.is_breakpoint:
                ops.append(LEFT_FLUSH_OP)
        elif isinstance(node, PushAlign):
            if print_depth is not None and depth + 1 > print_depth:
                ops.append(ELLIPSIS_OP)
                skipping = 1
                elided += 1
                continue
            depth += 1
            max_depth = max(max_depth, depth)
            ops.append(ALIGN_OP)
        elif isinstance(node, PopAlign):
            if depth == 0:
                _raise_unbalanced(
                    Diagnostic.from_spec(
                        LAYOUT_UNMATCHED_UNALIGN,
                        detail=f"(document element #{leaf_index})",
                    )
                )
            depth -= 1
            ops.append(UNALIGN_OP)
        else:
            raise TypeError(f"Not a document node: {node!r}")

    if depth or skipping:
        _raise_unbalanced(
            Diagnostic.from_spec(
                LAYOUT_UNCLOSED_ALIGN,
                detail=f"({depth + skipping} group(s) still open)",
            )
        )

    if elided:
        logger.debug("layout.elided", groups=elided, print_depth=print_depth)

    return LayoutProgram(ops=tuple(ops), elided_groups=elided, max_depth=max_depth)


def _raise_unbalanced(diagnostic: Diagnostic) -> None:
    logger.warning("layout.unbalanced_alignment", code=diagnostic.code, message=diagnostic.message)
    raise UnbalancedAlignmentError([diagnostic])
