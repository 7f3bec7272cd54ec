"""Centralized layout cases used across engine/render/template tests."""

from __future__ import annotations

from dataclasses import dataclass
import random

from prettypy import (
    ALIGN,
    BREAK,
    LEFT_FLUSH,
    LINE,
    UNALIGN,
    LayoutMode,
    LayoutOptions,
    concat_all,
    indent,
    join_with,
    text,
)
from prettypy.doc import Doc

RAGGED = LayoutOptions(mode=LayoutMode.RAGGED)


@dataclass(frozen=True, slots=True)
class LayoutCase:
    name: str
    doc: Doc
    width: int
    expected: str
    options: LayoutOptions | None = None


def if_then_doc() -> Doc:
    return concat_all((text("if "), ALIGN, text("x>0"), BREAK, text("then y"), UNALIGN))


LAYOUT_CASES: tuple[LayoutCase, ...] = (
    LayoutCase(name="if_then_fits_on_one_line", doc=if_then_doc(), width=80, expected="if x>0 then y"),
    LayoutCase(
        name="if_then_breaks_to_align_column",
        doc=if_then_doc(),
        width=6,
        expected="if x>0\n   then y",
    ),
    LayoutCase(
        name="left_flush_after_line_inside_alignment",
        doc=indent(4, concat_all((LINE, LEFT_FLUSH, text("A"), BREAK, text("B")))),
        width=80,
        expected="    \nA B",
    ),
    LayoutCase(
        name="segment_exactly_reaching_width_fits",
        doc=concat_all((text("aaaa"), BREAK, text("bbbbb"))),
        width=10,
        expected="aaaa bbbbb",
    ),
    LayoutCase(
        name="segment_one_past_width_breaks",
        doc=concat_all((text("aaaa"), BREAK, text("bbbbbb"))),
        width=10,
        expected="aaaa\nbbbbbb",
    ),
    LayoutCase(
        name="zero_width_takes_every_break",
        doc=concat_all((text("a"), BREAK, text("b"), BREAK, text("c"))),
        width=0,
        expected="a\nb\nc",
    ),
    LayoutCase(
        name="negative_width_takes_every_break_in_ragged_mode",
        doc=concat_all((text("a"), BREAK, text("b"))),
        width=-3,
        expected="a\nb",
        options=RAGGED,
    ),
    LayoutCase(
        name="ragged_keeps_space_until_column_exceeds_width",
        doc=concat_all((text("aaaa"), BREAK, text("bbbbbbbb"), BREAK, text("cc"))),
        width=10,
        expected="aaaa bbbbbbbb\ncc",
        options=RAGGED,
    ),
    LayoutCase(
        name="fitted_looks_ahead_to_next_break",
        doc=concat_all((text("aaaa"), BREAK, text("bbbbbbbb"), BREAK, text("cc"))),
        width=10,
        expected="aaaa\nbbbbbbbb\ncc",
    ),
    LayoutCase(
        name="segment_extends_past_pop_align",
        doc=concat_all(
            (
                text("call("),
                ALIGN,
                join_with(text(",") + BREAK, text, ["alpha", "beta", "gamma"]),
                UNALIGN,
                text(")"),
            )
        ),
        width=20,
        expected="call(alpha, beta,\n     gamma)",
    ),
    LayoutCase(
        name="nested_alignment_restores_outer_target",
        doc=concat_all(
            (
                text("ab"),
                ALIGN,
                text("cd"),
                ALIGN,
                text("ef"),
                LINE,
                text("g"),
                UNALIGN,
                LINE,
                text("x"),
                UNALIGN,
                LINE,
                text("y"),
            )
        ),
        width=80,
        expected="abcdef\n    g\n  x\ny",
    ),
    LayoutCase(
        name="blank_lines_carry_no_indentation",
        doc=indent(2, concat_all((text("a"), LINE, LINE, text("b")))),
        width=80,
        expected="  a\n\n  b",
    ),
    LayoutCase(
        name="taken_optional_break_then_left_flush",
        doc=indent(4, concat_all((text("aaaa"), BREAK, LEFT_FLUSH, text("bbbb")))),
        width=10,
        expected="    aaaa\nbbbb",
    ),
    LayoutCase(
        name="kept_optional_break_ignores_left_flush",
        doc=indent(4, concat_all((text("aaaa"), BREAK, LEFT_FLUSH, text("bbbb")))),
        width=80,
        expected="    aaaa bbbb",
    ),
    LayoutCase(
        name="left_flush_without_break_is_noop",
        doc=concat_all((text("ab"), LEFT_FLUSH, text("c"))),
        width=80,
        expected="abc",
    ),
    LayoutCase(
        name="embedded_newline_resets_column",
        doc=concat_all((text("ab\ncd"), BREAK, text("efgh"))),
        width=7,
        expected="ab\ncd efgh",
    ),
    LayoutCase(
        name="embedded_newline_counts_from_last_line",
        doc=concat_all((text("ab\ncd"), BREAK, text("efgh"))),
        width=6,
        expected="ab\ncd\nefgh",
    ),
    LayoutCase(
        name="lookahead_stops_at_newline_inside_text",
        doc=concat_all((text("x"), BREAK, text("ab\ncdefgh"))),
        width=4,
        expected="x ab\ncdefgh",
    ),
    LayoutCase(
        name="mandatory_line_ends_lookahead_segment",
        doc=concat_all((text("aaa"), BREAK, text("bb"), LINE, text("cccccccccc"))),
        width=6,
        expected="aaa bb\ncccccccccc",
    ),
)


def case_id(case: LayoutCase) -> str:
    return case.name


def uniform_token_doc(rng: random.Random, token: str, *, remaining: int = 40, depth: int = 0) -> Doc:
    """Random document of equal-width tokens separated by breaks, with nested groups.

    Every alignment column is the start column of some token, so in fitted
    mode no line of such a document can exceed the width.
    """
    parts: list[Doc] = []
    count = rng.randint(1, 6)
    for index in range(count):
        if index:
            parts.append(LINE if rng.random() < 0.15 else BREAK)
        if depth < 4 and remaining > 0 and rng.random() < 0.3:
            inner = uniform_token_doc(rng, token, remaining=remaining - 5, depth=depth + 1)
            parts.append(concat_all((ALIGN, inner, UNALIGN)))
        else:
            parts.append(text(token))
    return concat_all(parts)


def random_doc(rng: random.Random, *, depth: int = 0) -> Doc:
    """Arbitrary balanced document mixing every node kind."""
    parts: list[Doc] = []
    for _ in range(rng.randint(0, 5)):
        roll = rng.random()
        if roll < 0.4:
            parts.append(text("x" * rng.randint(1, 6)))
        elif roll < 0.6:
            parts.append(BREAK)
        elif roll < 0.7:
            parts.append(LINE)
        elif roll < 0.75:
            parts.append(LEFT_FLUSH)
        elif depth < 4:
            parts.append(concat_all((ALIGN, random_doc(rng, depth=depth + 1), UNALIGN)))
    return concat_all(parts)
