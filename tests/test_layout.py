import sys

import pytest

from prettypy import (
    ALIGN,
    BREAK,
    LINE,
    UNALIGN,
    CallbackSink,
    LayoutOptions,
    UnbalancedAlignmentError,
    concat_all,
    join_with,
    layout,
    render_to_sink,
    render_to_string,
    text,
)
from prettypy.doc import Concat
from prettypy.layout import LayoutEngine, OpKind, flatten
from tests._debug import debug_dump_program, debug_print_output
from tests._shared_cases import LAYOUT_CASES, RAGGED, LayoutCase, case_id, if_then_doc


@pytest.mark.parametrize("case", LAYOUT_CASES, ids=case_id)
def test_layout_cases(case: LayoutCase) -> None:
    debug_dump_program(case.name, flatten(case.doc))
    output = render_to_string(case.doc, case.width, case.options)
    debug_print_output(case.name, case.width, output)

    assert output == case.expected


def test_break_indent_is_column_recorded_at_push_align() -> None:
    output = render_to_string(if_then_doc(), 6)
    first, second = output.split("\n")

    assert first == "if x>0"
    assert len(second) - len(second.lstrip(" ")) == len("if ")


def test_ragged_and_fitted_agree_until_lookahead_diverges() -> None:
    doc = concat_all((text("aa"), BREAK, text("bb"), BREAK, text("cccccccc")))

    fitted = render_to_string(doc, 8)
    ragged = render_to_string(doc, 8, RAGGED)

    # Both keep the first break: "aa bb" fits either way.
    assert fitted.startswith("aa bb")
    assert ragged.startswith("aa bb")
    # Fitted sees "cccccccc" coming and breaks; ragged only reacts to overflow.
    assert fitted == "aa bb\ncccccccc"
    assert ragged == "aa bb cccccccc"


def test_ragged_mode_breaks_once_column_exceeds_width() -> None:
    doc = join_with(BREAK, text, ["aaaaaa", "bbbbbb", "cc", "dd"])

    assert render_to_string(doc, 10, RAGGED) == "aaaaaa bbbbbb\ncc dd"


def test_layout_returns_fragments_that_join_to_rendering() -> None:
    doc = if_then_doc()
    fragments = list(layout(doc, 6))

    assert all(isinstance(fragment, str) for fragment in fragments)
    assert "".join(fragments) == render_to_string(doc, 6)


def test_layout_uses_explicit_options_over_defaults() -> None:
    doc = concat_all((text("aaaa"), BREAK, text("bbbbbbbb"), BREAK, text("cc")))

    assert "".join(layout(doc, 10, RAGGED)) == "aaaa bbbbbbbb\ncc"
    assert "".join(layout(doc, 10, LayoutOptions())) == "aaaa\nbbbbbbbb\ncc"


def test_unmatched_pop_align_is_rejected_before_any_output() -> None:
    written: list[str] = []
    doc = concat_all((text("abc"), LINE, UNALIGN, text("def")))

    with pytest.raises(UnbalancedAlignmentError) as excinfo:
        render_to_sink(doc, 80, CallbackSink(written.append))

    assert excinfo.value.codes == ("LAYOUT_UNMATCHED_UNALIGN",)
    assert written == []


def test_unclosed_push_align_is_rejected_before_any_output() -> None:
    written: list[str] = []
    doc = concat_all((text("abc"), ALIGN, text("def")))

    with pytest.raises(UnbalancedAlignmentError) as excinfo:
        render_to_sink(doc, 80, CallbackSink(written.append))

    assert excinfo.value.codes == ("LAYOUT_UNCLOSED_ALIGN",)
    assert written == []


def test_layout_raises_unbalanced_before_returning_iterator() -> None:
    with pytest.raises(UnbalancedAlignmentError):
        layout(UNALIGN, 80)


def test_flatten_drops_empty_nodes_and_keeps_order() -> None:
    doc = concat_all((text("a"), text(""), ALIGN, BREAK, text("b"), UNALIGN, LINE))
    program = flatten(doc)

    assert [op.kind for op in program.ops] == [
        OpKind.TEXT,
        OpKind.ALIGN,
        OpKind.BREAK,
        OpKind.TEXT,
        OpKind.UNALIGN,
        OpKind.LINE,
    ]
    assert program.max_depth == 1
    assert program.elided_groups == 0


def test_lookahead_measures_each_instruction_at_most_once() -> None:
    doc = join_with(text(",") + BREAK, lambda i: text(f"item{i}"), range(5000))
    program = flatten(doc)
    engine = LayoutEngine(program, 40, LayoutOptions())

    output = "".join(engine.fragments())

    assert engine.measured <= len(program)
    assert engine.taken_breaks == output.count("\n")
    assert max(len(line) for line in output.split("\n")) <= 40


def test_deeply_nested_concat_does_not_recurse() -> None:
    depth = sys.getrecursionlimit() * 4
    doc = text("x")
    for _ in range(depth):
        doc = Concat(text("x"), doc)
        doc = Concat(doc, BREAK)

    output = render_to_string(doc, 80)

    assert output.count("x") == depth + 1


def test_engine_tracks_column_and_alignment_state() -> None:
    program = flatten(concat_all((text("ab"), ALIGN, text("cd"))) + UNALIGN)
    engine = LayoutEngine(program, 80, LayoutOptions())
    fragments = engine.fragments()

    assert next(fragments) == "ab"
    assert engine.column == 2
    assert next(fragments) == "cd"
    assert engine.depth == 1
    assert engine.indentation == 2
    assert list(fragments) == []
    assert engine.depth == 0
    assert engine.indentation == 0
