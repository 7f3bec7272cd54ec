"""Document model, constructors and combinators."""

from prettypy.doc.build import (
    char,
    concat,
    concat_all,
    embed,
    empty,
    indent,
    left_flush,
    mandatory_line,
    number,
    optional_break,
    pop_align,
    push_align,
    text,
)
from prettypy.doc.combinators import (
    IndexedRenderer,
    Renderer,
    doc_array,
    doc_list,
    doc_opt,
    join_docs,
    join_indexed,
    join_with,
    option_doc,
)
from prettypy.doc.model import (
    ALIGN,
    BREAK,
    EMPTY,
    LEFT_FLUSH,
    LINE,
    UNALIGN,
    Concat,
    Doc,
    DocNode,
    Empty,
    LeftFlush,
    Literal,
    MandatoryBreak,
    OptionalBreak,
    PopAlign,
    PushAlign,
    is_empty,
)

__all__ = [
    "ALIGN",
    "BREAK",
    "EMPTY",
    "LEFT_FLUSH",
    "LINE",
    "UNALIGN",
    "Concat",
    "Doc",
    "DocNode",
    "Empty",
    "IndexedRenderer",
    "LeftFlush",
    "Literal",
    "MandatoryBreak",
    "OptionalBreak",
    "PopAlign",
    "PushAlign",
    "Renderer",
    "char",
    "concat",
    "concat_all",
    "doc_array",
    "doc_list",
    "doc_opt",
    "embed",
    "empty",
    "indent",
    "is_empty",
    "join_docs",
    "join_indexed",
    "join_with",
    "left_flush",
    "mandatory_line",
    "number",
    "optional_break",
    "option_doc",
    "pop_align",
    "push_align",
    "text",
]
