"""Linear-time document pretty-printer.

Build a document from text, breaks and alignment markers, then render it to
a width. Optional breaks are taken only when the text up to the next
breakpoint would not fit on the current line.
"""

from prettypy.about import __version__, about_string
from prettypy.doc import (
    ALIGN,
    BREAK,
    EMPTY,
    LEFT_FLUSH,
    LINE,
    UNALIGN,
    Doc,
    char,
    concat,
    concat_all,
    doc_array,
    doc_list,
    doc_opt,
    embed,
    empty,
    indent,
    join_docs,
    join_indexed,
    join_with,
    left_flush,
    mandatory_line,
    number,
    option_doc,
    optional_break,
    pop_align,
    push_align,
    text,
)
from prettypy.errors import PrettyError, TemplateError, UnbalancedAlignmentError
from prettypy.layout import (
    LayoutMode,
    LayoutOptions,
    get_default_options,
    layout,
    override_options,
    set_default_options,
    with_print_depth,
)
from prettypy.output import (
    CallbackSink,
    OutputSink,
    StreamSink,
    StringSink,
    fprint,
    render_to_sink,
    render_to_string,
    sprint,
)
from prettypy.template import (
    compile_template,
    dprintf,
    eprintf,
    fprintf,
    fragments_to_doc,
    gprintf,
    printf,
    sprintf,
)

__all__ = [
    "ALIGN",
    "BREAK",
    "EMPTY",
    "LEFT_FLUSH",
    "LINE",
    "UNALIGN",
    "CallbackSink",
    "Doc",
    "LayoutMode",
    "LayoutOptions",
    "OutputSink",
    "PrettyError",
    "StreamSink",
    "StringSink",
    "TemplateError",
    "UnbalancedAlignmentError",
    "__version__",
    "about_string",
    "char",
    "compile_template",
    "concat",
    "concat_all",
    "doc_array",
    "doc_list",
    "doc_opt",
    "dprintf",
    "embed",
    "empty",
    "eprintf",
    "fprint",
    "fprintf",
    "fragments_to_doc",
    "get_default_options",
    "gprintf",
    "indent",
    "join_docs",
    "join_indexed",
    "join_with",
    "layout",
    "left_flush",
    "mandatory_line",
    "number",
    "option_doc",
    "optional_break",
    "override_options",
    "pop_align",
    "printf",
    "push_align",
    "render_to_sink",
    "render_to_string",
    "set_default_options",
    "sprint",
    "sprintf",
    "text",
    "with_print_depth",
]
