"""Template front end: printf-style construction of documents."""

from prettypy.template.compile import TemplateCompiler, compile_template
from prettypy.template.fragments import (
    Control,
    Fragment,
    Literal,
    Rendered,
    fragment_doc,
    fragments_to_doc,
)
from prettypy.template.lexer import TemplateLexer, lex_template
from prettypy.template.printf import dprintf, eprintf, fprintf, gprintf, printf, sprintf
from prettypy.template.tokens import TemplateToken, TemplateTokenKind

__all__ = [
    "Control",
    "Fragment",
    "Literal",
    "Rendered",
    "TemplateCompiler",
    "TemplateLexer",
    "TemplateToken",
    "TemplateTokenKind",
    "compile_template",
    "dprintf",
    "eprintf",
    "fprintf",
    "fragment_doc",
    "fragments_to_doc",
    "gprintf",
    "lex_template",
    "printf",
    "sprintf",
]
