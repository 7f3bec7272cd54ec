"""Template lexer."""

from __future__ import annotations

from prettypy.diagnostics import (
    TEMPLATE_UNKNOWN_DIRECTIVE,
    TEMPLATE_UNKNOWN_ESCAPE,
    Diagnostic,
    DiagnosticSpec,
)
from prettypy.template.tokens import (
    CONVERSION_CHARS,
    ESCAPES,
    FLAG_CHARS,
    TemplateToken,
    TemplateTokenKind,
)
from prettypy.text import TextRange, slice_text_range


class TemplateLexer:
    """Splits a template into text runs, `%` conversions and `@` escapes.

    Malformed directives become ERROR tokens and a diagnostic; lexing always
    runs to the end so every problem in a template is reported at once.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._diagnostics: list[Diagnostic] = []

    @property
    def source(self) -> str:
        return self._source

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def lex(self) -> list[TemplateToken]:
        tokens: list[TemplateToken] = []
        while not self.is_eof:
            tokens.append(self._lex_token())
        tokens.append(TemplateToken(TemplateTokenKind.EOF, TextRange.empty(self._position)))
        return tokens

    def _lex_token(self) -> TemplateToken:
        start = self._position
        ch = self._source[start]

        if ch == "\n":
            self._position += 1
            return self._token(TemplateTokenKind.NEWLINE, start)
        if ch == "%":
            return self._lex_percent()
        if ch == "@":
            return self._lex_escape()

        while not self.is_eof and self._source[self._position] not in "%@\n":
            self._position += 1
        return self._token(TemplateTokenKind.TEXT, start)

    def _lex_escape(self) -> TemplateToken:
        start = self._position
        self._position += 1
        if self.is_eof:
            return self._error(start, TEMPLATE_UNKNOWN_ESCAPE, "`@` at end of template")

        ch = self._source[self._position]
        self._position += 1
        kind = ESCAPES.get(ch)
        if kind is None:
            return self._error(start, TEMPLATE_UNKNOWN_ESCAPE, f"`@{ch}`")
        return self._token(kind, start)

    def _lex_percent(self) -> TemplateToken:
        start = self._position
        self._position += 1
        if self.is_eof:
            return self._error(start, TEMPLATE_UNKNOWN_DIRECTIVE, "`%` at end of template")

        ch = self._source[self._position]
        if ch == "%":
            self._position += 1
            return self._token(TemplateTokenKind.PERCENT, start)
        if ch == "t":
            self._position += 1
            return self._token(TemplateTokenKind.THUNK, start)
        if ch == "a":
            self._position += 1
            return self._token(TemplateTokenKind.APPLY, start)

        self._eat_while(FLAG_CHARS)
        self._eat_digits()
        if self._current_char() == ".":
            self._position += 1
            self._eat_digits()

        ch = self._current_char()
        if ch and ch in CONVERSION_CHARS:
            self._position += 1
            token = self._token(TemplateTokenKind.CONVERSION, start)
            directive = slice_text_range(self._source, token.range)
            return TemplateToken(token.kind, token.range, directive)

        if ch:
            self._position += 1
        directive = self._source[start : self._position]
        return self._error(start, TEMPLATE_UNKNOWN_DIRECTIVE, f"`{directive}`")

    def _eat_while(self, chars: frozenset[str]) -> None:
        while not self.is_eof and self._source[self._position] in chars:
            self._position += 1

    def _eat_digits(self) -> None:
        while not self.is_eof and self._source[self._position].isdigit():
            self._position += 1

    def _current_char(self) -> str:
        if self.is_eof:
            return ""
        return self._source[self._position]

    def _token(self, kind: TemplateTokenKind, start: int) -> TemplateToken:
        return TemplateToken(kind, TextRange(start, self._position))

    def _error(self, start: int, spec: DiagnosticSpec, detail: str) -> TemplateToken:
        token_range = TextRange(start, self._position)
        self._diagnostics.append(
            Diagnostic.from_spec(spec, token_range, detail=f"Found {detail} at offset {start}.")
        )
        return TemplateToken(TemplateTokenKind.ERROR, token_range)


def lex_template(source: str) -> tuple[list[TemplateToken], list[Diagnostic]]:
    lexer = TemplateLexer(source)
    tokens = lexer.lex()
    return tokens, lexer.diagnostics
