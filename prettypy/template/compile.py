"""Template + arguments -> fragment list."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import structlog

from prettypy.diagnostics import (
    TEMPLATE_BAD_ARGUMENT,
    TEMPLATE_EXTRA_ARGUMENTS,
    TEMPLATE_MISPLACED_LEFT_FLUSH,
    TEMPLATE_MISSING_ARGUMENT,
    TEMPLATE_UNMATCHED_ALIGN,
    TEMPLATE_UNMATCHED_UNALIGN,
    Diagnostic,
    DiagnosticSpec,
    has_errors,
)
from prettypy.doc.model import ALIGN, BREAK, LEFT_FLUSH, LINE, UNALIGN, DocNode
from prettypy.errors import TemplateError
from prettypy.template.fragments import Control, Fragment, Literal, Rendered, invoke_thunk
from prettypy.template.lexer import lex_template
from prettypy.template.tokens import NUMERIC_CONVERSIONS, TemplateToken, TemplateTokenKind
from prettypy.text import TextRange, slice_text_range

logger = structlog.get_logger(__name__)

_CONTROL_DOCS = {
    TemplateTokenKind.ALIGN: ALIGN,
    TemplateTokenKind.UNALIGN: UNALIGN,
    TemplateTokenKind.LINE: LINE,
    TemplateTokenKind.NEWLINE: LINE,
    TemplateTokenKind.BREAK: BREAK,
    TemplateTokenKind.LEFT_FLUSH: LEFT_FLUSH,
}


class TemplateCompiler:
    """Binds lexed template tokens to their arguments."""

    def __init__(self, template: str, args: Sequence[Any]) -> None:
        self._template = template
        self._args = args
        self._arg_pos = 0
        self._open_aligns: list[TextRange] = []
        self._fragments: list[Fragment] = []
        self._diagnostics: list[Diagnostic] = []

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    def compile(self) -> list[Fragment]:
        tokens, lex_diagnostics = lex_template(self._template)
        self._diagnostics.extend(lex_diagnostics)

        previous: TemplateToken | None = None
        for token in tokens:
            if token.kind == TemplateTokenKind.EOF:
                break
            self._compile_token(token, previous)
            previous = token

        for open_range in self._open_aligns:
            self._report(TEMPLATE_UNMATCHED_ALIGN, open_range)

        if self._arg_pos < len(self._args):
            surplus = len(self._args) - self._arg_pos
            self._report(
                TEMPLATE_EXTRA_ARGUMENTS,
                TextRange.empty(len(self._template)),
                f"{surplus} unused argument(s).",
            )

        if has_errors(self._diagnostics):
            logger.debug(
                "template.rejected",
                template=self._template,
                codes=[d.code for d in self._diagnostics],
            )
            raise TemplateError(self._template, self._diagnostics)
        return self._fragments

    def _compile_token(self, token: TemplateToken, previous: TemplateToken | None) -> None:
        kind = token.kind
        if kind == TemplateTokenKind.TEXT:
            self._fragments.append(Literal(slice_text_range(self._template, token.range)))
        elif kind == TemplateTokenKind.PERCENT:
            self._fragments.append(Literal("%"))
        elif kind == TemplateTokenKind.AT:
            self._fragments.append(Literal("@"))
        elif kind == TemplateTokenKind.CONVERSION:
            self._compile_conversion(token)
        elif kind == TemplateTokenKind.THUNK:
            self._compile_thunk(token)
        elif kind == TemplateTokenKind.APPLY:
            self._compile_apply(token)
        elif kind == TemplateTokenKind.ALIGN:
            self._open_aligns.append(token.range)
            self._fragments.append(Control(ALIGN))
        elif kind == TemplateTokenKind.UNALIGN:
            if not self._open_aligns:
                self._report(TEMPLATE_UNMATCHED_UNALIGN, token.range)
                return
            self._open_aligns.pop()
            self._fragments.append(Control(UNALIGN))
        elif kind == TemplateTokenKind.LEFT_FLUSH:
            if previous is None or not previous.kind.starts_line:
                self._report(TEMPLATE_MISPLACED_LEFT_FLUSH, token.range)
                return
            self._fragments.append(Control(LEFT_FLUSH))
        elif kind in _CONTROL_DOCS:
            self._fragments.append(Control(_CONTROL_DOCS[kind]))
        # ERROR tokens were reported by the lexer.

    def _compile_conversion(self, token: TemplateToken) -> None:
        arg = self._take(token)
        if arg is _MISSING:
            return
        conversion = token.conversion
        if conversion == "c":
            if isinstance(arg, int) and not isinstance(arg, bool):
                try:
                    arg = chr(arg)
                except (ValueError, OverflowError) as exc:
                    self._bad_argument(token, f"invalid code point {arg}: {exc}.")
                    return
            if not isinstance(arg, str) or len(arg) != 1:
                self._bad_argument(token, f"expected a single character, got {arg!r}.")
                return
        elif conversion in NUMERIC_CONVERSIONS and (
            isinstance(arg, bool) or not isinstance(arg, (int, float))
        ):
            self._bad_argument(token, f"expected a number, got {type(arg).__name__}.")
            return
        try:
            rendered = token.directive % (arg,)
        except (TypeError, ValueError, OverflowError) as exc:
            self._bad_argument(token, str(exc))
            return
        self._fragments.append(Literal(rendered))

    def _compile_thunk(self, token: TemplateToken) -> None:
        thunk = self._take(token)
        if thunk is _MISSING:
            return
        if not callable(thunk):
            self._bad_argument(token, f"expected a callable, got {type(thunk).__name__}.")
            return
        self._fragments.append(Rendered(invoke_thunk, thunk))

    def _compile_apply(self, token: TemplateToken) -> None:
        renderer = self._take(token)
        if renderer is _MISSING:
            return
        value = self._take(token)
        if value is _MISSING:
            return
        if isinstance(renderer, DocNode) or not callable(renderer):
            self._bad_argument(token, f"expected a renderer, got {type(renderer).__name__}.")
            return
        self._fragments.append(Rendered(renderer, value))

    def _take(self, token: TemplateToken) -> Any:
        if self._arg_pos >= len(self._args):
            directive = slice_text_range(self._template, token.range)
            self._report(
                TEMPLATE_MISSING_ARGUMENT,
                token.range,
                f"`{directive}` at offset {token.range.start}.",
            )
            return _MISSING
        arg = self._args[self._arg_pos]
        self._arg_pos += 1
        return arg

    def _bad_argument(self, token: TemplateToken, detail: str) -> None:
        directive = slice_text_range(self._template, token.range)
        self._report(
            TEMPLATE_BAD_ARGUMENT,
            token.range,
            f"`{directive}` at offset {token.range.start}: {detail}",
        )

    def _report(self, spec: DiagnosticSpec, range: TextRange, detail: str | None = None) -> None:
        if detail is None:
            directive = slice_text_range(self._template, range)
            detail = f"`{directive}` at offset {range.start}."
        self._diagnostics.append(Diagnostic.from_spec(spec, range, detail=detail))


_MISSING: Any = object()


def compile_template(template: str, *args: Any) -> list[Fragment]:
    """Compile a template and its arguments into a fragment list.

    Raises TemplateError listing every malformed directive and arity problem.
    """
    return TemplateCompiler(template, args).compile()
