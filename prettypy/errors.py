"""Exception types raised by the template compiler and the layout engine."""

from __future__ import annotations

from collections.abc import Iterable

from prettypy.diagnostics import Diagnostic


class PrettyError(Exception):
    """Base error; carries the diagnostics that caused it."""

    def __init__(self, diagnostics: Iterable[Diagnostic]) -> None:
        self.diagnostics: tuple[Diagnostic, ...] = tuple(diagnostics)
        if not self.diagnostics:
            raise ValueError(f"{type(self).__name__} requires at least one diagnostic")
        super().__init__("; ".join(d.describe() for d in self.diagnostics))

    @property
    def codes(self) -> tuple[str, ...]:
        return tuple(d.code for d in self.diagnostics)


class TemplateError(PrettyError, ValueError):
    """A template string and its arguments could not be compiled into a document."""

    def __init__(self, template: str, diagnostics: Iterable[Diagnostic]) -> None:
        self.template = template
        super().__init__(diagnostics)


class UnbalancedAlignmentError(PrettyError):
    """push_align/pop_align nesting of a document does not balance."""
