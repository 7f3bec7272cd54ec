"""Diagnostics core types."""

from dataclasses import dataclass

from prettypy.diagnostics.codes import DiagnosticSpec, Severity
from prettypy.text import TextRange


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the template compiler or the layout engine."""

    code: str
    message: str
    range: TextRange | None = None
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(
        spec: DiagnosticSpec,
        range: TextRange | None = None,
        *,
        detail: str | None = None,
    ) -> "Diagnostic":
        message = spec.message if detail is None else f"{spec.message} {detail}"
        return Diagnostic(
            code=spec.code,
            message=message,
            range=range,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )

    def describe(self) -> str:
        """One-line rendering used in exception messages."""
        where = "" if self.range is None else f" at {self.range.start}"
        return f"[{self.code}]{where}: {self.message}"
