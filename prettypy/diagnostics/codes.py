"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


TEMPLATE_UNKNOWN_DIRECTIVE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TEMPLATE_UNKNOWN_DIRECTIVE",
    message="Unknown `%` conversion in template.",
    hint="Use one of %d %i %u %x %X %o %s %r %c %f %F %e %E %g %G %t %a or %%.",
    severity="error",
    category="template",
)

TEMPLATE_UNKNOWN_ESCAPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TEMPLATE_UNKNOWN_ESCAPE",
    message="Unknown `@` escape in template.",
    hint="Use one of @[ @] @! @? @< or @@ for a literal `@`.",
    severity="error",
    category="template",
)

TEMPLATE_UNMATCHED_ALIGN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TEMPLATE_UNMATCHED_ALIGN",
    message="`@[` has no matching `@]` in template.",
    hint="Close every alignment group opened with `@[` using `@]`.",
    severity="error",
    category="template",
)

TEMPLATE_UNMATCHED_UNALIGN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TEMPLATE_UNMATCHED_UNALIGN",
    message="`@]` has no matching `@[` in template.",
    hint="Remove the stray `@]` or open a group with `@[` before it.",
    severity="error",
    category="template",
)

TEMPLATE_MISPLACED_LEFT_FLUSH: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TEMPLATE_MISPLACED_LEFT_FLUSH",
    message="`@<` must directly follow `@!` or a newline.",
    hint="Write `@!@<` (or a newline followed by `@<`).",
    severity="error",
    category="template",
)

TEMPLATE_MISSING_ARGUMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TEMPLATE_MISSING_ARGUMENT",
    message="Template directive has no corresponding argument.",
    hint="Pass one argument per conversion (two for %a).",
    severity="error",
    category="template",
)

TEMPLATE_EXTRA_ARGUMENTS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TEMPLATE_EXTRA_ARGUMENTS",
    message="More arguments were supplied than the template consumes.",
    hint="Remove the surplus arguments or add the missing conversions.",
    severity="error",
    category="template",
)

TEMPLATE_BAD_ARGUMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TEMPLATE_BAD_ARGUMENT",
    message="Argument does not fit its template conversion.",
    hint="%t takes a zero-argument callable, %a a renderer and a value, %c one character.",
    severity="error",
    category="template",
)

LAYOUT_UNMATCHED_UNALIGN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LAYOUT_UNMATCHED_UNALIGN",
    message="pop_align without a matching push_align.",
    hint="Every pop_align must close an alignment opened earlier in the same document.",
    severity="error",
    category="layout",
)

LAYOUT_UNCLOSED_ALIGN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LAYOUT_UNCLOSED_ALIGN",
    message="push_align left open at end of document.",
    hint="Close every push_align with pop_align (or build groups with indent()).",
    severity="error",
    category="layout",
)
