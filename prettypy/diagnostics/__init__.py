"""Diagnostics."""

from prettypy.diagnostics.codes import (
    LAYOUT_UNCLOSED_ALIGN,
    LAYOUT_UNMATCHED_UNALIGN,
    TEMPLATE_BAD_ARGUMENT,
    TEMPLATE_EXTRA_ARGUMENTS,
    TEMPLATE_MISPLACED_LEFT_FLUSH,
    TEMPLATE_MISSING_ARGUMENT,
    TEMPLATE_UNKNOWN_DIRECTIVE,
    TEMPLATE_UNKNOWN_ESCAPE,
    TEMPLATE_UNMATCHED_ALIGN,
    TEMPLATE_UNMATCHED_UNALIGN,
    DiagnosticSpec,
    Severity,
)
from prettypy.diagnostics.diagnostic import Diagnostic
from prettypy.diagnostics.report import has_errors

__all__ = [
    "LAYOUT_UNCLOSED_ALIGN",
    "LAYOUT_UNMATCHED_UNALIGN",
    "TEMPLATE_BAD_ARGUMENT",
    "TEMPLATE_EXTRA_ARGUMENTS",
    "TEMPLATE_MISPLACED_LEFT_FLUSH",
    "TEMPLATE_MISSING_ARGUMENT",
    "TEMPLATE_UNKNOWN_DIRECTIVE",
    "TEMPLATE_UNKNOWN_ESCAPE",
    "TEMPLATE_UNMATCHED_ALIGN",
    "TEMPLATE_UNMATCHED_UNALIGN",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "has_errors",
]
