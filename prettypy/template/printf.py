"""printf-style entry points over the template compiler."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any, TextIO

from prettypy.doc.build import embed
from prettypy.doc.model import Doc
from prettypy.layout import LayoutOptions
from prettypy.output import DEFAULT_WIDTH, fprint, sprint
from prettypy.template.compile import compile_template
from prettypy.template.fragments import fragments_to_doc


def gprintf[R](finish: Callable[[Doc], R], template: str, *args: Any) -> R:
    """Build a document from `template` and hand it to `finish`."""
    return finish(fragments_to_doc(compile_template(template, *args)))


def dprintf(template: str, *args: Any) -> Doc:
    """Build a document from a template.

    Example::

        dprintf("Name=%s, Children=@[%a@]", name, doc_list(text(",") + BREAK, text), kids)
    """
    return gprintf(embed, template, *args)


def sprintf(
    template: str,
    *args: Any,
    width: int = DEFAULT_WIDTH,
    options: LayoutOptions | None = None,
) -> str:
    return sprint(dprintf(template, *args), width=width, options=options)


def fprintf(
    stream: TextIO,
    template: str,
    *args: Any,
    width: int = DEFAULT_WIDTH,
    options: LayoutOptions | None = None,
) -> Doc:
    """Format to `stream`; returns the document so callers can reuse it."""
    doc = dprintf(template, *args)
    fprint(stream, doc, width=width, options=options)
    return doc


def printf(
    template: str,
    *args: Any,
    width: int = DEFAULT_WIDTH,
    options: LayoutOptions | None = None,
) -> Doc:
    return fprintf(sys.stdout, template, *args, width=width, options=options)


def eprintf(
    template: str,
    *args: Any,
    width: int = DEFAULT_WIDTH,
    options: LayoutOptions | None = None,
) -> Doc:
    return fprintf(sys.stderr, template, *args, width=width, options=options)
