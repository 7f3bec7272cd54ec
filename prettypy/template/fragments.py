"""Explicit template fragments.

A compiled template is an ordered list of fragments. Callers that do not
want runtime template parsing can assemble the list themselves.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from prettypy.doc.build import concat_all, text
from prettypy.doc.model import Doc, DocNode


@dataclass(frozen=True, slots=True)
class Literal:
    text: str


@dataclass(frozen=True, slots=True)
class Rendered:
    """A value rendered to a document when the fragment list is assembled."""

    renderer: Callable[[Any], Doc]
    value: Any


@dataclass(frozen=True, slots=True)
class Control:
    """A layout element (alignment, break, left flush) placed verbatim."""

    doc: Doc


type Fragment = Literal | Rendered | Control


def invoke_thunk(thunk: Callable[[], Doc]) -> Doc:
    return thunk()


def fragment_doc(fragment: Fragment) -> Doc:
    if isinstance(fragment, Literal):
        return text(fragment.text)
    if isinstance(fragment, Control):
        return fragment.doc
    doc = fragment.renderer(fragment.value)
    if not isinstance(doc, DocNode):
        raise TypeError(
            f"Renderer {fragment.renderer!r} returned {type(doc).__name__}, expected a document"
        )
    return doc


def fragments_to_doc(fragments: Iterable[Fragment]) -> Doc:
    return concat_all(fragment_doc(fragment) for fragment in fragments)
