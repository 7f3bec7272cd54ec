"""List, array and option helpers built on the document constructors."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from prettypy.doc.build import concat_all, text
from prettypy.doc.model import EMPTY, Doc, _concat

type Renderer[T] = Callable[[T], Doc]
type IndexedRenderer[T] = Callable[[int, T], Doc]


def join_docs(separator: Doc, docs: Iterable[Doc]) -> Doc:
    result: Doc = EMPTY
    first = True
    for doc in docs:
        if first:
            result = doc
            first = False
        else:
            result = _concat(_concat(result, separator), doc)
    return result


def join_with[T](separator: Doc, renderer: Renderer[T], items: Iterable[T]) -> Doc:
    """Render each item and put `separator` between consecutive ones."""
    return join_docs(separator, (renderer(item) for item in items))


def join_indexed[T](separator: Doc, renderer: IndexedRenderer[T], items: Iterable[T]) -> Doc:
    """Like `join_with`, but `renderer` also receives the 0-based index."""
    return join_docs(separator, (renderer(index, item) for index, item in enumerate(items)))


def option_doc[T](renderer: Renderer[T], value: T | None) -> Doc:
    if value is None:
        return text("None")
    return concat_all((text("Some("), renderer(value), text(")")))


def doc_list[T](separator: Doc, renderer: Renderer[T]) -> Callable[[Iterable[T]], Doc]:
    """Curried `join_with`, usable as the renderer half of a `%a` argument pair."""

    def render(items: Iterable[T]) -> Doc:
        return join_with(separator, renderer, items)

    return render


def doc_array[T](separator: Doc, renderer: IndexedRenderer[T]) -> Callable[[Iterable[T]], Doc]:
    """Curried `join_indexed`."""

    def render(items: Iterable[T]) -> Doc:
        return join_indexed(separator, renderer, items)

    return render


def doc_opt(renderer: Renderer[Any]) -> Callable[[Any], Doc]:
    """Curried `option_doc`."""

    def render(value: Any) -> Doc:
        return option_doc(renderer, value)

    return render
