"""Rendering entry points: document -> sink / string / stream."""

from __future__ import annotations

from typing import Final, TextIO

from prettypy.doc.model import Doc
from prettypy.layout import LayoutOptions, layout, resolve_options
from prettypy.output.sink import OutputSink, StreamSink, StringSink

DEFAULT_WIDTH: Final[int] = 80


def render_to_sink(
    doc: Doc,
    width: int,
    sink: OutputSink,
    options: LayoutOptions | None = None,
) -> None:
    resolved = resolve_options(options)
    fragments = layout(doc, width, resolved)
    if resolved.flush_often:
        for fragment in fragments:
            sink.write(fragment)
            sink.flush()
        return
    for fragment in fragments:
        sink.write(fragment)


def render_to_string(doc: Doc, width: int, options: LayoutOptions | None = None) -> str:
    sink = StringSink()
    render_to_sink(doc, width, sink, options)
    return sink.getvalue()


def sprint(doc: Doc, *, width: int = DEFAULT_WIDTH, options: LayoutOptions | None = None) -> str:
    return render_to_string(doc, width, options)


def fprint(
    stream: TextIO,
    doc: Doc,
    *,
    width: int = DEFAULT_WIDTH,
    options: LayoutOptions | None = None,
) -> None:
    render_to_sink(doc, width, StreamSink(stream), options)
