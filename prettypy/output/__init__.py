"""Output sinks and rendering entry points."""

from prettypy.output.render import (
    DEFAULT_WIDTH,
    fprint,
    render_to_sink,
    render_to_string,
    sprint,
)
from prettypy.output.sink import CallbackSink, OutputSink, StreamSink, StringSink

__all__ = [
    "DEFAULT_WIDTH",
    "CallbackSink",
    "OutputSink",
    "StreamSink",
    "StringSink",
    "fprint",
    "render_to_sink",
    "render_to_string",
    "sprint",
]
