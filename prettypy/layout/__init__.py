"""Layout engine: flattening, width fitting and options."""

from prettypy.layout.engine import LayoutEngine, layout
from prettypy.layout.flatten import flatten
from prettypy.layout.options import (
    LayoutMode,
    LayoutOptions,
    get_default_options,
    override_options,
    resolve_options,
    set_default_options,
    with_print_depth,
)
from prettypy.layout.program import ELLIPSIS, LayoutProgram, Op, OpKind, dump_ops

__all__ = [
    "ELLIPSIS",
    "LayoutEngine",
    "LayoutMode",
    "LayoutOptions",
    "LayoutProgram",
    "Op",
    "OpKind",
    "dump_ops",
    "flatten",
    "get_default_options",
    "layout",
    "override_options",
    "resolve_options",
    "set_default_options",
    "with_print_depth",
]
