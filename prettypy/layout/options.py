"""Layout modes, options and the default-options context."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Any


class LayoutMode(StrEnum):
    """How optional breaks are chosen."""

    FITTED = "fitted"
    RAGGED = "ragged"


@dataclass(frozen=True, slots=True)
class LayoutOptions:
    """Tunables for one layout call.

    `print_depth` is the deepest alignment nesting rendered in full; deeper
    groups collapse to `...`. `None` disables truncation.
    """

    print_depth: int | None = None
    mode: LayoutMode = LayoutMode.FITTED
    flush_often: bool = False

    def __post_init__(self):
        if self.print_depth is not None and self.print_depth < 0:
            raise ValueError("print_depth cannot be negative")

    @staticmethod
    def fast() -> "LayoutOptions":
        return LayoutOptions(mode=LayoutMode.RAGGED)

    @property
    def is_ragged(self) -> bool:
        return self.mode == LayoutMode.RAGGED


# Process-wide defaults, shared by every thread. Written only through
# set_default_options.
_process_defaults = LayoutOptions()
_process_lock = threading.Lock()

# Scoped overlay pushed by override_options; None outside any override.
_SCOPED_OPTIONS: ContextVar[LayoutOptions | None] = ContextVar(
    "prettypy_scoped_options", default=None
)


def get_default_options() -> LayoutOptions:
    scoped = _SCOPED_OPTIONS.get()
    return scoped if scoped is not None else _process_defaults


def set_default_options(options: LayoutOptions) -> LayoutOptions:
    """Replace the process-wide defaults; returns the previous value.

    Active `override_options` scopes keep their own values until they exit.
    """
    global _process_defaults
    with _process_lock:
        previous = _process_defaults
        _process_defaults = options
    return previous


def resolve_options(options: LayoutOptions | None) -> LayoutOptions:
    return options if options is not None else get_default_options()


@contextmanager
def override_options(**changes: Any) -> Iterator[LayoutOptions]:
    """Temporarily replace fields of the default options in the current context."""
    scoped = replace(get_default_options(), **changes)
    token = _SCOPED_OPTIONS.set(scoped)
    try:
        yield scoped
    finally:
        _SCOPED_OPTIONS.reset(token)


def with_print_depth[R](depth: int | None, work: Callable[[], R]) -> R:
    """Run `work` with the default depth limit set to `depth`, then restore it."""
    with override_options(print_depth=depth):
        return work()
