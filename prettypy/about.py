"""Version and about string."""

from __future__ import annotations

from typing import Final

from prettypy.layout import LayoutOptions, resolve_options

__version__: Final[str] = "0.1.0"


def about_string(options: LayoutOptions | None = None) -> str:
    """Describe the library version and the active layout flags."""
    resolved = resolve_options(options)
    depth = "unbounded" if resolved.print_depth is None else str(resolved.print_depth)
    return (
        f"prettypy {__version__}: linear-time document pretty-printer "
        f"(mode={resolved.mode.value}, print_depth={depth}, "
        f"flush_often={'yes' if resolved.flush_often else 'no'})"
    )
