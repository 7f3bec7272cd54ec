#!/usr/bin/env python
"""Dump the tokens, flattened layout program and rendering of a template."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from prettypy import LayoutOptions, TemplateError, render_to_string
from prettypy.layout import dump_ops, flatten
from prettypy.template import compile_template, fragments_to_doc, lex_template


def main() -> int:
    parser = argparse.ArgumentParser(description="Show how a template is lexed, flattened and laid out")
    parser.add_argument("template", help="Template text (no % arguments), or @path to read a file")
    parser.add_argument("--width", type=int, default=80)
    parser.add_argument("--print-depth", type=int, default=None)
    parser.add_argument("--output", type=Path, default=None, help="Write the dump here instead of stdout")
    args = parser.parse_args()

    source: str = args.template
    if source.startswith("@") and Path(source[1:]).is_file():
        source = Path(source[1:]).read_text(encoding="utf-8")

    tokens, _ = lex_template(source)
    lines: list[str] = ["===== TOKENS ====="]
    for index, token in enumerate(tokens):
        text = source[token.range.start : token.range.end]
        lines.append(f"{index:03d} {token.kind.name:<12} range={token.range.as_tuple()} text={text!r}")

    needed = sum(token.kind.consumes_arguments for token in tokens)
    if needed:
        lines.append(f"template expects {needed} argument(s); only token output is available")
        return _emit(lines, args.output)

    try:
        doc = fragments_to_doc(compile_template(source))
    except TemplateError as exc:
        lines.append("===== DIAGNOSTICS =====")
        lines.extend(d.describe() for d in exc.diagnostics)
        _emit(lines, args.output)
        return 1

    program = flatten(doc, args.print_depth)
    lines.append("===== OPS =====")
    lines.append(dump_ops(program))
    lines.append(f"===== OUTPUT (width={args.width}) =====")
    lines.append(render_to_string(doc, args.width, LayoutOptions(print_depth=args.print_depth)))
    return _emit(lines, args.output)


def _emit(lines: list[str], output: Path | None) -> int:
    dump = "\n".join(lines)
    if output is None:
        print(dump, file=sys.stdout)
        return 0

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(dump + "\n", encoding="utf-8")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
