#!/usr/bin/env python3
"""Quick perf benchmark for document layout."""

from __future__ import annotations

import argparse
import cProfile
import io
import pstats
import statistics
import time

from tqdm import tqdm

from prettypy import (
    BREAK,
    LINE,
    LayoutMode,
    LayoutOptions,
    StringSink,
    concat_all,
    indent,
    join_indexed,
    number,
    render_to_sink,
    text,
)
from prettypy.doc import Doc
from prettypy.logging import configure_logging


def _build_document(items: int, nesting: int) -> Doc:
    """A compiler-dump shaped document: nested blocks of short statements."""

    def statement(index: int, value: int) -> Doc:
        return concat_all((text("x"), number(index), text(" = "), number(value), text(";")))

    body = join_indexed(BREAK, statement, range(items))
    for level in range(nesting):
        body = concat_all((text(f"block{level} {{"), LINE, indent(2, body), LINE, text("}")))
    return body


def _run_once(
    doc: Doc,
    *,
    width: int,
    options: LayoutOptions,
    repeats: int,
    label: str,
    show_progress: bool,
) -> tuple[float, int]:
    start = time.perf_counter()
    chars = 0
    iterator = tqdm(range(repeats), desc=label, unit="render") if show_progress else range(repeats)
    for _ in iterator:
        sink = StringSink()
        render_to_sink(doc, width, sink, options)
        chars += len(sink.getvalue())
    duration = time.perf_counter() - start
    return duration, chars


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark document layout throughput")
    parser.add_argument("--items", type=int, default=20000, help="Statements per document")
    parser.add_argument("--nesting", type=int, default=8, help="Nested block levels")
    parser.add_argument("--width", type=int, default=80, help="Target width")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in LayoutMode],
        default=LayoutMode.FITTED.value,
        help="Break policy (default: fitted)",
    )
    parser.add_argument("--print-depth", type=int, default=None, help="Ellipsis depth")
    parser.add_argument("--repeats", type=int, default=3, help="Renders per run")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Run cProfile and print top hotspots",
    )
    parser.add_argument(
        "--profile-top",
        type=int,
        default=30,
        help="Number of cProfile rows to print (default: 30)",
    )
    parser.add_argument(
        "--profile-sort",
        type=str,
        default="tottime",
        help="cProfile sort key (default: tottime, common: cumulative)",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Log verbosity")
    args = parser.parse_args()

    configure_logging(verbosity=args.verbose)

    if args.items <= 0:
        raise SystemExit(f"Invalid --items: {args.items}")

    doc = _build_document(args.items, max(args.nesting, 0))
    options = LayoutOptions(print_depth=args.print_depth, mode=LayoutMode(args.mode))
    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(
                doc,
                width=args.width,
                options=options,
                repeats=args.repeats,
                label=f"warmup {warmup_idx + 1}/{max(args.warmups, 0)}",
                show_progress=show_progress,
            )

        timings: list[float] = []
        chars = 0
        for run_idx in range(max(args.runs, 1)):
            duration, chars = _run_once(
                doc,
                width=args.width,
                options=options,
                repeats=args.repeats,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, chars

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, chars = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, chars = _benchmark()

    renders = max(args.repeats, 1)
    mean = statistics.mean(timings)

    print(f"Items: {args.items} (nesting={args.nesting}, width={args.width}, mode={args.mode})")
    print(f"Chars per run: {chars}")
    print(f"Runs: {len(timings)} x {renders} renders (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Chars/s (mean): {chars / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
