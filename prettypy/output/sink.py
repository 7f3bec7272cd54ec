"""Output destinations for laid-out fragments."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, TextIO


class OutputSink(Protocol):
    def write(self, fragment: str) -> None: ...

    def flush(self) -> None: ...


class StreamSink:
    """Writes fragments to a text stream (file, stdout, ...)."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream

    def write(self, fragment: str) -> None:
        self._stream.write(fragment)

    def flush(self) -> None:
        self._stream.flush()


class StringSink:
    """Collects fragments in memory."""

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._flushes = 0

    @property
    def flush_count(self) -> int:
        return self._flushes

    def write(self, fragment: str) -> None:
        self._parts.append(fragment)

    def flush(self) -> None:
        # Nothing buffered beyond memory; count calls so policies are observable.
        self._flushes += 1

    def getvalue(self) -> str:
        if len(self._parts) > 1:
            self._parts[:] = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""


class CallbackSink:
    """Passes every fragment to a user callback."""

    def __init__(
        self,
        callback: Callable[[str], object],
        on_flush: Callable[[], object] | None = None,
    ) -> None:
        self._callback = callback
        self._on_flush = on_flush

    def write(self, fragment: str) -> None:
        self._callback(fragment)

    def flush(self) -> None:
        if self._on_flush is not None:
            self._on_flush()
