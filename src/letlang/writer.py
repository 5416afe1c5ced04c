from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator, TextIO

# DEBUG = True
DEBUG = False


class IndentingWriter:
    def __init__(self, stream: TextIO | None = None, indent_size: int = 3) -> None:
        self._stream = stream
        self._indent_size = indent_size
        self._indents = 0

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so that replacing sys.stdout (e.g. in tests) is honored.
        return self._stream if self._stream is not None else sys.stdout

    def debug(self, message: str) -> None:
        if DEBUG:
            self._print_indentation()
            self.stream.write(message)

    def debugln(self, message: str) -> None:
        if DEBUG:
            self.debug(message)
            self.stream.write("\n")

    def print(self, message: str) -> None:
        self._print_indentation()
        self.stream.write(message)

    def println(self, message: str) -> None:
        self.print(message + "\n")

    def indent(self) -> None:
        self._indents += 1

    def dedent(self) -> None:
        self._indents = max(0, self._indents - 1)

    def newline(self, on_debug_only: bool = False) -> None:
        if on_debug_only and not DEBUG:
            return
        self.stream.write("\n")

    def print_division_line(self) -> None:
        self.stream.write("-" * 80 + "\n")

    def _print_indentation(self) -> None:
        self.stream.write(" " * self._indent_size * self._indents)


@contextmanager
def indented_output(output_writer: IndentingWriter) -> Iterator[None]:
    output_writer.indent()
    try:
        yield
    finally:
        output_writer.dedent()


@contextmanager
def surrounding_box_title(
    output_writer: IndentingWriter, omit_lower_line: bool = False
) -> Iterator[None]:
    output_writer.print_division_line()
    try:
        yield
    finally:
        if not omit_lower_line:
            output_writer.print_division_line()
