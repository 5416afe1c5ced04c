from io import StringIO

import pytest

import letlang.writer
from letlang.writer import IndentingWriter, indented_output, surrounding_box_title


# ===== Output =====
def test_println_applies_indentation() -> None:
    stream = StringIO()
    writer = IndentingWriter(stream=stream, indent_size=2)

    writer.println("a")
    with indented_output(writer):
        writer.println("b")
        with indented_output(writer):
            writer.println("c")
    writer.println("d")

    assert stream.getvalue() == "a\n  b\n    c\nd\n"


def test_dedent_never_goes_negative() -> None:
    stream = StringIO()
    writer = IndentingWriter(stream=stream)
    writer.dedent()
    writer.println("x")

    assert stream.getvalue() == "x\n"


def test_surrounding_box_title_draws_division_lines() -> None:
    stream = StringIO()
    writer = IndentingWriter(stream=stream)
    with surrounding_box_title(writer):
        writer.println("TITLE")

    assert stream.getvalue() == "-" * 80 + "\nTITLE\n" + "-" * 80 + "\n"


def test_default_stream_is_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    IndentingWriter().println("hello")
    assert capsys.readouterr().out == "hello\n"


# ===== Debug Output =====
def test_debug_output_is_disabled_by_default() -> None:
    stream = StringIO()
    writer = IndentingWriter(stream=stream)
    writer.debugln("hidden")
    writer.newline(on_debug_only=True)

    assert stream.getvalue() == ""


def test_debug_output_when_enabled(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(letlang.writer, "DEBUG", True)
    stream = StringIO()
    writer = IndentingWriter(stream=stream)
    writer.debugln("shown")
    writer.newline(on_debug_only=True)

    assert stream.getvalue() == "shown\n\n"


def test_print_continues_the_current_line() -> None:
    stream = StringIO()
    writer = IndentingWriter(stream=stream, indent_size=2)
    with indented_output(writer):
        writer.print("a")
        writer.print("b")
        writer.newline()

    assert stream.getvalue() == "  a  b\n"


def test_surrounding_box_title_can_omit_lower_line() -> None:
    stream = StringIO()
    writer = IndentingWriter(stream=stream)
    with surrounding_box_title(writer, omit_lower_line=True):
        writer.println("TITLE")

    assert stream.getvalue() == "-" * 80 + "\nTITLE\n"
