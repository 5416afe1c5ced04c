import pytest

from letlang.writer import IndentingWriter


# ===== Import Side Effects =====
def test_demo_prints_only_when_run(capsys: pytest.CaptureFixture[str]) -> None:
    import letlang.demo

    assert capsys.readouterr().out == ""

    letlang.demo.run_demo(IndentingWriter())

    assert "let myVar = anotherVar;return 10;" in capsys.readouterr().out


def test_building_samples_prints_nothing(capsys: pytest.CaptureFixture[str]) -> None:
    from letlang.ast_programs import build_let_return_program, build_operator_program
    from letlang.frontend.parser import parse_program
    from letlang.snippets import let_return_source

    build_let_return_program()
    build_operator_program()
    parse_program(let_return_source(include_trailing_expression=True))

    assert capsys.readouterr().out == ""
