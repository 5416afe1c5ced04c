from .ast_programs import build_let_return_program, build_operator_program
from .frontend.parser import parse_program
from .frontend.printer import render
from .frontend.tree_dump import dump_tree
from .snippets import let_return_source
from .writer import IndentingWriter, indented_output, surrounding_box_title


def run_demo(writer: IndentingWriter | None = None) -> None:
    writer = writer or IndentingWriter()

    programs = [
        ("build_let_return_program()", build_let_return_program()),
        ("build_operator_program()", build_operator_program()),
        (
            "parse_program(let_return_source(include_trailing_expression=True))",
            parse_program(
                let_return_source(include_trailing_expression=True), writer
            ),
        ),
    ]

    for title, program in programs:
        with surrounding_box_title(writer, omit_lower_line=True):
            writer.println(title)
            writer.newline(on_debug_only=True)
            writer.println(f" -> {render(program)}")
            with indented_output(writer):
                dump_tree(program, writer)


if __name__ == "__main__":
    run_demo()
