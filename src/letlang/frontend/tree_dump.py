from io import StringIO

from ..writer import IndentingWriter, indented_output
from .ast_expressions import (
    Expression,
    Identifier,
    Infix,
    Literal,
    Prefix,
    UnsupportedNodeError,
)
from .ast_statements import (
    ExpressionStatement,
    LetStatement,
    Program,
    ReturnStatement,
    Statement,
)
from .printer import Node


def format_tree(node: Node, indent_size: int = 3) -> str:
    """Return the indented structural view of `node`, one node per line.

    Example, for `let x = (1 + y);`:

        Program
           LetStatement 'let'
              name: Identifier 'x'
              value: Infix '+'
                 left: Literal INT '1'
                 right: Identifier 'y'
    """
    stream = StringIO()
    dump_tree(node, IndentingWriter(stream=stream, indent_size=indent_size))
    return stream.getvalue()


def dump_tree(node: Node, writer: IndentingWriter) -> None:
    if isinstance(node, Program):
        writer.println("Program")
        with indented_output(writer):
            for statement in node.statements:
                _dump_statement(statement, writer)
        return

    if isinstance(node, (LetStatement, ReturnStatement, ExpressionStatement)):
        _dump_statement(node, writer)
        return

    _dump_expression(node, writer)


def _dump_statement(statement: Statement, writer: IndentingWriter) -> None:
    if isinstance(statement, LetStatement):
        writer.println(_statement_header(statement))
        with indented_output(writer):
            _dump_expression(statement.name, writer, "name: ")
            _dump_expression(statement.value, writer, "value: ")
        return

    if isinstance(statement, ReturnStatement):
        writer.println(_statement_header(statement))
        with indented_output(writer):
            _dump_expression(statement.return_value, writer, "return_value: ")
        return

    if isinstance(statement, ExpressionStatement):
        writer.println(_statement_header(statement))
        with indented_output(writer):
            _dump_expression(statement.expression, writer, "expression: ")
        return

    raise UnsupportedNodeError(
        f"Unsupported statement type: {type(statement).__name__}"
    )


def _statement_header(statement: Statement) -> str:
    return f"{type(statement).__name__} {statement.token_literal()!r}"


def _dump_expression(
    expr: Expression, writer: IndentingWriter, prefix: str = ""
) -> None:
    if isinstance(expr, Identifier):
        writer.println(f"{prefix}Identifier {expr.name!r}")
        return

    if isinstance(expr, Literal):
        writer.println(f"{prefix}Literal {expr.kind} {expr.value!r}")
        return

    if isinstance(expr, Prefix):
        writer.println(f"{prefix}Prefix {expr.operator!r}")
        with indented_output(writer):
            _dump_expression(expr.right, writer, "right: ")
        return

    if isinstance(expr, Infix):
        writer.println(f"{prefix}Infix {expr.operator!r}")
        with indented_output(writer):
            _dump_expression(expr.left, writer, "left: ")
            _dump_expression(expr.right, writer, "right: ")
        return

    raise UnsupportedNodeError(f"Unsupported expression type: {type(expr).__name__}")
