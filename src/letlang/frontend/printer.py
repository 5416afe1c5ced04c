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

Node = Program | Statement | Expression


def render(node: Node) -> str:
    """Reconstruct the source text of any node."""
    if isinstance(node, Program):
        return render_program(node)

    if isinstance(node, (LetStatement, ReturnStatement, ExpressionStatement)):
        return render_statement(node)

    return render_expression(node)


def render_program(program: Program) -> str:
    # Statements carry their own terminators, so no separator is added.
    return "".join(render_statement(statement) for statement in program.statements)


def render_statement(statement: Statement) -> str:
    if isinstance(statement, LetStatement):
        return (
            f"{statement.token_literal()} {render_expression(statement.name)}"
            f" = {render_expression(statement.value)};"
        )

    if isinstance(statement, ReturnStatement):
        return f"return {render_expression(statement.return_value)};"

    if isinstance(statement, ExpressionStatement):
        return render_expression(statement.expression)

    raise UnsupportedNodeError(
        f"Unsupported statement type: {type(statement).__name__}"
    )


def render_expression(expr: Expression) -> str:
    if isinstance(expr, Identifier):
        return expr.name

    if isinstance(expr, Literal):
        return expr.value

    if isinstance(expr, Prefix):
        return f"({expr.operator}{render_expression(expr.right)})"

    if isinstance(expr, Infix):
        return (
            f"({render_expression(expr.left)} {expr.operator}"
            f" {render_expression(expr.right)})"
        )

    raise UnsupportedNodeError(f"Unsupported expression type: {type(expr).__name__}")
