from .frontend.ast_expressions import Identifier, Infix, Literal, Prefix
from .frontend.ast_statements import (
    ExpressionStatement,
    LetStatement,
    Program,
    ReturnStatement,
)
from .frontend.tokens import Token


def build_let_return_program() -> Program:
    # Source:
    # let myVar = anotherVar;
    # return 10;
    return Program(
        statements=(
            LetStatement(
                token=Token("LET", "let"),
                name=Identifier("myVar"),
                value=Identifier("anotherVar"),
            ),
            ReturnStatement(
                token=Token("RETURN", "return"),
                return_value=Literal("10"),
            ),
        )
    )


def build_operator_program() -> Program:
    # Source:
    # let total = -price * 2 + tax;
    # !(total < limit)
    return Program(
        statements=(
            LetStatement(
                token=Token("LET", "let"),
                name=Identifier("total"),
                value=Infix(
                    token=Token("PLUS", "+"),
                    left=Infix(
                        token=Token("ASTERISK", "*"),
                        left=Prefix(
                            token=Token("MINUS", "-"),
                            operator="-",
                            right=Identifier("price"),
                        ),
                        operator="*",
                        right=Literal("2"),
                    ),
                    operator="+",
                    right=Identifier("tax"),
                ),
            ),
            ExpressionStatement(
                token=Token("BANG", "!"),
                expression=Prefix(
                    token=Token("BANG", "!"),
                    operator="!",
                    right=Infix(
                        token=Token("LT", "<"),
                        left=Identifier("total"),
                        operator="<",
                        right=Identifier("limit"),
                    ),
                ),
            ),
        )
    )
