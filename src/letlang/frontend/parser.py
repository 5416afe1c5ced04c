from functools import lru_cache
from importlib.resources import files
from typing import Any, cast

from lark import Lark, Token as LarkToken, Transformer, Tree

from ..writer import IndentingWriter
from .ast_expressions import (
    Expression,
    Identifier,
    Infix,
    InfixOperator,
    Literal,
    LiteralKind,
    Prefix,
    PrefixOperator,
    leading_token,
)
from .ast_statements import (
    ExpressionStatement,
    LetStatement,
    Program,
    ReturnStatement,
    Statement,
)
from .printer import render_statement
from .tokens import Token, TokenKind


class AstTransformer(Transformer[LarkToken, object]):
    def __init__(self, writer: IndentingWriter | None = None) -> None:
        super().__init__()
        self._writer = writer or IndentingWriter()

    def start(self, children: list[object]) -> Program:
        statements = tuple(self._as_statement(child) for child in children)
        for statement in statements:
            self._writer.debugln(
                f"[{type(statement).__name__}] {render_statement(statement)}"
            )
        return Program(statements=statements)

    def let_statement(self, children: list[object]) -> LetStatement:
        [keyword, name, value] = children
        assert isinstance(name, LarkToken)
        return LetStatement(
            token=self._as_token(keyword),
            name=Identifier(str(name)),
            value=self._as_expression(value),
        )

    def return_statement(self, children: list[object]) -> ReturnStatement:
        [keyword, value] = children
        return ReturnStatement(
            token=self._as_token(keyword),
            return_value=self._as_expression(value),
        )

    def expression_statement(self, children: list[object]) -> ExpressionStatement:
        [expr] = children
        expression = self._as_expression(expr)
        return ExpressionStatement(
            token=leading_token(expression), expression=expression
        )

    def bare_expression_statement(
        self, children: list[object]
    ) -> ExpressionStatement:
        return self.expression_statement(children)

    def infix(self, children: list[object]) -> Infix:
        [left, operator, right] = children
        token = self._as_token(operator)
        return Infix(
            token=token,
            left=self._as_expression(left),
            operator=cast(InfixOperator, token.literal),
            right=self._as_expression(right),
        )

    def prefix(self, children: list[object]) -> Prefix:
        [operator, right] = children
        token = self._as_token(operator)
        return Prefix(
            token=token,
            operator=cast(PrefixOperator, token.literal),
            right=self._as_expression(right),
        )

    def identifier(self, children: list[object]) -> Identifier:
        [name] = children
        assert isinstance(name, LarkToken)
        return Identifier(str(name))

    def literal(self, children: list[object]) -> Literal:
        [value] = children
        assert isinstance(value, LarkToken)
        return Literal(str(value), kind=cast(LiteralKind, value.type))

    def _as_token(self, value: object) -> Token:
        assert isinstance(value, LarkToken)
        return Token(kind=cast(TokenKind, value.type), literal=str(value))

    def _as_expression(self, value: object) -> Expression:
        assert isinstance(value, (Identifier, Literal, Prefix, Infix))
        return value

    def _as_statement(self, value: object) -> Statement:
        assert isinstance(value, (LetStatement, ReturnStatement, ExpressionStatement))
        return value


def _load_grammar_text() -> str:
    grammar_file = files("letlang.frontend").joinpath("grammar.lark")
    return grammar_file.read_text(encoding="utf-8")


@lru_cache(maxsize=1)
def get_parser() -> Lark:
    grammar = _load_grammar_text()
    return Lark(grammar, start="start", parser="lalr")


def parse_tree(source: str) -> Tree[LarkToken]:
    parser: Any = get_parser()
    tree = parser.parse(source)
    return cast(Tree[LarkToken], tree)


def parse_program(source: str, writer: IndentingWriter | None = None) -> Program:
    parsed = parse_tree(source)
    program = AstTransformer(writer).transform(parsed)
    assert isinstance(program, Program)
    return program
