from dataclasses import dataclass

from .ast_expressions import Expression, Identifier
from .tokens import Token


@dataclass(frozen=True, slots=True)
class Program:
    statements: tuple["Statement", ...] = ()

    def __post_init__(self) -> None:
        # Producers may hand over a list; the root keeps its own tuple.
        object.__setattr__(self, "statements", tuple(self.statements))

    def token_literal(self) -> str:
        """Literal of the first statement's token, or "" for an empty program."""
        if not self.statements:
            return ""
        return self.statements[0].token_literal()


@dataclass(frozen=True, slots=True)
class LetStatement:
    token: Token
    name: Identifier
    value: Expression

    def token_literal(self) -> str:
        return self.token.literal


@dataclass(frozen=True, slots=True)
class ReturnStatement:
    token: Token
    return_value: Expression

    def token_literal(self) -> str:
        return self.token.literal


# An expression evaluated for its value, not bound to a name.
# Examples:
# - x
# - 1 + 2;
@dataclass(frozen=True, slots=True)
class ExpressionStatement:
    token: Token
    expression: Expression

    def token_literal(self) -> str:
        return self.token.literal


Statement = LetStatement | ReturnStatement | ExpressionStatement
