from dataclasses import dataclass
from typing import Literal as TypingLiteral

from .tokens import Token

PrefixOperator = TypingLiteral["!", "-"]
InfixOperator = TypingLiteral["+", "-", "*", "/", "<", ">", "==", "!="]
LiteralKind = TypingLiteral["INT", "STRING", "TRUE", "FALSE"]


class UnsupportedNodeError(TypeError):
    """Raised when a traversal reaches a value outside the known node variants."""


@dataclass(frozen=True, slots=True)
class Identifier:
    name: str

    @property
    def token(self) -> Token:
        return Token("IDENT", self.name)

    def token_literal(self) -> str:
        return self.name


# The value is kept as source text; producers decide how numbers and strings
# are spelled.
@dataclass(frozen=True, slots=True)
class Literal:
    value: str
    kind: LiteralKind = "INT"

    @property
    def token(self) -> Token:
        return Token(self.kind, self.value)

    def token_literal(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Prefix:
    token: Token
    operator: PrefixOperator
    right: "Expression"

    def token_literal(self) -> str:
        return self.token.literal


# The token is the operator, which is what introduces the node when reading
# left to right.
@dataclass(frozen=True, slots=True)
class Infix:
    token: Token
    left: "Expression"
    operator: InfixOperator
    right: "Expression"

    def token_literal(self) -> str:
        return self.token.literal


Expression = Identifier | Literal | Prefix | Infix


def leading_token(expression: Expression) -> Token:
    """Return the first token of `expression`, ignoring grouping parentheses.

    Parentheses are not part of the tree, so for `(1 + 2) * 3` this is the `1`
    token of the leftmost operand, and for `-x` it is the `-` operator.
    """
    if isinstance(expression, Infix):
        return leading_token(expression.left)

    if isinstance(expression, (Identifier, Literal, Prefix)):
        return expression.token

    raise UnsupportedNodeError(
        f"Unsupported expression type: {type(expression).__name__}"
    )
