from dataclasses import dataclass
from typing import Literal

TokenKind = Literal[
    "LET",
    "RETURN",
    "IDENT",
    "INT",
    "STRING",
    "TRUE",
    "FALSE",
    "BANG",
    "MINUS",
    "PLUS",
    "ASTERISK",
    "SLASH",
    "LT",
    "GT",
    "EQ",
    "NOT_EQ",
]


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    literal: str
