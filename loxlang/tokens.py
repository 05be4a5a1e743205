"""The token record produced by the scanner."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from loxlang.tokentype import TokenType

LiteralValue = Union[str, float, None]


@dataclass(frozen=True)
class Token:
    """A single lexical token with its source text, literal value and line."""

    token_type: TokenType
    lexeme: str
    literal: LiteralValue
    line: int

    def __str__(self) -> str:
        return f" {self.token_type.name}  {self.lexeme}  {self.literal!r}"