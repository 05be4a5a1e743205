"""Recursive-descent parser building expression trees from tokens."""

from __future__ import annotations

from loxlang.expr import Binary, Expr, Grouping, Literal, Unary, literal_from_token
from loxlang.tokens import Token
from loxlang.tokentype import TokenType

_LITERALS = frozenset(
    {TokenType.FALSE, TokenType.TRUE, TokenType.NIL, TokenType.NUMBER, TokenType.STRING}
)

_STATEMENT_STARTS = frozenset(
    {
        TokenType.CLASS,
        TokenType.FUN,
        TokenType.VAR,
        TokenType.FOR,
        TokenType.IF,
        TokenType.WHILE,
        TokenType.PRINT,
        TokenType.RETURN,
    }
)


class ParseError(Exception):
    """Raised when the tokens do not form a valid expression."""


class Parser:
    """Parses a token list into a single expression."""

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = list(tokens)
        self._current = 0

    def parse(self) -> Expr:
        """Parse one expression starting at the current position."""
        return self._expression()

    def _expression(self) -> Expr:
        return self._equality()

    def _binary_level(self, operand, kinds: tuple[TokenType, ...]) -> Expr:
        expr = operand()
        while self._match(*kinds):
            op = self._previous()
            right = operand()
            expr = Binary(expr, op, right)
        return expr

    def _equality(self) -> Expr:
        return self._binary_level(
            self._comparison, (TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL)
        )

    def _comparison(self) -> Expr:
        return self._binary_level(
            self._term,
            (
                TokenType.GREATER_EQUAL,
                TokenType.GREATER,
                TokenType.LESS,
                TokenType.LESS_EQUAL,
            ),
        )

    def _term(self) -> Expr:
        return self._binary_level(self._factor, (TokenType.MINUS, TokenType.PLUS))

    def _factor(self) -> Expr:
        return self._binary_level(self._unary, (TokenType.STAR, TokenType.SLASH))

    def _unary(self) -> Expr:
        if self._match(TokenType.BANG, TokenType.MINUS):
            op = self._previous()
            return Unary(op, self._unary())
        return self._primary()

    def _primary(self) -> Expr:
        token = self._peek()
        if token.token_type is TokenType.LEFT_PAREN:
            self._advance()
            expr = self._expression()
            self._consume(TokenType.RIGHT_PAREN, "Expected ')'")
            return Grouping(expr)
        if token.token_type in _LITERALS:
            self._advance()
            return Literal(literal_from_token(token))
        raise ParseError("Expected Expression ")

    def _synchronize(self) -> None:
        self._advance()
        while not self._is_at_end():
            if self._previous().token_type is TokenType.SEMICOLON:
                return
            if self._peek().token_type in _STATEMENT_STARTS:
                return
            self._advance()

    def _consume(self, kind: TokenType, message: str) -> None:
        if self._peek().token_type is not kind:
            raise ParseError(message)
        self._advance()

    def _match(self, *kinds: TokenType) -> bool:
        if any(self._check(kind) for kind in kinds):
            self._advance()
            return True
        return False

    def _check(self, kind: TokenType) -> bool:
        return not self._is_at_end() and self._peek().token_type is kind

    def _advance(self) -> Token:
        if not self._is_at_end():
            self._current += 1
        return self._previous()

    def _is_at_end(self) -> bool:
        return self._peek().token_type is TokenType.EOF

    def _peek(self) -> Token:
        try:
            return self.tokens[self._current]
        except IndexError:
            raise ParseError("Unexpected end of tokens") from None

    def _previous(self) -> Token:
        return self.tokens[self._current - 1]