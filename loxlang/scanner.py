"""Turns Lox source text into a list of tokens."""

from __future__ import annotations

from loxlang.tokens import LiteralValue, Token
from loxlang.tokentype import TokenType

KEYWORDS: dict[str, TokenType] = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

_SINGLE: dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# first char -> (second char, type if matched, type otherwise)
_PAIRED: dict[str, tuple[str, TokenType, TokenType]] = {
    "!": ("=", TokenType.BANG_EQUAL, TokenType.BANG),
    "=": ("=", TokenType.EQUAL_EQUAL, TokenType.EQUAL),
    ">": ("=", TokenType.GREATER_EQUAL, TokenType.GREATER),
    "<": ("<", TokenType.LESS_EQUAL, TokenType.LESS),
}

_WHITESPACE = frozenset(" \r\t")


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _is_alpha(c: str) -> bool:
    return "a" <= c <= "z" or "A" <= c <= "Z"


def _is_alpha_numeric(c: str) -> bool:
    return _is_alpha(c) or _is_digit(c)


class ScanError(Exception):
    """Raised when the source holds a character the scanner does not know."""

    def __init__(self, symbol: str, line: int) -> None:
        super().__init__(f"Uknown Symbol {symbol}")
        self.symbol = symbol
        self.line = line


class Scanner:
    """Scans Lox source text into tokens."""

    def __init__(self, source: str) -> None:
        self.source = source
        self._tokens: list[Token] = []
        self._start = 0
        self._current = 0
        self._line = 1

    def scan_tokens(self) -> list[Token]:
        """Scan the whole source and return its tokens, ending with EOF."""
        self._tokens = []
        self._start = 0
        self._current = 0
        self._line = 1
        while not self._is_at_end():
            self._start = self._current
            self._scan_token()
        self._tokens.append(Token(TokenType.EOF, "", None, self._line))
        return list(self._tokens)

    def _scan_token(self) -> None:
        c = self._advance()
        if c in _SINGLE:
            self._add_token(_SINGLE[c])
        elif c in _PAIRED:
            second, matched, plain = _PAIRED[c]
            self._add_token(matched if self._match(second) else plain)
        elif c == "/":
            if self._match("/"):
                while self._peek() != "\n" and not self._is_at_end():
                    self._advance()
            else:
                self._add_token(TokenType.SLASH)
        elif c in _WHITESPACE:
            pass
        elif c == "\n":
            self._line += 1
        elif c == '"':
            self._string()
        elif _is_digit(c):
            self._number()
        elif _is_alpha(c):
            self._identifier()
        else:
            raise ScanError(c, self._line)

    def _identifier(self) -> None:
        while _is_alpha_numeric(self._peek()):
            self._advance()
        text = self.source[self._start:self._current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def _number(self) -> None:
        while _is_digit(self._peek()):
            self._advance()
        if self._peek() == "." and _is_digit(self._peek_next()):
            self._advance()
            while _is_digit(self._peek()):
                self._advance()
        value = float(self.source[self._start:self._current])
        self._add_token(TokenType.NUMBER, value)

    def _string(self) -> None:
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == "\n":
                self._line += 1
            self._advance()
        if self._is_at_end():
            print(f"{self._line} Unterminated String")
            return
        self._advance()
        value = self.source[self._start + 1:self._current - 1]
        self._add_token(TokenType.STRING, value)

    def _is_at_end(self) -> bool:
        return self._current >= len(self.source)

    def _advance(self) -> str:
        c = self.source[self._current]
        self._current += 1
        return c

    def _peek(self) -> str:
        if self._is_at_end():
            return "\0"
        return self.source[self._current]

    def _peek_next(self) -> str:
        if self._current + 1 >= len(self.source):
            return "\0"
        return self.source[self._current + 1]

    def _match(self, expected: str) -> bool:
        if self._is_at_end() or self.source[self._current] != expected:
            return False
        self._current += 1
        return True

    def _add_token(self, token_type: TokenType, literal: LiteralValue = None) -> None:
        text = self.source[self._start:self._current]
        self._tokens.append(Token(token_type, text, literal, self._line))