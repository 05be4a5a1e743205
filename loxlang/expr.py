"""Expression tree for Lox and its evaluation."""

from __future__ import annotations

import math
import operator
import struct
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Union

from loxlang.tokens import Token
from loxlang.tokentype import TokenType

Value = Union[float, str, bool, None]


class LoxRuntimeError(Exception):
    """Raised when an expression cannot be evaluated."""


def to_f32(number: float) -> float:
    """Round a Python float to the nearest single-precision value."""
    try:
        return struct.unpack("f", struct.pack("f", number))[0]
    except OverflowError:
        return math.copysign(math.inf, number)


def _is_number(value: Value) -> bool:
    return isinstance(value, float)


def _format_f32(number: float) -> str:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    text = repr(number)
    for precision in range(1, 10):
        text = f"{number:.{precision}g}"
        if to_f32(float(text)) == number:
            break
    return format(Decimal(text), "f")


def is_falsy(value: Value) -> bool:
    """Return the result of logical negation applied to ``value``."""
    if value is None:
        return True
    if isinstance(value, bool):
        return not value
    if isinstance(value, str):
        return len(value) == 0
    return value == 0.0


def type_name(value: Value) -> str:
    """Name the kind of a runtime value, as used in error messages."""
    if value is None:
        return "nil"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, str):
        return "String"
    return "Number"


def stringify(value: Value) -> str:
    """Render a runtime value the way the interpreter prints it."""
    if value is None:
        return "nil"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, str):
        return value
    return _format_f32(value)


def _debug(value: Value) -> str:
    if value is None:
        return "Nil"
    if value is True:
        return "True"
    if value is False:
        return "False"
    if isinstance(value, str):
        escaped = (
            value.replace("\\", "\\\\")
            .replace('"', '\\"')
            .replace("\n", "\\n")
            .replace("\r", "\\r")
            .replace("\t", "\\t")
        )
        return f'StringValue("{escaped}")'
    text = _format_f32(value)
    if math.isfinite(value) and "." not in text:
        text += ".0"
    return f"Number({text})"


def _values_equal(left: Value, right: Value) -> bool:
    return type(left) is type(right) and left == right


def _divide(x: float, y: float) -> float:
    if y == 0.0:
        if x == 0.0 or math.isnan(x):
            return math.nan
        return math.copysign(math.inf, x) * math.copysign(1.0, y)
    return x / y


def literal_from_token(token: Token) -> Value:
    """Build the runtime value that a literal token stands for."""
    kind = token.token_type
    if kind is TokenType.NUMBER:
        if not isinstance(token.literal, float):
            raise ValueError("could not unwrap")
        return to_f32(token.literal)
    if kind is TokenType.STRING:
        if not isinstance(token.literal, str):
            raise ValueError("could not unwrap")
        return token.literal
    if kind is TokenType.FALSE:
        return False
    if kind is TokenType.TRUE:
        return True
    if kind is TokenType.NIL:
        return None
    raise ValueError(f"could not create literal value from {token!r}")


_ARITHMETIC: dict[TokenType, Callable[[float, float], float]] = {
    TokenType.PLUS: operator.add,
    TokenType.MINUS: operator.sub,
    TokenType.SLASH: _divide,
    TokenType.STAR: operator.mul,
}

_COMPARISON: dict[TokenType, Callable[[object, object], bool]] = {
    TokenType.GREATER: operator.gt,
    TokenType.GREATER_EQUAL: operator.ge,
    TokenType.LESS: operator.lt,
    TokenType.LESS_EQUAL: operator.le,
}


class Expr(ABC):
    """A node of the expression tree."""

    @abstractmethod
    def evaluate(self) -> Value:
        """Compute the value of this expression."""

    def print(self) -> str:
        """Write the parenthesised form of this expression to stdout and return it."""
        text = f"=> {self}"
        sys.stdout.write(text + "\n")
        return text


@dataclass(frozen=True)
class Binary(Expr):
    """An infix operation on two operands."""

    left: Expr
    operator: Token
    right: Expr

    def evaluate(self) -> Value:
        left = self.left.evaluate()
        right = self.right.evaluate()
        op = self.operator.token_type

        if _is_number(left) and _is_number(right):
            if op in _ARITHMETIC:
                return to_f32(_ARITHMETIC[op](left, right))
            if op in _COMPARISON:
                return _COMPARISON[op](left, right)
        if (isinstance(left, str) and _is_number(right)) or (
            _is_number(left) and isinstance(right, str)
        ):
            raise LoxRuntimeError("Cannot operate on String and number")
        both_strings = isinstance(left, str) and isinstance(right, str)
        if both_strings and op is TokenType.PLUS:
            return left + right
        if op is TokenType.BANG_EQUAL:
            return not _values_equal(left, right)
        if op is TokenType.EQUAL_EQUAL:
            return _values_equal(left, right)
        if both_strings and op in _COMPARISON:
            return _COMPARISON[op](left, right)
        raise LoxRuntimeError(
            f"{op.name}  not impl for {_debug(left)} and {_debug(right)}"
        )

    def __str__(self) -> str:
        return f"({self.operator.lexeme} {self.left} {self.right})"


@dataclass(frozen=True)
class Grouping(Expr):
    """A parenthesised expression."""

    expression: Expr

    def evaluate(self) -> Value:
        return self.expression.evaluate()

    def __str__(self) -> str:
        return f"(group {self.expression})"


@dataclass(frozen=True)
class Literal(Expr):
    """A constant value."""

    value: Value

    def evaluate(self) -> Value:
        return self.value

    def __str__(self) -> str:
        return stringify(self.value)


@dataclass(frozen=True)
class Unary(Expr):
    """A prefix operation on one operand."""

    operator: Token
    right: Expr

    def evaluate(self) -> Value:
        right = self.right.evaluate()
        op = self.operator.token_type
        if op is TokenType.MINUS:
            if _is_number(right):
                return -right
            raise LoxRuntimeError(f"Minus is not implemented for {type_name(right)}")
        if op is TokenType.BANG:
            return is_falsy(right)
        raise LoxRuntimeError(f"{op.name} is not a valid unary operator")

    def __str__(self) -> str:
        return f"({self.operator.lexeme} {self.right})"