"""Entry point for evaluating parsed expressions."""

from __future__ import annotations

from loxlang.expr import Expr, Value


class Interpreter:
    """Evaluates expression trees."""

    def interpret(self, expr: Expr) -> Value:
        """Evaluate ``expr`` and return its value."""
        return expr.evaluate()