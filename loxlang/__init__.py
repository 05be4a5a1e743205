"""Scanner, parser and evaluator for Lox expressions, with an interactive prompt."""

__version__ = "0.1.0"