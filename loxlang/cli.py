"""Command-line front end: an interactive prompt for Lox expressions."""

from __future__ import annotations

import sys
from contextlib import redirect_stdout
from typing import TextIO

from loxlang.expr import LoxRuntimeError, Value, stringify
from loxlang.interpreter import Interpreter
from loxlang.parser import ParseError, Parser
from loxlang.scanner import ScanError, Scanner

USAGE = "Using : jlox [script]"
EX_USAGE = 64


def run(interpreter: Interpreter, source: str) -> Value:
    """Scan, parse and evaluate ``source``, print the result and return it."""
    tokens = Scanner(source).scan_tokens()
    expr = Parser(tokens).parse()
    result = interpreter.interpret(expr)
    print(stringify(result))
    return result


def run_prompt(
    interpreter: Interpreter | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    """Read lines and evaluate them until an empty line or end of input."""
    interpreter = interpreter if interpreter is not None else Interpreter()
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    with redirect_stdout(stdout):
        while True:
            print(">> ", end="", flush=True)
            line = stdin.readline()
            if len(line) <= 1:
                return
            try:
                run(interpreter, line)
            except (ScanError, ParseError, LoxRuntimeError) as error:
                print(error)


def main(argv: list[str] | None = None) -> int:
    """Start the prompt; return the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) > 1:
        print(USAGE)
        return EX_USAGE
    if not args:
        run_prompt(Interpreter())
    return 0


if __name__ == "__main__":
    sys.exit(main())