# loxlang

An evaluator for expressions in the Lox language. Source text is turned into
tokens, parsed into a syntax tree and evaluated.

## What it understands

- Numbers (held at single precision), strings in double quotes, `true`,
  `false`, `nil`
- Grouping with parentheses
- Unary `-` (numbers only) and `!`
- Arithmetic `+ - * /` on two numbers, and `+` joining two strings
- Comparisons `>`, `>=`, `<` on two numbers or two strings; the scanner reads
  the less-or-equal operator from the characters `<<`, not `<=`
- Equality `==` and `!=` on any two values
- `//` comments to the end of the line

`!` treats `nil`, `false`, `0` and the empty string as falsy. Mixing a string
and a number in a binary operation is an error. Only one expression is parsed
from the input; anything after it is ignored.

## Interactive prompt

Install the package, then start the prompt:

```
pip install .
loxlang
```

Each line you type is evaluated and its value printed:

```
>> 1 + 2 * 3
7
>> "foo" + "bar"
foobar
>> !nil
true
```

An empty line or end of input ends the session. Scan, parse and evaluation
errors are printed and the prompt carries on. Passing more than one argument
prints a usage line and exits with status 64.

## Using it from Python

```python
from loxlang.scanner import Scanner
from loxlang.parser import Parser
from loxlang.interpreter import Interpreter
from loxlang.expr import stringify

tokens = Scanner("1 == (2 + 2)").scan_tokens()
expr = Parser(tokens).parse()
print(expr)                                      # (== 1 (group (+ 2 2)))
print(stringify(Interpreter().interpret(expr)))  # false
```

`loxlang.cli.run(interpreter, source)` does all three steps, prints the result
and returns it; `loxlang.cli.run_prompt(interpreter, stdin, stdout)` runs the
prompt over any text streams.

Errors:

- `loxlang.scanner.ScanError` for a character the scanner does not know
  (an unterminated string prints a message and yields no token instead)
- `loxlang.parser.ParseError` for malformed input
- `loxlang.expr.LoxRuntimeError` for an operation on values that do not
  support it

## What it does not do

There are no statements, variables, functions or classes: keywords such as
`var` and `print` are scanned but cannot be parsed. Running a script file is
not supported; `loxlang` with a single argument does nothing and exits with
status 0.

## Tests

```
pip install .[test]
pytest
```