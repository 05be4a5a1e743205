import pytest

from loxlang.scanner import ScanError, Scanner
from loxlang.tokentype import TokenType as T


def types(source):
    return [item.token_type for item in Scanner(source).scan_tokens()]


def test_arithmetic_comparison():
    assert types("1 + 2 == 5 + 7") == [
        T.NUMBER, T.PLUS, T.NUMBER, T.EQUAL_EQUAL, T.NUMBER, T.PLUS, T.NUMBER, T.EOF,
    ]


def test_parenthesised_expression():
    assert types("1 == (2 + 2)") == [
        T.NUMBER, T.EQUAL_EQUAL, T.LEFT_PAREN, T.NUMBER, T.PLUS, T.NUMBER,
        T.RIGHT_PAREN, T.EOF,
    ]


def test_empty_source_gives_only_eof():
    scanned = Scanner("").scan_tokens()
    assert len(scanned) == 1
    assert scanned[0].token_type is T.EOF
    assert scanned[0].lexeme == ""
    assert scanned[0].literal is None


@pytest.mark.parametrize("source", ["", "1", "a + b", "(){},.-+;*/"])
def test_eof_is_always_last(source):
    scanned = Scanner(source).scan_tokens()
    assert scanned[-1].token_type is T.EOF
    assert all(t.token_type is not T.EOF for t in scanned[:-1])


def test_single_character_tokens():
    assert types("(){},.-+;*/") == [
        T.LEFT_PAREN, T.RIGHT_PAREN, T.LEFT_BRACE, T.RIGHT_BRACE, T.COMMA,
        T.DOT, T.MINUS, T.PLUS, T.SEMICOLON, T.STAR, T.SLASH, T.EOF,
    ]


@pytest.mark.parametrize(
    "source, expected",
    [
        ("!", T.BANG),
        ("!=", T.BANG_EQUAL),
        ("=", T.EQUAL),
        ("==", T.EQUAL_EQUAL),
        (">", T.GREATER),
        (">=", T.GREATER_EQUAL),
        ("<", T.LESS),
    ],
)
def test_one_or_two_character_tokens(source, expected):
    scanned = Scanner(source).scan_tokens()
    assert scanned[0].token_type is expected
    assert scanned[0].lexeme == source


def test_number_literal():
    first = Scanner("12.5").scan_tokens()[0]
    assert first.token_type is T.NUMBER
    assert first.lexeme == "12.5"
    assert first.literal == 12.5


def test_trailing_dot_is_not_part_of_number():
    scanned = Scanner("7.").scan_tokens()
    assert [t.token_type for t in scanned] == [T.NUMBER, T.DOT, T.EOF]
    assert scanned[0].literal == 7.0


def test_string_literal():
    first = Scanner('"hello"').scan_tokens()[0]
    assert first.token_type is T.STRING
    assert first.lexeme == '"hello"'
    assert first.literal == "hello"


def test_multiline_string_advances_line():
    scanned = Scanner('"a\nb" x').scan_tokens()
    assert scanned[0].literal == "a\nb"
    assert scanned[1].token_type is T.IDENTIFIER
    assert scanned[1].line == scanned[0].line


def test_unterminated_string_is_reported_and_dropped(capsys):
    scanned = Scanner('"open').scan_tokens()
    assert [t.token_type for t in scanned] == [T.EOF]
    assert "Unterminated String" in capsys.readouterr().out


@pytest.mark.parametrize(
    "word, expected",
    [("and", T.AND), ("while", T.WHILE), ("nil", T.NIL), ("true", T.TRUE), ("false", T.FALSE)],
)
def test_keywords(word, expected):
    assert types(word) == [expected, T.EOF]


def test_identifier():
    first = Scanner("counter1").scan_tokens()[0]
    assert first.token_type is T.IDENTIFIER
    assert first.lexeme == "counter1"
    assert first.literal is None


def test_keyword_prefix_is_identifier():
    assert types("orchid") == [T.IDENTIFIER, T.EOF]


def test_comment_is_skipped_and_newline_counted():
    scanned = Scanner("1 // note\n2").scan_tokens()
    assert [t.token_type for t in scanned] == [T.NUMBER, T.NUMBER, T.EOF]
    assert scanned[1].line == scanned[0].line + 1


def test_whitespace_is_ignored():
    assert types(" \t\r1\t+ 2 ") == [T.NUMBER, T.PLUS, T.NUMBER, T.EOF]


@pytest.mark.parametrize("symbol", ["@", "_", "#"])
def test_unknown_symbol_raises(symbol):
    with pytest.raises(ScanError) as info:
        Scanner(symbol).scan_tokens()
    assert info.value.symbol == symbol
    assert "Uknown Symbol" in str(info.value)


def test_scanning_twice_gives_same_tokens():
    scanner = Scanner("var x = 1;")
    first_pass = scanner.scan_tokens()
    second_pass = scanner.scan_tokens()
    expected = [T.VAR, T.IDENTIFIER, T.EQUAL, T.NUMBER, T.SEMICOLON, T.EOF]
    assert [t.token_type for t in first_pass] == expected
    assert [t.token_type for t in second_pass] == expected
    assert [t.lexeme for t in second_pass] == ["var", "x", "=", "1", ";", ""]