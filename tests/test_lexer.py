import textwrap

import pytest

from loxpy.lexer import KEYWORDS, Lexer, Token, TokenKind, format_number, scan
from tests._debug import debug_dump_diagnostics, debug_dump_tokens
from tests._shared_cases import TOKENIZE_CASES, TokenizeCase, case_id


def kinds(source: str) -> list[TokenKind]:
    return [token.kind for token in scan(source)]


def lex_with_debug(test_name: str, source: str) -> list[Token]:
    lexer = Lexer(source)
    tokens = lexer.lex()
    debug_dump_tokens(test_name, source, tokens)
    debug_dump_diagnostics(test_name, lexer.diagnostics, source)
    return tokens


def test_empty_source_yields_only_eof() -> None:
    assert scan("") == [Token.eof()]


@pytest.mark.parametrize("case", TOKENIZE_CASES, ids=case_id)
def test_every_scan_ends_with_exactly_one_eof(case: TokenizeCase) -> None:
    tokens = lex_with_debug(case.name, case.source)

    assert tokens[-1].kind == TokenKind.EOF
    assert [t.kind for t in tokens].count(TokenKind.EOF) == 1


def test_grouping_punctuation() -> None:
    assert kinds("(( )){}") == [
        TokenKind.LEFT_PAREN,
        TokenKind.LEFT_PAREN,
        TokenKind.RIGHT_PAREN,
        TokenKind.RIGHT_PAREN,
        TokenKind.LEFT_BRACE,
        TokenKind.RIGHT_BRACE,
        TokenKind.EOF,
    ]


def test_unexpected_character_becomes_invalid_and_scanning_continues() -> None:
    tokens = scan(",.$(")

    assert [t.kind for t in tokens] == [
        TokenKind.COMMA,
        TokenKind.DOT,
        TokenKind.INVALID,
        TokenKind.LEFT_PAREN,
        TokenKind.EOF,
    ]
    assert tokens[2] == Token.invalid("Unexpected character: $", 1)


def test_non_ascii_character_is_unexpected() -> None:
    tokens = scan("é")

    assert tokens[0].is_invalid
    assert tokens[0].message == "Unexpected character: é"


def test_lexer_records_diagnostic_per_invalid_token() -> None:
    lexer = Lexer('a\n  @ "open')
    tokens = lexer.lex()

    assert [t.kind for t in tokens].count(TokenKind.INVALID) == 2
    assert [(d.code, d.line, d.column) for d in lexer.diagnostics] == [
        ("LEXER_UNEXPECTED_CHARACTER", 2, 3),
        ("LEXER_UNTERMINATED_STRING", 2, 5),
    ]
    assert lexer.diagnostics[1].message == "Unterminated string."


def test_lexer_can_be_run_twice_without_accumulating_state() -> None:
    lexer = Lexer("$")

    first = lexer.lex()
    second = lexer.lex()

    assert first == second
    assert len(lexer.diagnostics) == 1


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("=", [TokenKind.EQUAL]),
        ("==", [TokenKind.EQUAL_EQUAL]),
        ("===", [TokenKind.EQUAL_EQUAL, TokenKind.EQUAL]),
        ("!", [TokenKind.BANG]),
        ("!=", [TokenKind.BANG_EQUAL]),
        ("<", [TokenKind.LESS]),
        ("<=", [TokenKind.LESS_EQUAL]),
        (">", [TokenKind.GREATER]),
        (">=", [TokenKind.GREATER_EQUAL]),
        ("= =", [TokenKind.EQUAL, TokenKind.EQUAL]),
        ("<>", [TokenKind.LESS, TokenKind.GREATER]),
    ],
)
def test_one_and_two_character_operators(source: str, expected: list[TokenKind]) -> None:
    assert kinds(source) == [*expected, TokenKind.EOF]


def test_operator_lexemes_are_surface_text() -> None:
    tokens = scan("!= <= / *")

    assert [t.lexeme for t in tokens] == ["!=", "<=", "/", "*", ""]


def test_comment_discards_rest_of_line() -> None:
    assert kinds("// comment") == [TokenKind.EOF]
    assert kinds("+ // - * /\n-") == [TokenKind.PLUS, TokenKind.MINUS, TokenKind.EOF]


def test_single_slash_is_division() -> None:
    assert kinds("a / b") == [TokenKind.IDENTIFIER, TokenKind.SLASH, TokenKind.IDENTIFIER, TokenKind.EOF]


def test_string_literal_and_lexeme() -> None:
    (token, eof) = scan('"foo"')

    assert token.kind == TokenKind.STRING
    assert token.lexeme == '"foo"'
    assert token.value == "foo"
    assert token.literal_text == "foo"
    assert eof.kind == TokenKind.EOF


def test_string_keeps_backslashes_and_comment_markers_verbatim() -> None:
    (token, _) = scan(r'"a\n // b"')

    assert token.value == r"a\n // b"


def test_unterminated_string_reports_opening_line_and_drops_rest_of_line() -> None:
    tokens = scan('(\n"foo ) +\n)')

    assert [t.kind for t in tokens] == [
        TokenKind.LEFT_PAREN,
        TokenKind.INVALID,
        TokenKind.RIGHT_PAREN,
        TokenKind.EOF,
    ]
    assert tokens[1].message == "Unterminated string."
    assert tokens[1].line == 2


def test_strings_do_not_span_lines() -> None:
    tokens = scan('"first\nsecond"')

    # The closing quote on line 2 opens a new, also unterminated, string.
    assert [t.kind for t in tokens] == [
        TokenKind.INVALID,
        TokenKind.IDENTIFIER,
        TokenKind.INVALID,
        TokenKind.EOF,
    ]
    assert [t.line for t in tokens[:3]] == [1, 2, 2]


@pytest.mark.parametrize(
    ("source", "lexeme", "literal"),
    [
        ("1234", "1234", "1234.0"),
        ("3.14", "3.14", "3.14"),
        ("200.00", "200.00", "200.0"),
        ("0", "0", "0.0"),
        ("007", "007", "7.0"),
        ("1234.1234", "1234.1234", "1234.1234"),
    ],
)
def test_number_literals(source: str, lexeme: str, literal: str) -> None:
    (token, _) = scan(source)

    assert token.kind == TokenKind.NUMBER
    assert token.lexeme == lexeme
    assert token.value == float(source)
    assert token.literal_text == literal


def test_trailing_dot_is_split_from_number() -> None:
    tokens = scan("7.")

    assert [(t.kind, t.lexeme) for t in tokens] == [
        (TokenKind.NUMBER, "7"),
        (TokenKind.DOT, "."),
        (TokenKind.EOF, ""),
    ]


def test_second_decimal_point_splits_number() -> None:
    tokens = scan("1.2.3")

    assert [(t.kind, t.lexeme) for t in tokens] == [
        (TokenKind.NUMBER, "1.2"),
        (TokenKind.DOT, "."),
        (TokenKind.NUMBER, "3"),
        (TokenKind.EOF, ""),
    ]


def test_double_dot_after_digits() -> None:
    assert kinds("1..2") == [
        TokenKind.NUMBER,
        TokenKind.DOT,
        TokenKind.DOT,
        TokenKind.NUMBER,
        TokenKind.EOF,
    ]


def test_leading_dot_is_not_part_of_number() -> None:
    tokens = scan(".5")

    assert [(t.kind, t.lexeme) for t in tokens[:2]] == [(TokenKind.DOT, "."), (TokenKind.NUMBER, "5")]


def test_number_followed_by_identifier() -> None:
    tokens = scan("12abc")

    assert [(t.kind, t.lexeme) for t in tokens[:2]] == [
        (TokenKind.NUMBER, "12"),
        (TokenKind.IDENTIFIER, "abc"),
    ]


def test_format_number_always_has_a_fraction() -> None:
    assert format_number(7.0) == "7.0"
    assert format_number(1e20) == "100000000000000000000.0"
    assert format_number(0.5) == "0.5"
    assert format_number(1e-7) == "0.0000001"
    assert format_number(1e-22) == "0.0000000000000000000001"
    assert format_number(1.2345678901234568e-10) == "0.00000000012345678901234568"


@pytest.mark.parametrize(
    "source",
    ["0.0000000000000000000001", "0.00000000012345678901234567", "123456.000001", "0.1"],
)
def test_tiny_number_literal_text_round_trips_to_value(source: str) -> None:
    (token, _) = scan(source)
    text = token.literal_text

    assert text is not None
    whole, _, fraction = text.partition(".")
    assert whole.isdigit()
    assert fraction.isdigit()
    assert float(text) == token.value


def test_keyword_and_identifier_boundary() -> None:
    assert scan("class")[0] == Token.simple(TokenKind.CLASS, 1)
    assert scan("classify")[0] == Token.identifier("classify", 1)


@pytest.mark.parametrize("word", sorted(KEYWORDS))
def test_every_reserved_word_is_a_keyword(word: str) -> None:
    (token, _) = scan(word)

    assert token.kind == KEYWORDS[word]
    assert token.lexeme == word
    assert token.value is None


def test_keywords_are_case_sensitive() -> None:
    assert kinds("While NIL") == [TokenKind.IDENTIFIER, TokenKind.IDENTIFIER, TokenKind.EOF]


def test_identifiers_allow_underscores_and_digits() -> None:
    tokens = scan("_foo bar_2 __")

    assert [t.lexeme for t in tokens[:3]] == ["_foo", "bar_2", "__"]
    assert all(t.kind == TokenKind.IDENTIFIER for t in tokens[:3])


def test_tokens_carry_their_line() -> None:
    source = textwrap.dedent(
        """
        var a = 1;

        print a;
        """
    ).lstrip()

    tokens = scan(source)

    assert [(t.kind, t.line) for t in tokens if t.kind != TokenKind.EOF] == [
        (TokenKind.VAR, 1),
        (TokenKind.IDENTIFIER, 1),
        (TokenKind.EQUAL, 1),
        (TokenKind.NUMBER, 1),
        (TokenKind.SEMICOLON, 1),
        (TokenKind.PRINT, 3),
        (TokenKind.IDENTIFIER, 3),
        (TokenKind.SEMICOLON, 3),
    ]


def test_carriage_return_line_endings_are_ignored() -> None:
    assert kinds("(\r\n)\r\n") == [TokenKind.LEFT_PAREN, TokenKind.RIGHT_PAREN, TokenKind.EOF]


def test_stray_carriage_return_is_unexpected() -> None:
    tokens = scan("a\rb")

    assert tokens[1] == Token.invalid("Unexpected character: \r", 1)


@pytest.mark.parametrize("case", TOKENIZE_CASES, ids=case_id)
def test_inserting_blank_line_only_shifts_lines(case: TokenizeCase) -> None:
    before = scan(case.source)
    after = scan("  \t \n" + case.source)

    def payload(token: Token) -> tuple[object, ...]:
        return (token.kind, token.lexeme, token.value, token.message)

    assert [payload(t) for t in before[:-1]] == [payload(t) for t in after[:-1]]
    assert [t.line + 1 for t in before[:-1]] == [t.line for t in after[:-1]]


@pytest.mark.parametrize(
    "kind",
    [kind for kind in TokenKind if kind.fixed_text is not None],
    ids=lambda kind: kind.name,
)
def test_fixed_text_rescans_to_same_kind(kind: TokenKind) -> None:
    tokens = scan(kind.fixed_text or "")

    assert [t.kind for t in tokens] == [kind, TokenKind.EOF]


def test_simple_token_requires_fixed_text() -> None:
    with pytest.raises(ValueError, match="no fixed text"):
        Token.simple(TokenKind.NUMBER, 1)
