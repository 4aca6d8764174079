from loxpy.parser import parse


def test_parse_literal_keywords_and_numbers() -> None:
    result = parse("true false nil 42 3.50")

    assert result.values == ["true", "false", "nil", "42.0", "3.5"]
    assert result.diagnostics == []
    assert result.has_errors is False


def test_parse_empty_source_has_no_values() -> None:
    result = parse("")

    assert result.values == []
    assert result.has_errors is False


def test_parse_reports_unsupported_tokens_with_line() -> None:
    result = parse('true\n"hello" +')

    assert result.values == ["true"]
    assert [(d.code, d.line, d.message) for d in result.diagnostics] == [
        ("PARSER_UNSUPPORTED_TOKEN", 2, 'Unsupported token: "hello"'),
        ("PARSER_UNSUPPORTED_TOKEN", 2, "Unsupported token: +"),
    ]
    assert result.has_errors is True


def test_parse_carries_lexer_diagnostics_first() -> None:
    result = parse("x\n$ nil")

    assert result.values == ["nil"]
    assert [d.code for d in result.diagnostics] == [
        "LEXER_UNEXPECTED_CHARACTER",
        "PARSER_UNSUPPORTED_TOKEN",
    ]
