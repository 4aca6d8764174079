"""Lexer."""

import logging

from loxpy.diagnostics import Diagnostic, DiagnosticSpec
from loxpy.diagnostics.codes import LEXER_UNEXPECTED_CHARACTER, LEXER_UNTERMINATED_STRING
from loxpy.lexer.cursor import Cursor, iter_lines
from loxpy.lexer.tokens import KEYWORDS, OPERATORS, PUNCTUATION, Token, TokenKind

logger = logging.getLogger(__name__)


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_alpha(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ch == "_"


class Lexer:
    """Line-oriented lexer that never fails.

    Malformed input becomes INVALID tokens (with a matching entry in
    `diagnostics`) and scanning carries on.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._diagnostics: list[Diagnostic] = []

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """List of diagnostics emitted during lexing."""
        return self._diagnostics

    def lex(self) -> list[Token]:
        self._diagnostics = []
        tokens: list[Token] = []
        last_line = 0
        for line_number, text in iter_lines(self._source):
            self._lex_line(Cursor(text, line_number), tokens)
            last_line = line_number
        tokens.append(Token.eof(last_line))

        logger.debug(
            "scanned %d tokens (%d invalid) from %d lines",
            len(tokens),
            len(self._diagnostics),
            last_line,
        )
        return tokens

    def _lex_line(self, cursor: Cursor, tokens: list[Token]) -> None:
        while not cursor.is_at_end:
            token = self._lex_token(cursor)
            if token is not None:
                tokens.append(token)

    def _lex_token(self, cursor: Cursor) -> Token | None:
        start = cursor.position
        ch = cursor.advance()

        if ch == " " or ch == "\t":
            return None

        if ch == "/" and cursor.peek() == "/":
            cursor.skip_to_end()
            return None

        if ch in OPERATORS:
            single, double = OPERATORS[ch]
            return Token.simple(double if cursor.match("=") else single, cursor.line)

        if ch in PUNCTUATION:
            return Token.simple(PUNCTUATION[ch], cursor.line)

        if ch == '"':
            return self._lex_string(cursor, start)

        if _is_digit(ch):
            return self._lex_number(cursor, start)

        if _is_alpha(ch):
            return self._lex_identifier(cursor, start)

        return self._error(LEXER_UNEXPECTED_CHARACTER, cursor, start, char=ch)

    def _lex_string(self, cursor: Cursor, start: int) -> Token:
        # Opening quote already consumed; no escape processing.
        while not cursor.is_at_end:
            if cursor.peek() == '"':
                contents = cursor.slice_from(start + 1)
                cursor.advance()
                return Token.string(contents, cursor.line)
            cursor.advance()

        return self._error(LEXER_UNTERMINATED_STRING, cursor, start)

    def _lex_number(self, cursor: Cursor, start: int) -> Token:
        while _is_digit(cursor.peek()):
            cursor.advance()

        # A dot only belongs to the number when a digit follows it; otherwise
        # it is left for the next token.
        if cursor.peek() == "." and _is_digit(cursor.peek_next()):
            cursor.advance()
            while _is_digit(cursor.peek()):
                cursor.advance()

        return Token.number(cursor.slice_from(start), cursor.line)

    def _lex_identifier(self, cursor: Cursor, start: int) -> Token:
        while _is_alpha(cursor.peek()) or _is_digit(cursor.peek()):
            cursor.advance()

        text = cursor.slice_from(start)
        keyword = KEYWORDS.get(text)
        if keyword is not None:
            return Token.simple(keyword, cursor.line)
        return Token.identifier(text, cursor.line)

    def _error(self, spec: DiagnosticSpec, cursor: Cursor, start: int, **kwargs: object) -> Token:
        message = spec.format(**kwargs)
        self._diagnostics.append(
            Diagnostic(
                code=spec.code,
                message=message,
                line=cursor.line,
                column=start + 1,
                severity=spec.severity,
                hint=spec.hint,
                category=spec.category,
            )
        )
        return Token.invalid(message, cursor.line)


def scan(source: str) -> list[Token]:
    """Scan `source` into tokens, ending with exactly one EOF token."""
    return Lexer(source).lex()


def dump_tokens(tokens: list[Token], diagnostics: list[Diagnostic] | None = None) -> None:
    """Print token list with kind, line, lexeme and payload for debugging."""
    for i, tok in enumerate(tokens):
        payload = tok.message if tok.is_invalid else tok.literal_text
        print(f"{i:03d} {tok.kind.name:<14} line={tok.line:<4} lexeme={tok.lexeme!r} payload={payload!r}")

    if diagnostics is not None:
        print("\nDiagnostics:")
        for d in diagnostics:
            print(f"- {d.severity.upper()} {d.code} at {d.line}:{d.column} message={d.message}")
