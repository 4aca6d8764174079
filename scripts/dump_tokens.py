#!/usr/bin/env python
import argparse
from pathlib import Path

from loxpy.lexer import Lexer, Token, render


def format_token(idx: int, token: Token) -> str:
    base = f"[{idx}] kind={token.kind.name} line={token.line} lexeme={token.lexeme!r}"

    if token.is_invalid:
        return base + f" message={token.message!r}"
    if token.kind.has_literal:
        return base + f" value={token.value!r} literal={token.literal_text!r}"
    return base + f" rendered={render(token)!r}"


def main() -> None:
    parser = argparse.ArgumentParser(description="Dump every token of a Lox file")
    parser.add_argument("input_path", type=Path)
    parser.add_argument("--output", type=Path, default=Path("out/tokens.txt"))
    args = parser.parse_args()

    text = args.input_path.read_text(encoding="utf-8")

    lexer = Lexer(text)
    tokens = lexer.lex()

    output_path: Path = args.output
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w", encoding="utf-8") as f:
        for idx, token in enumerate(tokens):
            f.write(format_token(idx, token) + "\n")

    print(f"Wrote {len(tokens)} tokens ({len(lexer.diagnostics)} diagnostics) to {output_path}")


if __name__ == "__main__":
    main()
