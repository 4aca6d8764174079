#!/usr/bin/env python3
"""Time `scan` over a generated Lox corpus and report per-line token density.

The corpus mixes declarations, control flow, comments and a configurable
share of lines with lexical errors, so the recovery paths are timed too.
"""

from __future__ import annotations

import argparse
from collections import Counter
import random
import time

from tqdm import tqdm

from loxpy.lexer import Lexer, TokenKind

LINE_TEMPLATES: tuple[str, ...] = (
    'var {name} = "{name} value";',
    "var {name} = {number};",
    "if ({name} >= {number}) print {name};",
    "while ({name} != nil and {name} <= {number}) {name} = {name} - 1;",
    "fun {name}(a, b) {{ return a * b / {number}; }}",
    "class {name} < Base {{ init() {{ this.x = {number}; }} }}",
    "// {name} is only a comment",
    "print !true == false or {name};",
)
ERROR_TEMPLATES: tuple[str, ...] = (
    "var {name} = {number} @ 2;",
    'print "{name} never closes',
    "{name} # {number}",
)


def generate_corpus(lines: int, error_rate: float, seed: int) -> str:
    rng = random.Random(seed)
    out: list[str] = []
    for index in range(lines):
        templates = ERROR_TEMPLATES if rng.random() < error_rate else LINE_TEMPLATES
        template = rng.choice(templates)
        number = f"{rng.randint(0, 9999)}.{rng.randint(0, 99)}" if index % 3 else str(rng.randint(0, 9999))
        out.append(template.format(name=f"v{index % 97}", number=number))
    return "\n".join(out) + "\n"


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark the scanner on a generated corpus")
    parser.add_argument("--lines", type=int, default=20_000, help="Corpus size in lines")
    parser.add_argument("--error-rate", type=float, default=0.05, help="Share of lines with lexical errors")
    parser.add_argument("--repeat", type=int, default=10, help="Number of timed scans")
    parser.add_argument("--seed", type=int, default=1, help="Corpus generator seed")
    parser.add_argument("--no-progress", action="store_true", help="Hide the tqdm progress bar")
    args = parser.parse_args()

    source = generate_corpus(max(args.lines, 1), args.error_rate, args.seed)

    durations: list[float] = []
    kinds: Counter[TokenKind] = Counter()
    diagnostics = 0
    for _ in tqdm(range(max(args.repeat, 1)), desc="scan", unit="run", disable=args.no_progress):
        lexer = Lexer(source)
        start = time.perf_counter()
        tokens = lexer.lex()
        durations.append(time.perf_counter() - start)
        kinds = Counter(token.kind for token in tokens)
        diagnostics = len(lexer.diagnostics)

    total = sum(kinds.values())
    fastest = min(durations)
    print(f"Corpus: {args.lines} lines, {len(source)} chars, seed={args.seed}")
    print(f"Tokens: {total} ({total / args.lines:.2f} per line), invalid: {diagnostics}")
    print(f"Fastest scan: {fastest * 1000:.1f} ms ({args.lines / fastest:,.0f} lines/s)")
    print("Most common kinds:")
    for kind, count in kinds.most_common(8):
        print(f"  {kind.name:<14} {count}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
