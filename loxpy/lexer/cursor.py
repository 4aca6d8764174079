"""Line iteration and a one-character-lookahead cursor."""

from collections.abc import Iterator
from dataclasses import dataclass


def iter_lines(source: str) -> Iterator[tuple[int, str]]:
    """Yield `(line_number, text)` pairs, 1-based, without line terminators.

    Lines end at `\\n`; a trailing `\\r` is dropped. A final line without a
    terminator is still yielded, but a terminator at the very end of the
    source does not start an extra empty line.
    """
    if not source:
        return
    lines = source.split("\n")
    if source.endswith("\n"):
        lines.pop()
    for index, line in enumerate(lines):
        if line.endswith("\r"):
            line = line[:-1]
        yield index + 1, line


@dataclass(slots=True)
class Cursor:
    """Walks a single line of text."""

    text: str
    line: int
    position: int = 0

    @property
    def is_at_end(self) -> bool:
        return self.position >= len(self.text)

    def peek(self) -> str:
        """Current character, or `\\0` past the end of the line."""
        if self.is_at_end:
            return "\0"
        return self.text[self.position]

    def peek_next(self) -> str:
        index = self.position + 1
        if index >= len(self.text):
            return "\0"
        return self.text[index]

    def advance(self) -> str:
        """Consume the current character and return it."""
        ch = self.peek()
        if not self.is_at_end:
            self.position += 1
        return ch

    def match(self, expected: str) -> bool:
        """Consume the current character only if it equals `expected`."""
        if self.peek() != expected:
            return False
        self.position += 1
        return True

    def skip_to_end(self) -> None:
        self.position = len(self.text)

    def slice_from(self, start: int) -> str:
        return self.text[start : self.position]
