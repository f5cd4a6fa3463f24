"""
  Teko Reader: lexer and parser

- Streaming, lazy lexing
- Emits Python primitives instead of cons cells:

    - atoms -> Symbol, carrying the line and column it was read at
    - lists -> Python list (possibly empty)

  There are no string, number, quote or comment literals at this level. An
  atom is any maximal run of non-whitespace, non-parenthesis characters.
  Numerals are recognised later by the environment, strings are built by the
  `"` macro.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from teko import Expression
from teko.errors import TekoSyntaxError
from teko.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"(?P<ws>\s+)"
    r"|(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<atom>[^\s()]+)"  # maximal run of non-space, non-paren characters
)

Token = tuple[str, str, int, int]


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (kind, text, line, column) tuples."""
    pos = 0
    line, line_start = 1, 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        kind = m.lastgroup
        text = m.group()
        if kind == "ws":
            newlines = text.count("\n")
            if newlines:
                line += newlines
                line_start = pos + text.rindex("\n") + 1
        else:
            yield kind, text, line, pos - line_start + 1
        pos = m.end()


def datum_end(source: str) -> Optional[int]:
    """Offset just past the first complete expression in `source`.

    Returns None when more text is needed. An atom that runs to the very end
    of `source` is incomplete, since the next chunk may extend it.
    """
    depth = 0
    for m in TOKEN_RE.finditer(source):
        kind = m.lastgroup
        if kind == "ws":
            continue
        if kind == "atom":
            if depth == 0:
                return m.end() if m.end() < len(source) else None
        elif kind == "lparen":
            depth += 1
        else:
            depth -= 1
            if depth <= 0:
                return m.end()
    return None


class TokenStream:
    def __init__(self, tokens: Iterator[Token]):
        self.tokens = iter(tokens)
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def parse_expr(self) -> Optional[Expression]:
        """Parse one expression, or return None at end of input."""
        tok = self.advance()
        if tok is None:
            return None
        kind, text, line, column = tok

        if kind == "atom":
            return Symbol(text, line, column)

        if kind == "rparen":
            raise TekoSyntaxError("Unmatched ')'", line, column)

        # List: iterate with an explicit stack so deep nesting never recurses
        stack: list[tuple[list, int, int]] = [([], line, column)]
        while True:
            tok = self.advance()
            if tok is None:
                _, open_line, open_column = stack[-1]
                raise TekoSyntaxError("Unmatched '('", open_line, open_column)
            kind, text, line, column = tok
            if kind == "atom":
                stack[-1][0].append(Symbol(text, line, column))
            elif kind == "lparen":
                stack.append(([], line, column))
            else:
                done, _, _ = stack.pop()
                if not stack:
                    return done
                stack[-1][0].append(done)

    def parse_all(self) -> Iterator[Expression]:
        while self.peek() is not None:
            yield self.parse_expr()


def parse(source: str) -> list[Expression]:
    """Read every top-level expression in `source`."""
    return list(TokenStream(lex(source)).parse_all())
