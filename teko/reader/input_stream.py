"""Line-buffered input shared by the input primitives.

`read` may pull in more text than one expression needs. Whatever follows the
expression is kept here, so a later `read-line` or `read-string` sees it.
"""

from __future__ import annotations

from typing import Optional, TextIO

from teko import Expression
from teko.reader.parser import TokenStream, datum_end, lex


class InputStream:
    def __init__(self, stream: TextIO):
        self.stream = stream
        self.pending = ""

    def readline(self) -> str:
        """Next line including its terminator; "" at end of input."""
        if not self.pending:
            return self.stream.readline()
        line, newline, rest = self.pending.partition("\n")
        if newline:
            self.pending = rest
            return line + newline
        self.pending = ""
        return line + self.stream.readline()

    def read(self, size: int = -1) -> str:
        """Up to `size` characters, or everything left when size is negative."""
        text, self.pending = self.pending, ""
        if size < 0:
            return text + self.stream.read()
        if len(text) >= size:
            self.pending = text[size:]
            return text[:size]
        return text + self.stream.read(size - len(text))

    def read_expression(self) -> Optional[Expression]:
        """Read one complete expression, or return None at end of input.

        Raises TekoSyntaxError if the input ends inside a list or starts with
        an unmatched ')'.
        """
        text, self.pending = self.pending, ""
        while True:
            end = datum_end(text)
            if end is not None:
                break
            line = self.stream.readline()
            if not line:
                end = len(text)
                break
            text += line

        self.pending = text[end:]
        return TokenStream(lex(text[:end])).parse_expr()
