from teko.reader.parser import lex, parse, TokenStream
from teko.reader.numeric import resolve as resolve_numeral
from teko.reader.input_stream import InputStream

__all__ = ["lex", "parse", "TokenStream", "resolve_numeral", "InputStream"]
