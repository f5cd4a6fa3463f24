
class TekoError(Exception):
    """ Base class for all Teko errors. Carries a source position when one is known"""

    def __init__(self, message: str = "", line: int | None = None, column: int | None = None):
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)
        self.line = line
        self.column = column

class DuplicateDefinition(TekoError):
    """ Raised when define targets a symbol that already has a binding"""
    pass

class UnboundVariable(TekoError):
    """ Raised when a symbol is looked up or set before it is bound"""
    pass

class ImmutableBinding(TekoError):
    """ Raised when set! targets a constant (numerals, true, false, ())"""

class ArityMismatch(TekoError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class NotCallable(TekoError):
    """ Raised when the head of an application is neither a function nor a macro"""

class TekoSyntaxError(TekoError):
    """ Raised for reader errors and malformed special forms"""

class TekoTypeError(TekoError):
    """ Raised when the types of arguments passed to a primitive are incorrect"""

class TekoDomainError(TekoError):
    """ Raised when a primitive is applied outside its domain (e.g. division by zero)"""

class UnhandledUnwind(TekoError):
    """ Raised when unwind fires with no active wind frame"""

    def __init__(self, payload):
        from teko.printer import to_string
        super().__init__(f"Unhandled unwind: {to_string(payload)}")
        self.payload = payload
