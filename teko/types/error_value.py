from __future__ import annotations

from teko import Value
from teko.errors import TekoError


class Error:
    """Error datum: wraps arbitrary data.

    Core faults are delivered to `wind` as Error values whose `cause` holds
    the raised TekoError, so the host can re-raise it if nothing catches it.
    """

    __slots__ = ("payload", "cause")

    def __init__(self, payload: Value, cause: TekoError | None = None):
        self.payload = payload
        self.cause = cause

    @classmethod
    def from_exception(cls, exc: TekoError) -> Error:
        return cls(str(exc), exc)

    def __eq__(self, other):
        return isinstance(other, Error) and self.payload == other.payload

    def __hash__(self):
        return hash(("error", repr(self.payload)))

    def __repr__(self) -> str:
        return f"Error({self.payload!r})"
