from __future__ import annotations


class NullType:
    """The unique empty value, written `()`."""

    _instance: NullType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "()"

    def __eq__(self, other):
        return isinstance(other, NullType)

    def __hash__(self):
        return hash(NullType)


Null = NullType()
