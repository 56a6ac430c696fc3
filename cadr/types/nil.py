from __future__ import annotations

from cadr.types.node import Node


class NilType(Node):
    """The empty list. Terminates proper lists; not the same thing as #f."""

    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def evaluate(self, env, tail=None):
        return self

    def __str__(self): return "()"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)


Nil = NilType()
