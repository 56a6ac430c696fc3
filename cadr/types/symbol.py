from __future__ import annotations
import sys

from cadr.errors import CadrUnboundSymbol
from cadr.types.node import Node


class Symbol(Node):
    __slots__ = ("id",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.id = sys.intern(name)

    def evaluate(self, env, tail=None) -> Node:
        value = env.get(self)
        if value is None:
            raise CadrUnboundSymbol(f"Unable to resolve variable {self.id}")
        return value

    def __eq__(self, other) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
