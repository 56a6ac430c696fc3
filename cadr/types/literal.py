"""Self-evaluating literal nodes: integers, booleans and strings."""

from __future__ import annotations

from typing import Any

from cadr.types.node import Node


class Literal(Node):
    __slots__ = ("value",)

    def __init__(self, value: Any):
        self.value = value

    def evaluate(self, env, tail=None) -> Node:
        return self

    # Equality and hash come from the payload, scoped to the literal kind so
    # that 1 and "1" (or 1 and #t) never compare equal.
    def __eq__(self, other) -> bool:
        return type(other) is type(self) and other.value == self.value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.value))

    def __str__(self) -> str:
        return str(self.value)


class Integer(Literal):
    __slots__ = ()

    def __init__(self, value: int):
        super().__init__(int(value))


class Boolean(Literal):
    __slots__ = ()

    def __init__(self, value: bool):
        super().__init__(bool(value))

    def __str__(self) -> str:
        return "#t" if self.value else "#f"


class String(Literal):
    __slots__ = ()

    def __init__(self, value: str):
        super().__init__(str(value))

    def __str__(self) -> str:
        return f'"{self.value}"'


TRUE = Boolean(True)
FALSE = Boolean(False)
