"""Procedure variants other than user closures (see lambda_fn)."""

from __future__ import annotations

from cadr import HandlerFn, NativeFn
from cadr.types.node import Node, Procedure
from cadr.types.nil import Nil
from cadr.types.pair import delink


class SpecialForm(Procedure):
    """A built-in form that receives its operands unevaluated."""

    __slots__ = ("name", "handler")

    def __init__(self, name: str, handler: HandlerFn):
        self.name = name
        self.handler = handler

    def evaluate(self, env, tail=None) -> Node:
        return self.handler(Nil if tail is None else tail, env)

    def __str__(self) -> str:
        return f"#<special-form {self.name}>"


class NativeProcedure(Procedure):
    """A host function applied to its operands after evaluating them left to right."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: NativeFn):
        self.name = name
        self.fn = fn

    def evaluate(self, env, tail=None) -> Node:
        args = [arg.evaluate(env, Nil) for arg in delink(Nil if tail is None else tail)]
        return self.fn(env, args)

    def __str__(self) -> str:
        return f"#<procedure {self.name}>"


class Quoted(Procedure):
    """The reader's wrapper for 'expr; evaluates to expr untouched."""

    __slots__ = ("expression",)

    def __init__(self, expression: Node):
        self.expression = expression

    def evaluate(self, env, tail=None) -> Node:
        return self.expression

    def __eq__(self, other) -> bool:
        return isinstance(other, Quoted) and self.expression == other.expression

    def __hash__(self) -> int:
        return hash(("quote", self.expression))

    def __str__(self) -> str:
        return f"'{self.expression}"


class ElseMarker(Node):
    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def evaluate(self, env, tail=None) -> Node:
        return self

    def __str__(self) -> str:
        return "else"


Else = ElseMarker()
