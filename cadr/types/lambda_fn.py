"""Lambda (closure value) representation for cadr."""

from __future__ import annotations

from io import StringIO

from cadr.types.bind import bind_arguments
from cadr.types.environment import Environment
from cadr.types.nil import Nil
from cadr.types.node import Node, Procedure


class Lambda(Procedure):
    """A first-class lambda with formal parameters, body, and captured frame.

    `env` is the collapsed snapshot taken when the lambda expression was
    evaluated. Each call looks names up in the call frame, then in `env`, then
    in the caller's environment. Every call of the same Lambda writes through
    to the same `env` bindings, so `set!` on a captured name persists.
    """

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: Node, body: list[Node], env: Environment):
        self.formals: Node = formals
        self.body: list[Node] = body
        self.env: Environment = env

    def evaluate(self, env, tail=None) -> Node:
        captured = self.env.reparent(env)
        frame = bind_arguments(
            self.formals, Nil if tail is None else tail, Environment(captured), env
        )
        result: Node = Nil
        for form in self.body:
            result = form.evaluate(frame, Nil)
        return result

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(lambda ")
            buffer.write(str(self.formals))
            for form in self.body:
                buffer.write(" ")
                buffer.write(str(form))
            buffer.write(")")
            return buffer.getvalue()
