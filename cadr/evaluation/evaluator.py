"""Entry points for evaluating nodes.

Each node variant carries its own evaluation rule (see cadr.types); this module
holds the small helpers that special forms and the interpreter share.
"""

from __future__ import annotations

from typing import Iterable

from cadr.errors import CadrTypeError
from cadr.types.environment import Environment
from cadr.types.literal import Boolean
from cadr.types.nil import Nil
from cadr.types.node import Node


def evaluate(expr: Node, env: Environment) -> Node:
    """Evaluate a single form in `env`."""
    return expr.evaluate(env, Nil)


def evaluate_body(forms: Iterable[Node], env: Environment) -> Node:
    """Evaluate `forms` in order and return the last value (Nil if there are none)."""
    result: Node = Nil
    for form in forms:
        result = evaluate(form, env)
    return result


def evaluate_boolean(expr: Node, env: Environment, context: str) -> bool:
    """Evaluate `expr` and require a Boolean result."""
    value = evaluate(expr, env)
    if not isinstance(value, Boolean):
        raise CadrTypeError(f"{context} expects a boolean, got {value}")
    return value.value
