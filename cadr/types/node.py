"""Base classes for the closed set of node variants.

Every node implements ``evaluate(env, tail)``. Atomic nodes ignore ``tail``;
procedures receive the unevaluated operand chain of the form that called them
and decide for themselves which operands to evaluate, and in which order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cadr.types.environment import Environment


class Node:
    __slots__ = ()

    def evaluate(self, env: Environment, tail: Node | None = None) -> Node:
        raise NotImplementedError(f"{type(self).__name__} does not implement evaluate")

    def __repr__(self) -> str:
        return str(self)


class Procedure(Node):
    """Anything that may appear in operator position of a Pair."""

    __slots__ = ()
