"""Cons cells and the helpers that convert between chains and Python lists."""

from __future__ import annotations

import logging
from typing import Iterable

from cadr.errors import CadrNotAProcedure, CadrTypeError
from cadr.types.node import Node, Procedure
from cadr.types.nil import Nil

logger = logging.getLogger(__name__)


class Pair(Node):
    """A two-child cell. ``right`` is Nil at the end of a proper list."""

    __slots__ = ("left", "right")

    def __init__(self, left: Node, right: Node):
        if left is None or right is None:
            raise CadrTypeError("Pair children must both be present")
        self.left = left
        self.right = right

    def evaluate(self, env, tail=None) -> Node:
        """Apply ``left`` to the unevaluated operand chain in ``right``."""
        logger.debug("evaluating %s with %s", self.left, self.right)
        # Procedure nodes placed directly in operator position are not
        # evaluated again.
        fn = self.left if isinstance(self.left, Procedure) else self.left.evaluate(env, Nil)
        if not isinstance(fn, Procedure):
            raise CadrNotAProcedure(f"{fn} is not a procedure")
        return fn.evaluate(env, self.right)

    def __eq__(self, other) -> bool:
        # Iterative along the right spine; only nesting in `left` recurses
        a: Node = self
        b: Node = other
        while isinstance(a, Pair):
            if not isinstance(b, Pair) or a.left != b.left:
                return False
            a, b = a.right, b.right
        return a == b

    def __hash__(self) -> int:
        h = 0
        node: Node = self
        while isinstance(node, Pair):
            h = hash((h, node.left))
            node = node.right
        return hash((h, node))

    def __str__(self) -> str:
        parts: list[str] = []
        node: Node = self
        while isinstance(node, Pair):
            parts.append(str(node.left))
            node = node.right
        if node is not Nil:
            parts.append(".")
            parts.append(str(node))
        return "(" + " ".join(parts) + ")"


def link(items: Iterable[Node], tail: Node = Nil) -> Node:
    """Build a right-nested chain of Pairs from ``items`` ending in ``tail``."""
    result = tail
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


def delink(node: Node) -> list[Node]:
    """Flatten a proper list into a Python list.

    Raises CadrTypeError when a tail is neither a Pair nor Nil.
    """
    items: list[Node] = []
    while isinstance(node, Pair):
        items.append(node.left)
        node = node.right
    if node is not Nil:
        raise CadrTypeError(f"Expected a proper list, found dotted tail {node}")
    return items
