"""Runtime environment for cadr.

The Environment stores bindings of Symbols to nodes and supports nested scopes
via an `outer` link. The root frame (the one without an `outer`) holds the
built-ins and every `define`d name of an interpreter session.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from cadr.errors import CadrTypeError, CadrUnboundSymbol
from cadr.types.node import Node
from cadr.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to nodes."""

    __slots__ = ("vars", "outer")

    def __init__(
        self,
        outer: Optional[Environment] = None,
        bindings: Optional[dict[Symbol, Node]] = None,
    ):
        # `bindings` is adopted as-is, not copied: see `reparent`.
        self.vars: dict[Symbol, Node] = bindings if bindings is not None else {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: Node) -> None:
        """Bind `name` to `value` in this frame only, overwriting any local binding.

        Raises CadrTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise CadrTypeError(f"Cannot define {name} as a symbol")
        self.vars[name] = value

    def define_global(self, name: Symbol, value: Node) -> None:
        """Bind `name` in the outermost frame of this chain."""
        self.root().define(name, value)

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def contains_local(self, name: Symbol) -> bool:
        return name in self.vars

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: Symbol) -> Optional[Node]:
        """Return the value bound to `name`, or None if nothing in the chain binds it."""
        env = self.find(name)
        if env is None:
            return None
        return env.vars[name]

    def lookup(self, name: Symbol) -> Node:
        """Look up the value bound to `name`.

        Raises CadrUnboundSymbol if not found.
        """
        value = self.get(name)
        if value is None:
            raise CadrUnboundSymbol(f"Cannot lookup unbound symbol {name}")
        return value

    def set(self, name: Symbol, value: Node) -> None:
        """Update an existing binding for `name` in the environment chain.

        Raises CadrUnboundSymbol if the symbol is not found.
        """
        if not isinstance(name, Symbol):
            raise CadrTypeError(f"Cannot set {name}: not a symbol")
        env = self.find(name)
        if env is None:
            raise CadrUnboundSymbol(f"Cannot set unbound symbol {name}")
        env.vars[name] = value

    def update(self, mapping: dict[Symbol, Node]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def copy(self) -> Environment:
        """A new frame with a copy of the local bindings and the same `outer`."""
        return Environment(self.outer, dict(self.vars))

    def collapse(self) -> Environment:
        """Flatten this frame and all of its ancestors into one parentless frame.

        Closer bindings shadow farther ones.
        """
        frames = []
        env: Optional[Environment] = self
        while env is not None:
            frames.append(env)
            env = env.outer
        merged: dict[Symbol, Node] = {}
        for frame in reversed(frames):
            merged.update(frame.vars)
        return Environment(None, merged)

    def reparent(self, outer: Optional[Environment]) -> Environment:
        """A frame sharing this frame's bindings whose parent is `outer`.

        Writes through either frame are visible through both.
        """
        return Environment(outer, self.vars)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
