"""Binding of call operands to a lambda's formal parameters."""

from __future__ import annotations

import logging

from cadr.errors import CadrArityError, CadrTypeError
from cadr.types.environment import Environment
from cadr.types.nil import Nil
from cadr.types.node import Node
from cadr.types.pair import delink
from cadr.types.symbol import Symbol

logger = logging.getLogger(__name__)


def check_formals(params: Node) -> None:
    """Reject a parameter spec that is not a symbol or a proper list of symbols."""
    if isinstance(params, Symbol):
        return
    for name in delink(params):
        if not isinstance(name, Symbol):
            raise CadrTypeError(f"lambda parameter {name} is not a symbol")


def bind_arguments(
    params: Node,
    operands: Node,
    frame: Environment,
    caller_env: Environment,
) -> Environment:
    """
    Bind `operands` into `frame` according to `params` and return `frame`.

    - A single symbol receives the whole operand chain, unevaluated.
    - A list of symbols receives the operands one by one, each evaluated in
      `caller_env`, left to right. The counts must match.
    """
    if isinstance(params, Symbol):
        logger.debug("   setting %s=%s (unevaluated)", params, operands)
        frame.define(params, operands)
        return frame

    names = delink(params)
    exprs = delink(operands)
    if len(names) != len(exprs):
        raise CadrArityError(
            f"Procedure expects {len(names)} argument(s), got {len(exprs)}"
        )
    for name, expr in zip(names, exprs):
        value = expr.evaluate(caller_env, Nil)
        logger.debug("   setting %s=%s", name, value)
        frame.define(name, value)
    return frame
