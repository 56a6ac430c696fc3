from cadr import LispValue
from cadr.errors import CadrArityError, CadrTypeError
from cadr.evaluation.evaluator import evaluate
from cadr.types.environment import Environment
from cadr.types.node import Node
from cadr.types.pair import delink
from cadr.types.symbol import Symbol


def define_form(tail: Node, env: Environment) -> LispValue:
    """
    (define name value)
    Binds in the root frame regardless of where the form appears, and returns the value.
    """
    args = delink(tail)
    if len(args) != 2:
        raise CadrArityError("define requires exactly 2 arguments")

    name, val_expr = args
    if not isinstance(name, Symbol):
        raise CadrTypeError(f"define first argument must be a Symbol, got {name}")
    value = evaluate(val_expr, env)
    env.define_global(name, value)
    return value
