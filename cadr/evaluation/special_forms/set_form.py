from cadr import LispValue
from cadr.errors import CadrArityError, CadrTypeError
from cadr.evaluation.evaluator import evaluate
from cadr.types.environment import Environment
from cadr.types.node import Node
from cadr.types.pair import delink
from cadr.types.symbol import Symbol


def set_form(tail: Node, env: Environment) -> LispValue:
    args = delink(tail)
    if len(args) != 2:
        raise CadrArityError("set! requires exactly 2 arguments: (set! var value)")
    var_sym, val_expr = args
    if not isinstance(var_sym, Symbol):
        raise CadrTypeError(f"set! first argument must be a Symbol, got {var_sym}")
    value = evaluate(val_expr, env)
    # Mutates the nearest frame that already binds the name
    env.set(var_sym, value)

    return value
