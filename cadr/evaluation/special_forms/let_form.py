from cadr import LispValue
from cadr.errors import CadrArityError, CadrTypeError
from cadr.evaluation.evaluator import evaluate, evaluate_body
from cadr.types.environment import Environment
from cadr.types.node import Node
from cadr.types.pair import Pair, delink
from cadr.types.symbol import Symbol


def let_form(tail: Node, env: Environment) -> LispValue:
    """
    (let ((name init) ...) body ...)

    Every init is evaluated in the enclosing environment before any name is
    bound, so inits cannot see each other. The body runs in a fresh child frame.
    """
    if not isinstance(tail, Pair):
        raise CadrArityError("let requires a binding list")

    inner = Environment(outer=env)
    for binding in delink(tail.left):
        parts = delink(binding)
        if len(parts) != 2:
            raise CadrArityError(f"let binding must be (name value), got {binding}")
        name, init = parts
        if not isinstance(name, Symbol):
            raise CadrTypeError(f"let binding name must be a Symbol, got {name}")
        inner.define(name, evaluate(init, env))

    return evaluate_body(delink(tail.right), inner)
