from cadr import LispValue
from cadr.errors import CadrArityError
from cadr.types.environment import Environment
from cadr.types.node import Node
from cadr.types.pair import delink


def quote_form(tail: Node, env: Environment) -> LispValue:
    args = delink(tail)
    if len(args) != 1:
        raise CadrArityError("Quote expects exactly 1 argument")
    return args[0]
