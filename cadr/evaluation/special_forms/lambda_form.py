from cadr import LispValue
from cadr.errors import CadrArityError
from cadr.types.bind import check_formals
from cadr.types.environment import Environment
from cadr.types.lambda_fn import Lambda
from cadr.types.node import Node
from cadr.types.pair import Pair, delink


def lambda_form(tail: Node, env: Environment) -> LispValue:
    # (lambda params body...)
    # params is a symbol (receives the raw operand chain), () or a list of symbols.
    # The body forms are evaluated in sequence on each call; none means the call yields ().
    if not isinstance(tail, Pair):
        raise CadrArityError("lambda requires at least a parameter list")

    params = tail.left
    check_formals(params)
    body = delink(tail.right)

    # The snapshot is taken once, here; later calls re-parent it to the caller.
    return Lambda(params, body, env.collapse())
