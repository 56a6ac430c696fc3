from cadr import LispValue
from cadr.errors import CadrArityError
from cadr.evaluation.evaluator import evaluate, evaluate_boolean
from cadr.types.environment import Environment
from cadr.types.nil import Nil
from cadr.types.node import Node
from cadr.types.pair import delink


def if_form(tail: Node, env: Environment) -> LispValue:
    args = delink(tail)
    if len(args) not in (2, 3):
        raise CadrArityError("if requires a condition, a then-expression and an optional else-expression")

    # Only #t and #f are accepted as conditions
    if evaluate_boolean(args[0], env, "if"):
        return evaluate(args[1], env)
    elif len(args) == 3:
        return evaluate(args[2], env)
    else:
        return Nil
