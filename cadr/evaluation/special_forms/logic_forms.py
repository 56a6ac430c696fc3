from cadr import LispValue
from cadr.evaluation.evaluator import evaluate
from cadr.types.environment import Environment
from cadr.types.literal import FALSE, TRUE
from cadr.types.node import Node
from cadr.types.pair import delink


def and_form(tail: Node, env: Environment) -> LispValue:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right until #f is found,
    which is returned immediately. Otherwise returns the value of the last
    operand. With zero operands, returns #t.
    """
    result: Node = TRUE
    for expr in delink(tail):
        result = evaluate(expr, env)
        if result == FALSE:
            return FALSE
    return result


def or_form(tail: Node, env: Environment) -> LispValue:
    """Short-circuiting logical OR special form.

    (or a b c ...) evaluates each operand left-to-right and returns the first
    value that is not #f. If there is none, returns #f.
    """
    for expr in delink(tail):
        val = evaluate(expr, env)
        if val != FALSE:
            return val
    return FALSE
