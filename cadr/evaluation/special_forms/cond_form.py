from cadr import LispValue
from cadr.errors import CadrArityError
from cadr.evaluation.evaluator import evaluate, evaluate_body
from cadr.types.environment import Environment
from cadr.types.literal import TRUE
from cadr.types.nil import Nil
from cadr.types.node import Node
from cadr.types.pair import delink
from cadr.types.procedure import Else


def cond_form(tail: Node, env: Environment) -> LispValue:
    """(cond (test expr ...) ... (else expr ...))

    Clauses are tried in order. The first whose test evaluates to #t or to the
    else marker has its expressions evaluated, and the last value is returned;
    a clause without expressions returns its test value. If no clause fires the
    result is ().
    """
    for clause in delink(tail):
        parts = delink(clause)
        if not parts:
            raise CadrArityError("cond clause requires a test")
        test, *body = parts
        test_value = evaluate(test, env)
        if test_value is Else or test_value == TRUE:
            return evaluate_body(body, env) if body else test_value
    return Nil
