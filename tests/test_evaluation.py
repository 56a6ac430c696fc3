import pytest

from cadr import errors
from cadr.evaluation.evaluator import evaluate
from cadr.reader.parser import parse_one
from cadr.types.literal import FALSE, TRUE, Integer, String
from cadr.types.nil import Nil
from cadr.types.pair import link
from cadr.types.procedure import Else, Quoted
from cadr.types.symbol import Symbol


def run(interp, source):
    return interp.run(source)


# -----------------------------------------------------
# Atoms
# -----------------------------------------------------

def test_self_evaluating_literals(env):
    for literal in (Integer(7), TRUE, FALSE, String("hi"), Nil):
        assert evaluate(literal, env) is literal


def test_symbol_lookup(env):
    env.define(Symbol("x"), Integer(42))
    assert evaluate(Symbol("x"), env) == Integer(42)
    with pytest.raises(errors.CadrUnboundSymbol):
        evaluate(Symbol("z"), env)


def test_quoted_value_is_stable_under_reevaluation(env):
    quoted = parse_one("'(1 2 3)")
    once = evaluate(quoted, env)
    assert once == link([Integer(1), Integer(2), Integer(3)])
    assert evaluate(quoted, env) is once
    assert evaluate(parse_one("''a"), env) == Quoted(Symbol("a"))


def test_applying_a_non_procedure_fails(interp):
    with pytest.raises(errors.CadrNotAProcedure):
        run(interp, "(1 2 3)")
    with pytest.raises(errors.CadrNotAProcedure):
        run(interp, '("f" 1)')


# -----------------------------------------------------
# Special forms
# -----------------------------------------------------

def test_define_returns_value_and_binds_globally(interp):
    assert run(interp, "(define y 100)") == Integer(100)
    assert run(interp, "y") == Integer(100)
    run(interp, "(let ((a 1)) (define from-let (+ a 1)))")
    assert interp.env.contains_local(Symbol("from-let"))
    assert run(interp, "from-let") == Integer(2)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if #t 1 2)", Integer(1)),
        ("(if #f 1 2)", Integer(2)),
        ("(if (> 3 2) \"yes\" \"no\")", String("yes")),
        ("(if #f 1)", Nil),
    ],
)
def test_if(interp, source, expected):
    assert run(interp, source) == expected


def test_if_evaluates_only_the_chosen_branch(interp):
    assert run(interp, "(if #t 1 (undefined))") == Integer(1)


def test_if_requires_boolean_condition(interp):
    with pytest.raises(errors.CadrTypeError):
        run(interp, "(if 1 2 3)")
    with pytest.raises(errors.CadrTypeError):
        run(interp, "(if '() 2 3)")


def test_let(interp):
    assert run(interp, "(let ((l '(1 2 3))) (car (cdr l)))") == Integer(2)
    assert run(interp, "(let ((a 1) (b 2)) (+ a b))") == Integer(3)
    assert run(interp, "(let () 5)") == Integer(5)


def test_let_initializers_see_outer_scope(interp):
    run(interp, "(define x 1)")
    assert run(interp, "(let ((x 2) (y x)) y)") == Integer(1)
    assert run(interp, "x") == Integer(1)


def test_let_body_is_a_sequence(interp):
    assert run(interp, "(let ((a 1)) (set! a 5) (+ a 1))") == Integer(6)


def test_let_bindings_do_not_leak(interp):
    run(interp, "(let ((hidden 1)) hidden)")
    with pytest.raises(errors.CadrUnboundSymbol):
        run(interp, "hidden")


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(cond ((> 1 2) 1) ((< 1 2) 2) (else 3))", Integer(2)),
        ("(cond ((> 1 2) 1) (else 3))", Integer(3)),
        ("(cond (#f 1))", Nil),
        ("(cond)", Nil),
        ("(cond (#t))", TRUE),
        ("(cond (#t 1 2 3))", Integer(3)),
    ],
)
def test_cond(interp, source, expected):
    assert run(interp, source) == expected


def test_cond_stops_at_first_match(interp):
    assert run(interp, "(cond (#t 1) ((undefined) 2))") == Integer(1)


def test_else_is_only_a_marker(interp):
    assert run(interp, "else") is Else


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(and)", TRUE),
        ("(and #t 5)", Integer(5)),
        ("(and #t #f 5)", FALSE),
        ("(and #f (undefined))", FALSE),
        ("(or)", FALSE),
        ("(or #f 7)", Integer(7)),
        ("(or #f #f)", FALSE),
        ("(or 1 (undefined))", Integer(1)),
        ("(or '() #t)", Nil),
    ],
)
def test_and_or(interp, source, expected):
    assert run(interp, source) == expected


def test_quote(interp):
    assert run(interp, "(quote (a b))") == link([Symbol("a"), Symbol("b")])
    assert run(interp, "(quote x)") == Symbol("x")
    assert str(run(interp, "'(1 (2 . 3))")) == "(1 (2 . 3))"


def test_set(interp):
    run(interp, "(define n 1)")
    assert run(interp, "(set! n 2)") == Integer(2)
    assert run(interp, "n") == Integer(2)


def test_set_mutates_nearest_enclosing_binding(interp):
    run(interp, "(define n 1)")
    assert run(interp, "(let ((n 10)) (set! n 11) n)") == Integer(11)
    assert run(interp, "n") == Integer(1)
    assert run(interp, "(let ((m 0)) (set! n 3) n)") == Integer(3)
    assert run(interp, "n") == Integer(3)


def test_set_unbound_is_fatal(interp):
    with pytest.raises(errors.CadrUnboundSymbol):
        run(interp, "(set! nope 1)")


@pytest.mark.parametrize(
    "source",
    ["(define x)", "(if #t)", "(quote a b)", "(set! x)", "(let ((a)) a)", "(lambda)"],
)
def test_special_form_arity(interp, source):
    with pytest.raises(errors.CadrArityError):
        run(interp, source)


@pytest.mark.parametrize("source", ["(define 1 2)", "(set! 1 2)", "(let ((1 2)) 3)", "(lambda (1) 1)"])
def test_special_form_requires_symbols(interp, source):
    with pytest.raises(errors.CadrTypeError):
        run(interp, source)
