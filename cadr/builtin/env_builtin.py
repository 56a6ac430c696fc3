"""Built-in procedures for the cadr root environment.

This module defines the arithmetic, comparison, list processing, predicate and
application natives, and `register`, which installs them into a root frame
together with the special forms.
"""
from __future__ import annotations

from cadr import LispValue
from cadr.errors import CadrArityError, CadrDivisionByZero, CadrNotAProcedure, CadrTypeError
from cadr.evaluation.special_forms import SPECIAL_FORMS
from cadr.types.environment import Environment
from cadr.types.literal import Boolean, FALSE, Integer
from cadr.types.nil import Nil
from cadr.types.node import Node, Procedure
from cadr.types.pair import Pair, delink, link
from cadr.types.procedure import Else, NativeProcedure, SpecialForm
from cadr.types.symbol import Symbol


def _expect_args(name: str, args: list[Node], count: int) -> None:
    if len(args) != count:
        raise CadrArityError(f"{name} requires exactly {count} argument(s), got {len(args)}")


def _int_values(name: str, args: list[Node]) -> list[int]:
    for arg in args:
        if not isinstance(arg, Integer):
            raise CadrTypeError(f"All arguments to {name} must be integers, got {arg}")
    return [arg.value for arg in args]


def _pair(name: str, value: Node) -> Pair:
    if not isinstance(value, Pair):
        raise CadrTypeError(f"{name} expects a pair, got {value}")
    return value


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[Node]) -> LispValue:
    """Return the sum of all arguments; (+) is 0."""
    return Integer(sum(_int_values("+", args)))


def sub(env: Environment, args: list[Node]) -> LispValue:
    """Subtract all subsequent arguments from the first."""
    if not args:
        raise CadrArityError("- requires at least 1 argument")
    first, *rest = _int_values("-", args)
    for x in rest:
        first -= x
    return Integer(first)


def mul(env: Environment, args: list[Node]) -> LispValue:
    """Return the product of all arguments; (*) is 1."""
    result = 1
    for x in _int_values("*", args):
        result *= x
    return Integer(result)


def _quotient(n: int, d: int) -> int:
    # Integer division truncating toward zero
    q = abs(n) // abs(d)
    return q if (n >= 0) == (d >= 0) else -q


def div(env: Environment, args: list[Node]) -> LispValue:
    """Divide the first argument by each subsequent one, truncating toward zero."""
    if not args:
        raise CadrArityError("/ requires at least 1 argument")
    first, *rest = _int_values("/", args)
    for x in rest:
        if x == 0:
            raise CadrDivisionByZero("Division by zero")
        first = _quotient(first, x)
    return Integer(first)


def modulo(env: Environment, args: list[Node]) -> LispValue:
    """(modulo n d) => n mod d, with the sign of d."""
    _expect_args("modulo", args, 2)
    n, d = _int_values("modulo", args)
    if d == 0:
        raise CadrDivisionByZero("Modulo by zero")
    return Integer(n % d)


def gt(env: Environment, args: list[Node]) -> LispValue:
    _expect_args(">", args, 2)
    a, b = _int_values(">", args)
    return Boolean(a > b)


def lt(env: Environment, args: list[Node]) -> LispValue:
    _expect_args("<", args, 2)
    a, b = _int_values("<", args)
    return Boolean(a < b)


# -------------------------------
# Predicates
# -------------------------------
def equals(env: Environment, args: list[Node]) -> LispValue:
    """Structural equality of two values."""
    _expect_args("=", args, 2)
    return Boolean(args[0] == args[1])


def logical_not(env: Environment, args: list[Node]) -> LispValue:
    """#t only for #f; every other value is true."""
    _expect_args("not", args, 1)
    return Boolean(args[0] == FALSE)


def is_null(env: Environment, args: list[Node]) -> LispValue:
    _expect_args("null?", args, 1)
    return Boolean(args[0] is Nil)


# -------------------------------
# Lists
# -------------------------------
def length(env: Environment, args: list[Node]) -> LispValue:
    _expect_args("length", args, 1)
    return Integer(len(delink(args[0])))


def make_list(env: Environment, args: list[Node]) -> LispValue:
    return link(args)


def cons(env: Environment, args: list[Node]) -> LispValue:
    _expect_args("cons", args, 2)
    return Pair(args[0], args[1])


def car(env: Environment, args: list[Node]) -> LispValue:
    _expect_args("car", args, 1)
    return _pair("car", args[0]).left


def cdr(env: Environment, args: list[Node]) -> LispValue:
    _expect_args("cdr", args, 1)
    return _pair("cdr", args[0]).right


# -------------------------------
# Application
# -------------------------------
def apply_fn(env: Environment, args: list[Node]) -> LispValue:
    """(apply f operands): call f with `operands` as its operand chain.

    The chain is handed over as-is, so f applies its own evaluation policy to it.
    """
    _expect_args("apply", args, 2)
    fn, operands = args
    if not isinstance(fn, Procedure):
        raise CadrNotAProcedure(f"{fn} is not a procedure")
    return fn.evaluate(env, operands)


NATIVES = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "modulo": modulo,
    ">": gt,
    "<": lt,
    "=": equals,
    "not": logical_not,
    "null?": is_null,
    "length": length,
    "list": make_list,
    "cons": cons,
    "car": car,
    "cdr": cdr,
    "apply": apply_fn,
}


def register(env: Environment) -> None:
    """Install special forms, natives and constants into `env`."""
    mapping: dict[Symbol, Node] = {}
    for name, handler in SPECIAL_FORMS.items():
        mapping[Symbol(name)] = SpecialForm(name, handler)
    for name, fn in NATIVES.items():
        mapping[Symbol(name)] = NativeProcedure(name, fn)
    mapping[Symbol("else")] = Else
    mapping[Symbol("null")] = Nil
    env.update(mapping)
