"""Node variants that make up both parsed source and runtime values."""

from cadr.types.node import Node, Procedure
from cadr.types.nil import Nil, NilType
from cadr.types.symbol import Symbol
from cadr.types.literal import Literal, Integer, Boolean, String, TRUE, FALSE
from cadr.types.pair import Pair, link, delink
from cadr.types.environment import Environment
from cadr.types.procedure import SpecialForm, NativeProcedure, Quoted, Else, ElseMarker
from cadr.types.lambda_fn import Lambda

__all__ = [
    "Node",
    "Procedure",
    "Nil",
    "NilType",
    "Symbol",
    "Literal",
    "Integer",
    "Boolean",
    "String",
    "TRUE",
    "FALSE",
    "Pair",
    "link",
    "delink",
    "Environment",
    "SpecialForm",
    "NativeProcedure",
    "Quoted",
    "Else",
    "ElseMarker",
    "Lambda",
]
