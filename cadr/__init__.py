# Core type aliases for cadr.
#
# Every value the interpreter touches (source forms and runtime results alike)
# is a Node from cadr.types. The aliases below are kept loose so that modules
# can annotate handler signatures without importing the node classes, which
# would create import cycles between types and evaluation.

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias
LispValue = Any

# Special form handler: (operand_tail, env) -> value
HandlerFn = Callable[..., LispValue]

# Native procedure body: (env, evaluated_args) -> value
NativeFn = Callable[..., LispValue]
