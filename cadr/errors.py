class CadrError(Exception):
    """ Base class for all cadr errors"""
    pass

class CadrSyntaxError(CadrError):
    """ Raised when source text cannot be split into tokens"""

class CadrParseError(CadrError):
    """ Raised when the token sequence does not match the grammar"""

class CadrUnboundSymbol(CadrError):
    """ Raised when a symbol is used before it is bound"""

class CadrNotAProcedure(CadrError):
    """ Raised when a value in operator position is not a procedure"""

class CadrArityError(CadrError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""

class CadrTypeError(CadrError):
    """ Raised when a value has the wrong node type for an operation"""

class CadrDivisionByZero(CadrError):
    """ Raised by / and modulo when the divisor is zero"""

class CadrRecursionError(CadrError):
    """ Raised when evaluation exhausts the host call stack"""

class CadrConfigError(CadrError):
    """ Raised when a CADR_* environment variable holds an invalid value"""
