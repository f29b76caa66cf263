class LispyError(Exception):
    """ Base class for all lispy errors"""

    @property
    def kind(self) -> str:
        return type(self).__name__


class ParseError(LispyError):
    """ Raised when the token stream does not form a complete expression"""

    def __init__(self, message: str, offset: int | None = None):
        super().__init__(message)
        self.offset = offset


class UnboundSymbolError(LispyError):
    """ Raised when a symbol is looked up before it is bound"""

    def __init__(self, name: str):
        super().__init__(f"Cannot lookup unbound symbol {name}")
        self.name = name


class NotCallableError(LispyError):
    """ Raised when the head of an application is not a Lambda or SpecialForm"""


class ArityError(LispyError):
    """ Raised when the number of arguments passed to a callable is incorrect"""


class LispyTypeError(LispyError):
    """ Raised when an operand has the wrong kind for a primitive or special form"""


class DivisionByZeroError(LispyError):
    """ Raised when dividing by zero"""


class LispyRecursionError(LispyError):
    """ Raised when evaluation exceeds the interpreter recursion limit"""


class PreludeError(LispyError):
    """ Raised when a derived builtin is bootstrapped before its dependencies"""
