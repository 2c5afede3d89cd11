

class EvalError(Exception):
    """ Base class for all evaluation errors"""

    @property
    def message(self) -> str:
        return self.args[0] if self.args else ""

    def __str__(self) -> str:
        return self.message


class SchemeSyntaxError(EvalError):
    """ Raised for empty expressions, empty calls and unmatched parentheses"""


class SchemeArityError(EvalError):
    """ Raised when the number of arguments passed to a builtin is incorrect"""


class SchemeTypeError(EvalError):
    """ Raised when the types of arguments passed to a builtin are incorrect"""


class SchemeDomainError(EvalError):
    """ Raised when an argument is the right type but outside the operation's domain"""


class SchemeUnknownFunction(EvalError):
    """ Raised when the operator of an application is not a bound function"""


class SchemeNestingError(EvalError):
    """ Raised when an expression nests deeper than the configured limit"""


class SchemeInvalidSymbol(EvalError):
    """ Raised when a non-symbol is used as an environment key"""


class SchemeFrozenEnvironment(EvalError):
    """ Raised when a frozen environment is modified"""


class ProgramError(EvalError):
    """ Raised by the program runner when a line fails.

    The message is the failing line's message. The transcript accumulated up to
    and including the ``Error on line ...`` entry is kept on ``transcript``.
    """

    def __init__(self, message: str, line: int, transcript: str):
        super().__init__(message)
        self.line = line
        self.transcript = transcript
