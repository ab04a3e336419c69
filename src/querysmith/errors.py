"""
Errors raised by the builders. Every error is raised by the call that caused
it; rendering a statement never raises.
"""


class Error(Exception):
    """Base class for all querysmith errors."""


class ArgumentError(Error, ValueError):
    """A builder method was called with a shape it does not understand."""


class MissingArgumentError(ArgumentError):
    """A required argument (table name, join or ON expression) is empty."""


class IdentifierError(Error, ValueError):
    """
    A table or join identifier was rejected by the identifier validator.
    `errors` holds every reason reported by the validator.
    """

    def __init__(self, errors, method=None):
        self.errors = list(errors)
        self.method = method
        message = ', '.join(self.errors)
        if method:
            message = '{}(): {}'.format(method, message)
        super().__init__(message)
