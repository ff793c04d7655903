"""
Presentation errors - Error bodies returned by controllers.

These errors are never raised to the transport. Controllers place them in
the body of an HttpResponse. Two errors compare equal when they share the
same type and arguments, so a response body can be checked against a
freshly built instance.
"""


class HttpError(Exception):
    """Base class for errors carried in an HttpResponse body."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HttpError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class MissingParamError(HttpError):
    """A required request field was absent."""

    def __init__(self, param_name: str) -> None:
        super().__init__(f"Missing param: {param_name}")
        self.param_name = param_name


class InvalidParamError(HttpError):
    """A supplied request field failed validation."""

    def __init__(self, param_name: str) -> None:
        super().__init__(f"Invalid param: {param_name}")
        self.param_name = param_name


class ServerError(HttpError):
    """Unexpected collaborator failure. Carries no internal detail."""

    def __init__(self) -> None:
        super().__init__("Internal server error")
