"""
Presentation layer - Transport-agnostic controllers.

Controllers translate an HttpRequest into use case calls and back into an
HttpResponse. They depend on domain ports only.
"""

from .errors import HttpError, InvalidParamError, MissingParamError, ServerError
from .http import Controller, HttpRequest, HttpResponse
from .log_decorator import LogControllerDecorator
from .signup import SignUpController

__all__ = [
    "Controller",
    "HttpError",
    "HttpRequest",
    "HttpResponse",
    "InvalidParamError",
    "LogControllerDecorator",
    "MissingParamError",
    "ServerError",
    "SignUpController",
]
