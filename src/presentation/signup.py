"""
SignUp controller - Request validation and use case orchestration.

Validation order (first failure wins):
1. Required fields present: name, email, password, passwordConfirmation
2. password equals passwordConfirmation
3. EmailValidator accepts the email

Only then is the AddAccount use case invoked. Any exception raised by the
email validator or the use case is answered with a generic 500.
"""

from dataclasses import dataclass

from src.domain.models import AddAccountInput
from src.domain.ports import AddAccount, EmailValidator

from .errors import InvalidParamError, MissingParamError
from .http import HttpRequest, HttpResponse, bad_request, ok, server_error

REQUIRED_FIELDS = ("name", "email", "password", "passwordConfirmation")


@dataclass
class SignUpController:
    """Controller for account sign-up."""

    email_validator: EmailValidator
    add_account: AddAccount

    async def handle(self, http_request: HttpRequest) -> HttpResponse:
        body = http_request.body or {}

        for field in REQUIRED_FIELDS:
            # Empty strings count as missing
            if not body.get(field):
                return bad_request(MissingParamError(field))

        name = body["name"]
        email = body["email"]
        password = body["password"]

        if password != body["passwordConfirmation"]:
            return bad_request(InvalidParamError("passwordConfirmation"))

        try:
            is_valid = self.email_validator.is_valid(email)
        except Exception as e:
            return server_error(e)
        if not is_valid:
            return bad_request(InvalidParamError("email"))

        try:
            account = await self.add_account.add(
                AddAccountInput(name=name, email=email, password=password)
            )
        except Exception as e:
            return server_error(e)

        return ok(account)
