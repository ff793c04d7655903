"""
API v1 routes.

Defines REST endpoints for the sign-up API. Routes are thin: they build an
HttpRequest, hand it to a controller and adapt the HttpResponse back.
"""

from dataclasses import asdict

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.api.dependencies import get_signup_controller
from src.api.models import AccountResponse, ErrorResponse, SignUpRequest
from src.presentation.http import Controller, HttpRequest, HttpResponse

router = APIRouter(tags=["v1"])


def adapt_response(http_response: HttpResponse) -> JSONResponse:
    """
    Convert a controller HttpResponse into a JSONResponse.

    Successful bodies are serialized as AccountResponse. Any other status
    carries the error message only.
    """
    if http_response.status_code == status.HTTP_200_OK:
        content = AccountResponse(**asdict(http_response.body)).model_dump()
    else:
        content = ErrorResponse(detail=str(http_response.body)).model_dump()
    return JSONResponse(status_code=http_response.status_code, content=content)


@router.post(
    "/signup",
    response_model=AccountResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid parameter"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Sign up a new account",
    description="Submit name, email, password and passwordConfirmation to create an account. "
    "The stored password is hashed.",
)
async def signup(
    request_data: SignUpRequest | None = None,
    controller: Controller = Depends(get_signup_controller),
) -> JSONResponse:
    """
    Create an account.

    - **name**: Display name
    - **email**: Email address
    - **password**: Plaintext password
    - **passwordConfirmation**: Must equal password
    """
    body = None
    if request_data is not None:
        body = request_data.model_dump(by_alias=True, exclude_none=True)
    http_request = HttpRequest(body=body)
    http_response = await controller.handle(http_request)
    return adapt_response(http_response)
