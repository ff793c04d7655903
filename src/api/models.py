"""
API request and response models.

Pydantic models for FastAPI endpoint parsing and OpenAPI schema generation.
Field presence and semantics are checked by the SignUpController, so every
request field is optional here. The only rule enforced at this boundary is
the bcrypt input limit on the password.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

# bcrypt only accepts inputs up to 72 bytes
MAX_PASSWORD_BYTES = 72


class SignUpRequest(BaseModel):
    """Request model for account sign-up."""

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    email: str | None = None
    password: str | None = Field(default=None, description="At most 72 bytes when UTF-8 encoded")
    password_confirmation: str | None = Field(
        default=None,
        alias="passwordConfirmation",
        description="Must match password",
    )

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str | None) -> str | None:
        if value is not None and len(value.encode()) > MAX_PASSWORD_BYTES:
            raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class AccountResponse(BaseModel):
    """Response model for a created account."""

    id: str
    name: str
    email: str
    password: str = Field(..., description="Hashed password")


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
