"""
Domain models - Account value types.

Plain dataclasses shared by the use case, its ports and the presentation
layer. No framework types leak in here.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AddAccountInput:
    """Data required to create an account."""

    name: str
    email: str
    password: str


@dataclass(frozen=True)
class AccountRecord:
    """
    A persisted account.

    The password field always holds the hashed value, never the plaintext.
    """

    id: str
    name: str
    email: str
    password: str
