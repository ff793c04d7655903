"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure, and the use case interface the presentation layer
depends on. Adapters implement these protocols.
"""

from typing import Protocol

from .models import AccountRecord, AddAccountInput


class Encrypter(Protocol):
    """Port interface for password hashing."""

    async def encrypt(self, value: str) -> str:
        """
        Hash a plaintext value.

        Args:
            value: Plaintext password

        Returns:
            Opaque hashed string
        """
        ...


class AddAccountRepository(Protocol):
    """Port interface for account persistence."""

    async def add(self, account: AddAccountInput) -> AccountRecord:
        """
        Persist a new account.

        Args:
            account: Account data with an already hashed password

        Returns:
            The stored account record
        """
        ...


class EmailValidator(Protocol):
    """Port interface for email address validation."""

    def is_valid(self, email: str) -> bool:
        """
        Check whether an email address is acceptable.

        May raise if the underlying validator fails unexpectedly.
        """
        ...


class AddAccount(Protocol):
    """Use case interface for creating an account."""

    async def add(self, account: AddAccountInput) -> AccountRecord: ...
