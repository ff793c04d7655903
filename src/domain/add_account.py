"""
Add-account use case.

Turns raw signup input into a stored account: the password is hashed
through the Encrypter port, then the account is handed to the
AddAccountRepository port.

Failures from either port propagate unchanged. Translating them into
HTTP semantics is the controller's job.
"""

from dataclasses import dataclass, replace

from .models import AccountRecord, AddAccountInput
from .ports import AddAccountRepository, Encrypter


@dataclass
class AddAccountService:
    """
    Domain service for account creation.

    Implements the AddAccount use case interface.
    """

    encrypter: Encrypter
    repository: AddAccountRepository

    async def add(self, account: AddAccountInput) -> AccountRecord:
        """
        Hash the password and persist the account.

        Args:
            account: Name, email and plaintext password

        Returns:
            Whatever the repository returns, unchanged
        """
        hashed_password = await self.encrypter.encrypt(account.password)
        return await self.repository.add(replace(account, password=hashed_password))
