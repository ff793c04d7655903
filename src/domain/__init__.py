"""
Domain layer - Pure business logic with zero framework imports.

This package contains the account models, the add-account use case and the
port interfaces it depends on, ensuring true hexagonal architecture
decoupling.
"""

from .add_account import AddAccountService
from .models import AccountRecord, AddAccountInput
from .ports import AddAccount, AddAccountRepository, EmailValidator, Encrypter

__all__ = [
    "AccountRecord",
    "AddAccount",
    "AddAccountInput",
    "AddAccountRepository",
    "AddAccountService",
    "EmailValidator",
    "Encrypter",
]
