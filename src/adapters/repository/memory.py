"""
In-memory repository adapter - Implements AddAccountRepository protocol.

Stores accounts in a process-local dict. Intended for development and
tests; nothing survives a restart.
"""

import logging
import uuid

from src.domain.models import AccountRecord, AddAccountInput

logger = logging.getLogger(__name__)


class InMemoryAccountRepository:
    """
    Implements AddAccountRepository protocol via a dict keyed by id.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Inserts do not await, so each one completes atomically on the event loop.
    """

    def __init__(self) -> None:
        self._accounts: dict[str, AccountRecord] = {}

    async def add(self, account: AddAccountInput) -> AccountRecord:
        """
        Persist an account under a freshly generated id.

        Args:
            account: Account data with an already hashed password

        Returns:
            The stored AccountRecord
        """
        record = AccountRecord(
            id=str(uuid.uuid4()),
            name=account.name,
            email=account.email,
            password=account.password,
        )
        self._accounts[record.id] = record
        logger.info("Account stored: %s", record.id)
        return record

    def get(self, account_id: str) -> AccountRecord | None:
        """Return the stored account, or None if unknown."""
        return self._accounts.get(account_id)

    def __len__(self) -> int:
        return len(self._accounts)
