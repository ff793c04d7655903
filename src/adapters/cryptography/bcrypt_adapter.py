"""
bcrypt adapter - Implements Encrypter protocol.

This is the only module that picks a concrete hashing algorithm. The rest
of the application reaches it through the Encrypter port.
"""

import asyncio

import bcrypt


class BcryptAdapter:
    """
    Implements Encrypter protocol via the bcrypt library.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, cost: int) -> None:
        """
        Initialize adapter with a fixed work factor.

        Args:
            cost: bcrypt cost factor (log2 rounds)
        """
        self.cost = cost

    async def encrypt(self, value: str) -> str:
        """
        Hash a value with bcrypt.

        bcrypt is CPU bound, so the call runs in a worker thread to keep
        the event loop responsive. Errors from bcrypt propagate unchanged.
        """
        return await asyncio.to_thread(self._hash, value)

    def _hash(self, value: str) -> str:
        salt = bcrypt.gensalt(rounds=self.cost)
        return bcrypt.hashpw(value.encode(), salt).decode()
