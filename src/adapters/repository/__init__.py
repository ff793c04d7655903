"""Repository adapters - Account persistence implementations."""

from .memory import InMemoryAccountRepository

__all__ = ["InMemoryAccountRepository"]
