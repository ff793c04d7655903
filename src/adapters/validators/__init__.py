"""Validator adapters - Input validation implementations."""

from .email_validator_adapter import EmailValidatorAdapter

__all__ = ["EmailValidatorAdapter"]
