"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories that wire the adapters, the
add-account use case and the sign-up controller together.
"""

from fastapi import Depends, Request

from src.adapters.cryptography.bcrypt_adapter import BcryptAdapter
from src.adapters.repository.memory import InMemoryAccountRepository
from src.adapters.validators.email_validator_adapter import EmailValidatorAdapter
from src.config.settings import Settings, get_settings
from src.domain.add_account import AddAccountService
from src.presentation.http import Controller
from src.presentation.log_decorator import LogControllerDecorator
from src.presentation.signup import SignUpController


def get_repository(request: Request) -> InMemoryAccountRepository:
    """
    Get account repository from app state.

    The repository is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.account_repository


def get_encrypter(settings: Settings = Depends(get_settings)) -> BcryptAdapter:
    """Create bcrypt adapter with the configured cost factor."""
    return BcryptAdapter(cost=settings.bcrypt_cost)


def get_email_validator(settings: Settings = Depends(get_settings)) -> EmailValidatorAdapter:
    """Create email validator adapter."""
    return EmailValidatorAdapter(check_deliverability=settings.email_check_deliverability)


def get_add_account(
    encrypter: BcryptAdapter = Depends(get_encrypter),
    repository: InMemoryAccountRepository = Depends(get_repository),
) -> AddAccountService:
    """Create add-account use case with injected ports."""
    return AddAccountService(encrypter=encrypter, repository=repository)


def get_signup_controller(
    email_validator: EmailValidatorAdapter = Depends(get_email_validator),
    add_account: AddAccountService = Depends(get_add_account),
) -> Controller:
    """
    Create sign-up controller wrapped in the logging decorator.

    Wires together the email validator and the add-account use case.
    """
    controller = SignUpController(email_validator=email_validator, add_account=add_account)
    return LogControllerDecorator(controller)
