"""
Unit tests for AddAccountService use case.

Tests orchestration with mocked ports to verify:
- Encrypter receives the plaintext password
- Repository receives the hashed password, never the plaintext
- Hashing happens before persistence
- Failures propagate unchanged
"""

from unittest.mock import AsyncMock, Mock

import pytest

from src.domain.add_account import AddAccountService
from src.domain.models import AccountRecord, AddAccountInput

ACCOUNT_DATA = AddAccountInput(
    name="valid_name",
    email="valid_email@email.com",
    password="valid_password",
)


def make_sut() -> tuple[AddAccountService, Mock, Mock]:
    """Build the use case with an encrypter stub and a repository stub."""
    encrypter = Mock()
    encrypter.encrypt = AsyncMock(return_value="hashed_password")
    repository = Mock()
    repository.add = AsyncMock(
        return_value=AccountRecord(
            id="valid_id",
            name="valid_name",
            email="valid_email@email.com",
            password="hashed_password",
        )
    )
    sut = AddAccountService(encrypter=encrypter, repository=repository)
    return sut, encrypter, repository


class TestEncrypter:
    """Tests for Encrypter delegation."""

    @pytest.mark.asyncio
    async def test_calls_encrypter_with_correct_password(self) -> None:
        """Encrypter is awaited with the plaintext password."""
        sut, encrypter, _ = make_sut()

        await sut.add(ACCOUNT_DATA)

        encrypter.encrypt.assert_awaited_once_with("valid_password")

    @pytest.mark.asyncio
    async def test_propagates_encrypter_error(self) -> None:
        """Encrypter failure propagates and persistence is skipped."""
        sut, encrypter, repository = make_sut()
        encrypter.encrypt.side_effect = RuntimeError("hash failure")

        with pytest.raises(RuntimeError, match="hash failure"):
            await sut.add(ACCOUNT_DATA)

        repository.add.assert_not_called()


class TestRepository:
    """Tests for AddAccountRepository delegation."""

    @pytest.mark.asyncio
    async def test_calls_repository_with_hashed_password(self) -> None:
        """Repository receives the account with the hashed password."""
        sut, _, repository = make_sut()

        await sut.add(ACCOUNT_DATA)

        repository.add.assert_awaited_once_with(
            AddAccountInput(
                name="valid_name",
                email="valid_email@email.com",
                password="hashed_password",
            )
        )

    @pytest.mark.asyncio
    async def test_plaintext_never_reaches_repository(self) -> None:
        """Repository never sees the plaintext password."""
        sut, _, repository = make_sut()

        await sut.add(ACCOUNT_DATA)

        passed = repository.add.call_args[0][0]
        assert passed.password != "valid_password"

    @pytest.mark.asyncio
    async def test_input_is_not_mutated(self) -> None:
        """The caller's input keeps its plaintext password."""
        sut, _, _ = make_sut()

        await sut.add(ACCOUNT_DATA)

        assert ACCOUNT_DATA.password == "valid_password"

    @pytest.mark.asyncio
    async def test_hashing_happens_before_persistence(self) -> None:
        """Encrypter completes before the repository is called."""
        sut, encrypter, repository = make_sut()
        calls: list[str] = []

        async def encrypt(value: str) -> str:
            calls.append("encrypt")
            return "hashed_password"

        async def add(account: AddAccountInput) -> AccountRecord:
            calls.append("add")
            return AccountRecord(id="id", name=account.name, email=account.email, password=account.password)

        encrypter.encrypt.side_effect = encrypt
        repository.add.side_effect = add

        await sut.add(ACCOUNT_DATA)

        assert calls == ["encrypt", "add"]

    @pytest.mark.asyncio
    async def test_propagates_repository_error(self) -> None:
        """Repository failure propagates unchanged."""
        sut, _, repository = make_sut()
        error = ConnectionError("storage offline")
        repository.add.side_effect = error

        with pytest.raises(ConnectionError) as exc_info:
            await sut.add(ACCOUNT_DATA)

        assert exc_info.value is error


class TestResult:
    """Tests for the returned account."""

    @pytest.mark.asyncio
    async def test_returns_repository_result_unchanged(self) -> None:
        """Use case returns exactly what the repository returns."""
        sut, _, repository = make_sut()

        account = await sut.add(ACCOUNT_DATA)

        assert account is repository.add.return_value
        assert account == AccountRecord(
            id="valid_id",
            name="valid_name",
            email="valid_email@email.com",
            password="hashed_password",
        )
