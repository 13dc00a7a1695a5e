import bcrypt
import pytest

from src.app.use_cases.account import ChangePasswordFirstLoginUseCase, GetMeUseCase
from tests.fixtures.factories import make_user

TEMPORARY = "Tmp#Pass1234"


@pytest.fixture
def newcomer(seed_users):
    user = make_user("Newcomer")
    user.password_hash = bcrypt.hashpw(TEMPORARY.encode(), bcrypt.gensalt(4)).decode()
    user.is_first_login = True
    seed_users(user)
    return user


@pytest.mark.asyncio
async def test_get_me_returns_profile(mock_uow, newcomer):
    result = await GetMeUseCase(mock_uow).execute(newcomer.id)

    assert result.is_ok()
    assert result.value.email == "newcomer@example.com"
    assert result.value.is_first_login is True
    assert "password_hash" not in result.value.model_dump()


@pytest.mark.asyncio
async def test_get_me_rejects_deactivated_account(mock_uow, seed_users):
    user = make_user("Gone", is_active=False)
    seed_users(user)

    result = await GetMeUseCase(mock_uow).execute(user.id)

    assert result.error.code == "ACCOUNT_DISABLED"


@pytest.mark.asyncio
async def test_first_login_change_rehashes_and_clears_flag(mock_uow, newcomer):
    result = await ChangePasswordFirstLoginUseCase(mock_uow).execute(
        newcomer.id, TEMPORARY, "brand-new-secret"
    )

    assert result.is_ok()
    assert result.value.is_first_login is False
    saved = mock_uow.users.update.call_args.args[0]
    assert saved.is_first_login is False
    assert bcrypt.checkpw(b"brand-new-secret", saved.password_hash.encode())
    assert not bcrypt.checkpw(TEMPORARY.encode(), saved.password_hash.encode())
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_first_login_change_requires_current_password(mock_uow, newcomer):
    result = await ChangePasswordFirstLoginUseCase(mock_uow).execute(
        newcomer.id, "wrong-guess", "brand-new-secret"
    )

    assert result.error.code == "INVALID_PASSWORD"
    assert newcomer.is_first_login is True
    mock_uow.users.update.assert_not_called()


@pytest.mark.asyncio
async def test_first_login_change_rejects_short_password(mock_uow, newcomer):
    result = await ChangePasswordFirstLoginUseCase(mock_uow).execute(
        newcomer.id, TEMPORARY, "12345"
    )

    assert result.error.code == "PASSWORD_TOO_SHORT"
    mock_uow.users.update.assert_not_called()


@pytest.mark.asyncio
async def test_first_login_change_only_once(mock_uow, newcomer):
    newcomer.is_first_login = False

    result = await ChangePasswordFirstLoginUseCase(mock_uow).execute(
        newcomer.id, TEMPORARY, "brand-new-secret"
    )

    assert result.error.code == "NOT_FIRST_LOGIN"
    mock_uow.users.update.assert_not_called()
