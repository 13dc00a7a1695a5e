import string

import bcrypt
import pytest

from src.app.use_cases.admin import (
    CreateUserUseCase,
    DeactivateUserUseCase,
    DeleteUserUseCase,
    GetUserStatsUseCase,
    ListUsersUseCase,
    UpdateUserRoleUseCase,
    generate_temporary_password,
)
from src.domain.entities import UserRole
from tests.fixtures.fakes import FakeEmailSender
from tests.fixtures.factories import make_user


@pytest.fixture
def admin(seed_users):
    admin = make_user("Root", role=UserRole.admin)
    user = make_user("Regular")
    seed_users(admin, user)
    return admin, user


def test_temporary_password_mixes_character_classes():
    for _ in range(20):
        password = generate_temporary_password(12)
        assert len(password) == 12
        assert any(c in string.ascii_uppercase for c in password)
        assert any(c in string.ascii_lowercase for c in password)
        assert any(c in string.digits for c in password)
        assert any(c in "!@#$%^&*" for c in password)


@pytest.mark.asyncio
async def test_create_user_hashes_password_and_sends_welcome(
    mock_uow, email_sender, admin
):
    admin_user, _ = admin

    result = await CreateUserUseCase(mock_uow, email_sender).execute(
        admin_user.id, "Newbie", " NewBie@Example.com "
    )

    assert result.is_ok()
    user = mock_uow.users.create.call_args.args[0]
    assert user.email == "newbie@example.com"
    assert user.role == UserRole.user
    assert user.is_first_login is True
    assert user.created_by == admin_user.id

    welcome = email_sender.sent[0]
    assert welcome.to == "newbie@example.com"
    password = welcome.text.split("Temporary password: ")[1].split(" ")[0]
    assert bcrypt.checkpw(password.encode(), user.password_hash.encode())
    assert result.value.email_sent is True


@pytest.mark.asyncio
async def test_welcome_email_failure_keeps_the_account(mock_uow, admin):
    admin_user, _ = admin

    result = await CreateUserUseCase(mock_uow, FakeEmailSender(fail=True)).execute(
        admin_user.id, "Newbie", "newbie@example.com"
    )

    assert result.is_ok()
    assert result.value.email_sent is False
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_create_user_rejects_taken_email(mock_uow, email_sender, admin):
    admin_user, user = admin

    result = await CreateUserUseCase(mock_uow, email_sender).execute(
        admin_user.id, "Dup", user.email.upper()
    )

    assert result.is_err()
    assert result.error.code == "EMAIL_TAKEN"
    assert result.error.message == "User with this email already exists"


@pytest.mark.asyncio
async def test_regular_user_cannot_administer(mock_uow, email_sender, admin):
    _, user = admin

    for result in (
        await CreateUserUseCase(mock_uow, email_sender).execute(
            user.id, "X", "x@example.com"
        ),
        await ListUsersUseCase(mock_uow).execute(user.id),
        await GetUserStatsUseCase(mock_uow).execute(user.id),
    ):
        assert result.is_err()
        assert result.error.code == "ADMIN_REQUIRED"


@pytest.mark.asyncio
async def test_admin_cannot_act_on_self(mock_uow, admin):
    admin_user, _ = admin

    role = await UpdateUserRoleUseCase(mock_uow).execute(
        admin_user.id, admin_user.id, "user"
    )
    deactivate = await DeactivateUserUseCase(mock_uow).execute(
        admin_user.id, admin_user.id
    )
    delete = await DeleteUserUseCase(mock_uow).execute(admin_user.id, admin_user.id)

    assert role.error.message == "You cannot change your own role"
    assert deactivate.error.message == "You cannot deactivate your own account"
    assert delete.error.message == "You cannot delete your own account"
    assert admin_user.role == UserRole.admin
    assert admin_user.is_active is True
    mock_uow.users.delete.assert_not_called()


@pytest.mark.asyncio
async def test_update_role_validates_role(mock_uow, admin):
    admin_user, user = admin

    result = await UpdateUserRoleUseCase(mock_uow).execute(
        admin_user.id, user.id, "superuser"
    )
    assert result.error.message == 'Invalid role. Must be "user" or "admin"'

    result = await UpdateUserRoleUseCase(mock_uow).execute(
        admin_user.id, user.id, "admin"
    )
    assert result.is_ok()
    assert user.role == UserRole.admin


@pytest.mark.asyncio
async def test_deactivate_is_a_soft_flag(mock_uow, admin):
    admin_user, user = admin

    result = await DeactivateUserUseCase(mock_uow).execute(admin_user.id, user.id)

    assert result.is_ok()
    assert user.is_active is False
    mock_uow.users.delete.assert_not_called()


@pytest.mark.asyncio
async def test_user_stats(mock_uow, admin):
    admin_user, _ = admin
    counts = {None: 10, UserRole.admin: 2, UserRole.user: 8}

    async def count_active(role=None, created_since=None):
        return 3 if created_since is not None else counts[role]

    mock_uow.users.count_active.side_effect = count_active

    result = await GetUserStatsUseCase(mock_uow).execute(admin_user.id)

    assert result.value.total_users == 10
    assert result.value.admin_users == 2
    assert result.value.regular_users == 8
    assert result.value.recent_users == 3
