from unittest.mock import AsyncMock, MagicMock

import pytest

from src.app.services.notification_dispatcher import NotificationDispatcher
from tests.fixtures.fakes import FakeEmailSender, FakePublisher

REPOSITORY_METHODS = {
    "users": [
        "get_by_email",
        "get_by_id",
        "get_by_ids",
        "list_all",
        "count_active",
        "create",
        "update",
        "delete",
    ],
    "teams": [
        "get_by_id",
        "get_by_ids",
        "get_active_by_id",
        "list_active_for_user",
        "get_by_invite_token_hash",
        "create",
        "update",
    ],
    "pending_invitations": [
        "get_live_by_token",
        "get_live_by_team_and_email",
        "list_live_by_email",
        "create",
        "update",
        "delete",
    ],
    "tasks": ["get_by_id", "list_in_scope", "count", "create", "update", "delete"],
    "activity_logs": [
        "get_by_id",
        "list_by_task",
        "create",
        "delete",
        "delete_by_task",
    ],
    "notifications": [
        "get_for_user",
        "list_for_user",
        "count_unread",
        "create",
        "update",
        "mark_all_read",
        "delete",
        "delete_all_for_user",
    ],
}


async def _echo(entity):
    return entity


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories; create/update return their argument"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    for repo_name, methods in REPOSITORY_METHODS.items():
        repo = MagicMock()
        for method in methods:
            setattr(repo, method, AsyncMock())
        if "create" in methods:
            repo.create.side_effect = _echo
        if "update" in methods:
            repo.update.side_effect = _echo
        setattr(uow, repo_name, repo)

    uow.users.get_by_ids.return_value = []
    uow.teams.get_by_ids.return_value = []
    return uow


@pytest.fixture
def seed_users(mock_uow):
    """Make users resolvable through get_by_id / get_by_ids / get_by_email"""

    def seed(*users):
        by_id = {u.id: u for u in users}
        by_email = {u.email: u for u in users}

        async def get_by_id(user_id):
            return by_id.get(user_id)

        async def get_by_ids(user_ids):
            return [by_id[i] for i in user_ids if i in by_id]

        async def get_by_email(email):
            return by_email.get(email)

        mock_uow.users.get_by_id.side_effect = get_by_id
        mock_uow.users.get_by_ids.side_effect = get_by_ids
        mock_uow.users.get_by_email.side_effect = get_by_email

    return seed


@pytest.fixture
def email_sender():
    return FakeEmailSender()


@pytest.fixture
def publisher():
    return FakePublisher()


@pytest.fixture
def notifier(mock_uow, publisher, email_sender):
    return NotificationDispatcher(mock_uow, publisher, email_sender)
