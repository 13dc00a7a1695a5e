from uuid import uuid4

import pytest

from src.adapter.repositories.notification_repository import NotificationRepository
from src.domain.base import utc_now
from src.domain.entities import Notification, NotificationType


def notification_for(user_id, title="Ping"):
    return Notification(
        user_id=user_id,
        type=NotificationType.task_assigned,
        title=title,
        message=f"{title} message",
    )


@pytest.mark.asyncio
async def test_bulk_operations_stay_within_one_user(db_session):
    repository = NotificationRepository(db_session)
    mine, theirs = uuid4(), uuid4()
    for title in ("One", "Two"):
        await repository.create(notification_for(mine, title))
    await repository.create(notification_for(theirs))

    assert await repository.mark_all_read(mine, utc_now()) == 2
    assert await repository.mark_all_read(mine, utc_now()) == 0
    assert await repository.count_unread(mine) == 0
    assert await repository.count_unread(theirs) == 1

    assert await repository.delete_all_for_user(mine) == 2
    assert await repository.list_for_user(mine) == []
    assert len(await repository.list_for_user(theirs)) == 1


@pytest.mark.asyncio
async def test_get_for_user_ignores_other_recipients(db_session):
    repository = NotificationRepository(db_session)
    owner = uuid4()
    notification = await repository.create(notification_for(owner))

    assert await repository.get_for_user(notification.id, owner) is notification
    assert await repository.get_for_user(notification.id, uuid4()) is None
