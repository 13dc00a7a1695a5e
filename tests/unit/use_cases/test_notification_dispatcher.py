from uuid import uuid4

import pytest

from src.app.services.email_sender import EmailMessage
from src.app.services.notification_dispatcher import NotificationDispatcher
from src.domain.entities import NotificationType
from tests.fixtures.fakes import FakeEmailSender, FakePublisher


@pytest.mark.asyncio
async def test_notify_persists_and_delivery_waits_for_deliver(
    mock_uow, notifier, publisher
):
    user_id = uuid4()

    notification = await notifier.notify(
        user_id, NotificationType.task_updated, "Task Updated", "changed"
    )

    assert notification.read is False
    mock_uow.notifications.create.assert_called_once_with(notification)
    assert publisher.published == []
    assert notifier.pending == 1

    await notifier.deliver()

    assert notifier.pending == 0
    channel, event, payload = publisher.published[0]
    assert channel == str(user_id)
    assert event == "notification"
    assert payload["id"] == str(notification.id)
    assert payload["type"] == "task_updated"
    assert payload["read"] is False


@pytest.mark.asyncio
async def test_publisher_failure_is_swallowed(mock_uow):
    notifier = NotificationDispatcher(
        mock_uow, FakePublisher(fail=True), FakeEmailSender()
    )
    await notifier.notify(uuid4(), NotificationType.team_joined, "t", "m")

    await notifier.deliver()

    mock_uow.notifications.create.assert_called_once()


@pytest.mark.asyncio
async def test_email_flag_follows_delivery_outcome(mock_uow, publisher):
    message = EmailMessage(to="a@example.com", subject="s", text="t")

    ok_notifier = NotificationDispatcher(mock_uow, publisher, FakeEmailSender())
    sent = await ok_notifier.notify(
        uuid4(), NotificationType.task_assigned, "t", "m", email=message
    )
    await ok_notifier.deliver()
    assert sent.email_sent is True

    failing_notifier = NotificationDispatcher(
        mock_uow, publisher, FakeEmailSender(fail=True)
    )
    failed = await failing_notifier.notify(
        uuid4(), NotificationType.task_assigned, "t", "m", email=message
    )
    await failing_notifier.deliver()
    assert failed.email_sent is False


@pytest.mark.asyncio
async def test_discard_drops_queued_deliveries(notifier, publisher):
    await notifier.notify(uuid4(), NotificationType.task_updated, "t", "m")

    notifier.discard()
    await notifier.deliver()

    assert publisher.published == []
