from uuid import uuid4

import pytest

from src.app.use_cases.activities import DeleteActivityUseCase
from src.app.use_cases.tasks import (
    AddCommentUseCase,
    AddSubtaskUseCase,
    DeleteSubtaskUseCase,
    DeleteTaskUseCase,
    UpdateSubtaskUseCase,
)
from src.domain.entities import ActivityAction, ActivityLog, NotificationType, TeamRole
from tests.fixtures.factories import (
    created_activities,
    created_notifications,
    make_task,
    make_team,
    make_user,
)


@pytest.fixture
def team_task(mock_uow, seed_users):
    owner = make_user("Owner")
    member = make_user("Member")
    team = make_team(owner, (member, TeamRole.member))
    seed_users(owner, member)
    task = make_task(owner, team, assigned_to=member.id)
    mock_uow.teams.get_by_id.return_value = team
    mock_uow.tasks.get_by_id.return_value = task
    return owner, member, task


@pytest.mark.asyncio
async def test_comment_notifies_assignee(mock_uow, notifier, team_task):
    owner, member, task = team_task

    result = await AddCommentUseCase(mock_uow, notifier).execute(
        owner.id, task.id, " Looks good "
    )

    assert result.is_ok()
    comments = task.get_comments()
    assert [(c.user_id, c.text) for c in comments] == [(owner.id, "Looks good")]
    assert result.value.comments[0].user.id == owner.id
    assert [a.action for a in created_activities(mock_uow)] == [
        ActivityAction.comment_added
    ]
    notifications = created_notifications(mock_uow)
    assert [(n.user_id, n.type) for n in notifications] == [
        (member.id, NotificationType.task_commented)
    ]


@pytest.mark.asyncio
async def test_assignee_commenting_notifies_nobody(mock_uow, notifier, team_task):
    owner, member, task = team_task

    result = await AddCommentUseCase(mock_uow, notifier).execute(
        member.id, task.id, "On it"
    )

    assert result.is_ok()
    mock_uow.notifications.create.assert_not_called()


@pytest.mark.asyncio
async def test_empty_comment_rejected(mock_uow, notifier, team_task):
    owner, member, task = team_task

    result = await AddCommentUseCase(mock_uow, notifier).execute(
        owner.id, task.id, "   "
    )

    assert result.error.code == "COMMENT_TEXT_REQUIRED"


@pytest.mark.asyncio
async def test_subtask_lifecycle_logs(mock_uow, team_task):
    owner, member, task = team_task

    await AddSubtaskUseCase(mock_uow).execute(member.id, task.id, "Draft")
    subtask_id = task.get_subtasks()[0].id

    await UpdateSubtaskUseCase(mock_uow).execute(
        member.id, task.id, subtask_id, title="Outline"
    )
    await UpdateSubtaskUseCase(mock_uow).execute(
        member.id, task.id, subtask_id, completed=True
    )
    await UpdateSubtaskUseCase(mock_uow).execute(
        member.id, task.id, subtask_id, completed=True
    )
    await DeleteSubtaskUseCase(mock_uow).execute(member.id, task.id, subtask_id)

    assert task.get_subtasks() == []
    assert [a.action for a in created_activities(mock_uow)] == [
        ActivityAction.subtask_added,
        ActivityAction.updated,
        ActivityAction.subtask_completed,
        ActivityAction.subtask_deleted,
    ]


@pytest.mark.asyncio
async def test_unknown_subtask(mock_uow, team_task):
    owner, member, task = team_task

    result = await DeleteSubtaskUseCase(mock_uow).execute(owner.id, task.id, "missing")

    assert result.error.code == "SUBTASK_NOT_FOUND"


@pytest.mark.asyncio
async def test_plain_member_cannot_delete_others_task(mock_uow, team_task):
    owner, member, task = team_task

    result = await DeleteTaskUseCase(mock_uow).execute(member.id, task.id)

    assert result.error.code == "NOT_AUTHORIZED"
    mock_uow.tasks.delete.assert_not_called()


@pytest.mark.asyncio
async def test_delete_task_keeps_history(mock_uow, team_task):
    owner, member, task = team_task

    result = await DeleteTaskUseCase(mock_uow).execute(owner.id, task.id)

    assert result.is_ok()
    mock_uow.tasks.delete.assert_called_once_with(task)
    mock_uow.activity_logs.delete_by_task.assert_not_called()
    mock_uow.notifications.delete.assert_not_called()


@pytest.mark.asyncio
async def test_activity_of_another_task_is_not_found(mock_uow, team_task):
    owner, member, task = team_task
    mock_uow.activity_logs.get_by_id.return_value = ActivityLog(
        task_id=uuid4(),
        user_id=owner.id,
        action=ActivityAction.created,
        description="elsewhere",
    )

    result = await DeleteActivityUseCase(mock_uow).execute(owner.id, task.id, uuid4())

    assert result.error.code == "ACTIVITY_NOT_FOUND"
    mock_uow.activity_logs.delete.assert_not_called()
