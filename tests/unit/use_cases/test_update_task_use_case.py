from datetime import datetime

import pytest

from src.app.use_cases.tasks import UpdateTaskUseCase
from src.domain.entities import (
    ActivityAction,
    NotificationType,
    TaskPriority,
    TaskStatus,
    TeamRole,
)
from tests.fixtures.factories import (
    created_activities,
    created_notifications,
    make_task,
    make_team,
    make_user,
)


@pytest.fixture
def team_setup(mock_uow, seed_users):
    owner = make_user("Owner")
    admin = make_user("Admin")
    member = make_user("Member")
    other = make_user("Other")
    team = make_team(
        owner,
        (admin, TeamRole.admin),
        (member, TeamRole.member),
        (other, TeamRole.member),
    )
    seed_users(owner, admin, member, other)
    mock_uow.teams.get_by_id.return_value = team
    return owner, admin, member, other, team


@pytest.mark.asyncio
async def test_member_cannot_change_priority(mock_uow, notifier, team_setup):
    """Plain member PUT {priority: urgent} on a low task: rejected, nothing written"""
    owner, admin, member, other, team = team_setup
    task = make_task(owner, team, priority=TaskPriority.low)
    mock_uow.tasks.get_by_id.return_value = task

    result = await UpdateTaskUseCase(mock_uow, notifier).execute(
        member.id, task.id, {"priority": "urgent", "title": "Renamed"}
    )

    assert result.is_err()
    assert result.error.code == "ADMIN_ONLY_FIELD"
    assert result.error.message == "Only Team Admins can update Priority"
    assert task.priority == TaskPriority.low
    assert task.title == "Write report"
    mock_uow.tasks.update.assert_not_called()
    mock_uow.activity_logs.create.assert_not_called()
    mock_uow.notifications.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_member_sending_unchanged_priority_is_allowed(
    mock_uow, notifier, team_setup
):
    owner, admin, member, other, team = team_setup
    task = make_task(owner, team, priority=TaskPriority.low)
    mock_uow.tasks.get_by_id.return_value = task

    result = await UpdateTaskUseCase(mock_uow, notifier).execute(
        member.id, task.id, {"priority": "low", "title": "Renamed"}
    )

    assert result.is_ok()
    assert task.title == "Renamed"


@pytest.mark.asyncio
async def test_member_cannot_clear_assignee_or_due_date(
    mock_uow, notifier, team_setup
):
    owner, admin, member, other, team = team_setup
    task = make_task(
        owner, team, assigned_to=member.id, due_date=datetime(2030, 1, 1)
    )
    mock_uow.tasks.get_by_id.return_value = task

    result = await UpdateTaskUseCase(mock_uow, notifier).execute(
        member.id, task.id, {"due_date": None}
    )
    assert result.error.message == "Only Team Admins can update Due Date"

    result = await UpdateTaskUseCase(mock_uow, notifier).execute(
        member.id, task.id, {"assigned_to": None}
    )
    assert result.error.message == "Only Team Admins can reassign tasks"
    assert task.assigned_to == member.id


@pytest.mark.asyncio
async def test_admin_update_records_one_entry_per_changed_field(
    mock_uow, notifier, team_setup
):
    owner, admin, member, other, team = team_setup
    task = make_task(owner, team, priority=TaskPriority.low)
    mock_uow.tasks.get_by_id.return_value = task

    result = await UpdateTaskUseCase(mock_uow, notifier).execute(
        admin.id,
        task.id,
        {
            "priority": "high",
            "status": "in-progress",
            "is_billable": True,
            "assigned_to": member.id,
            "due_date": datetime(2030, 5, 17),
        },
    )

    assert result.is_ok()
    actions = [a.action for a in created_activities(mock_uow)]
    assert actions == [
        ActivityAction.status_changed,
        ActivityAction.priority_changed,
        ActivityAction.assigned,
        ActivityAction.due_date_changed,
        ActivityAction.billable_status_changed,
    ]
    entries = {a.action: a for a in created_activities(mock_uow)}
    assert (
        entries[ActivityAction.status_changed].description
        == 'Status changed from "todo" to "in-progress"'
    )
    assert entries[ActivityAction.assigned].new_value == "Member"
    assert entries[ActivityAction.due_date_changed].new_value == "2030-05-17"
    assert (
        entries[ActivityAction.billable_status_changed].description
        == "Task marked as Billable"
    )

    assert task.priority == TaskPriority.high
    assert task.status == TaskStatus.in_progress
    assert task.assigned_to == member.id
    mock_uow.tasks.update.assert_called_once()


@pytest.mark.asyncio
async def test_reassignment_target_must_be_member(mock_uow, seed_users, notifier, team_setup):
    owner, admin, member, other, team = team_setup
    stranger = make_user("Stranger")
    seed_users(owner, admin, member, other, stranger)
    task = make_task(owner, team)
    mock_uow.tasks.get_by_id.return_value = task

    result = await UpdateTaskUseCase(mock_uow, notifier).execute(
        owner.id, task.id, {"assigned_to": stranger.id}
    )

    assert result.is_err()
    assert result.error.code == "INVALID_ASSIGNEE"
    mock_uow.tasks.update.assert_not_called()


@pytest.mark.asyncio
async def test_reassignment_notifies_new_and_previous_assignee(
    mock_uow, notifier, team_setup, email_sender
):
    owner, admin, member, other, team = team_setup
    task = make_task(owner, team, assigned_to=member.id)
    mock_uow.tasks.get_by_id.return_value = task

    result = await UpdateTaskUseCase(mock_uow, notifier).execute(
        admin.id, task.id, {"assigned_to": other.id}
    )

    assert result.is_ok()
    notified = {(n.user_id, n.type) for n in created_notifications(mock_uow)}
    assert notified == {
        (other.id, NotificationType.task_assigned),
        (member.id, NotificationType.task_updated),
    }
    assert [m.to for m in email_sender.sent] == [other.email]


@pytest.mark.asyncio
async def test_status_change_notifies_creator_and_managers(
    mock_uow, notifier, team_setup
):
    owner, admin, member, other, team = team_setup
    task = make_task(other, team)
    mock_uow.tasks.get_by_id.return_value = task

    result = await UpdateTaskUseCase(mock_uow, notifier).execute(
        member.id, task.id, {"status": "done"}
    )

    assert result.is_ok()
    status_notes = [
        n
        for n in created_notifications(mock_uow)
        if n.type == NotificationType.task_status_changed
    ]
    assert {n.user_id for n in status_notes} == {other.id, owner.id, admin.id}
    assert status_notes[0].message == (
        'Member updated task "Write report" status from To Do to Done'
    )


@pytest.mark.asyncio
async def test_status_change_by_creator_notifies_nobody(
    mock_uow, notifier, team_setup
):
    owner, admin, member, other, team = team_setup
    task = make_task(member, team)
    mock_uow.tasks.get_by_id.return_value = task

    result = await UpdateTaskUseCase(mock_uow, notifier).execute(
        member.id, task.id, {"status": "in-review"}
    )

    assert result.is_ok()
    mock_uow.notifications.create.assert_not_called()


@pytest.mark.asyncio
async def test_personal_task_hidden_from_team_admin(mock_uow, notifier, team_setup):
    owner, admin, member, other, team = team_setup
    task = make_task(member)
    mock_uow.tasks.get_by_id.return_value = task

    result = await UpdateTaskUseCase(mock_uow, notifier).execute(
        owner.id, task.id, {"title": "Mine now"}
    )

    assert result.is_err()
    assert result.error.code == "NOT_AUTHORIZED"
    assert task.title == "Write report"


@pytest.mark.asyncio
async def test_invalid_status_is_a_validation_error(mock_uow, notifier):
    result = await UpdateTaskUseCase(mock_uow, notifier).execute(
        make_user().id, make_user().id, {"status": "archived"}
    )

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
