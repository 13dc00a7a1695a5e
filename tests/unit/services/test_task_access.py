from uuid import uuid4

import pytest

from src.app.services.task_access import TaskIntent, check_task_access, load_task_for
from src.domain.entities import TeamRole
from tests.fixtures.factories import make_task, make_team, make_user


@pytest.fixture
def people():
    owner = make_user("Owner")
    admin = make_user("Admin")
    member = make_user("Member")
    outsider = make_user("Outsider")
    team = make_team(owner, (admin, TeamRole.admin), (member, TeamRole.member))
    return owner, admin, member, outsider, team


def test_personal_task_only_reachable_by_creator(people):
    owner, admin, member, outsider, team = people
    task = make_task(member)

    assert check_task_access(task, None, member.id, TaskIntent.view) is None
    for other in (owner, admin, outsider):
        for intent in TaskIntent:
            error = check_task_access(task, None, other.id, intent)
            assert error is not None
            assert error.code == "NOT_AUTHORIZED"


def test_team_task_requires_membership(people):
    owner, admin, member, outsider, team = people
    task = make_task(owner, team)

    assert check_task_access(task, team, member.id, TaskIntent.view) is None
    error = check_task_access(task, team, outsider.id, TaskIntent.view)
    assert error.code == "NOT_AUTHORIZED"
    assert error.message == "Not authorized to view this task"


def test_team_task_of_deleted_team_is_unreachable(people):
    owner, admin, member, outsider, team = people
    task = make_task(owner, team)
    team.is_active = False

    error = check_task_access(task, team, owner.id, TaskIntent.view)
    assert error.code == "NOT_AUTHORIZED"


def test_delete_requires_creator_or_manager(people):
    owner, admin, member, outsider, team = people
    task = make_task(owner, team)

    assert check_task_access(task, team, owner.id, TaskIntent.delete) is None
    assert check_task_access(task, team, admin.id, TaskIntent.delete) is None
    error = check_task_access(task, team, member.id, TaskIntent.delete)
    assert error.message == "Not authorized to delete this task"

    own_task = make_task(member, team)
    assert check_task_access(own_task, team, member.id, TaskIntent.delete) is None


@pytest.mark.parametrize(
    "field_name, message",
    [
        ("due_date", "Only Team Admins can update Due Date"),
        ("priority", "Only Team Admins can update Priority"),
        ("assigned_to", "Only Team Admins can reassign tasks"),
    ],
)
def test_member_cannot_change_admin_only_fields(people, field_name, message):
    owner, admin, member, outsider, team = people
    task = make_task(owner, team)

    error = check_task_access(
        task, team, member.id, TaskIntent.update, [field_name, "title"]
    )
    assert error.code == "ADMIN_ONLY_FIELD"
    assert error.message == message

    assert (
        check_task_access(task, team, admin.id, TaskIntent.update, [field_name])
        is None
    )


def test_member_may_change_other_fields(people):
    owner, admin, member, outsider, team = people
    task = make_task(owner, team)

    assert (
        check_task_access(
            task, team, member.id, TaskIntent.update, ["title", "status", "tags"]
        )
        is None
    )


def test_admin_only_fields_do_not_apply_to_personal_tasks(people):
    owner, admin, member, outsider, team = people
    task = make_task(member)

    assert (
        check_task_access(
            task, None, member.id, TaskIntent.update, ["priority", "due_date"]
        )
        is None
    )


@pytest.mark.asyncio
async def test_load_task_for_unknown_task(mock_uow):
    mock_uow.tasks.get_by_id.return_value = None

    result = await load_task_for(mock_uow, uuid4(), uuid4(), TaskIntent.view)

    assert result.is_err()
    assert result.error.code == "TASK_NOT_FOUND"


@pytest.mark.asyncio
async def test_load_task_for_returns_task_and_team(mock_uow, people):
    owner, admin, member, outsider, team = people
    task = make_task(owner, team)
    mock_uow.tasks.get_by_id.return_value = task
    mock_uow.teams.get_by_id.return_value = team

    result = await load_task_for(mock_uow, task.id, member.id, TaskIntent.view)

    assert result.is_ok()
    assert result.value.task is task
    assert result.value.team is team
