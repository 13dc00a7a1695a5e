"""Builders for domain entities used across unit tests."""

from typing import Optional
from uuid import UUID, uuid4

from src.domain.entities import Task, Team, User, UserRole


def make_user(
    name: str = "Alice",
    email: Optional[str] = None,
    role: UserRole = UserRole.user,
    is_active: bool = True,
) -> User:
    return User(
        id=uuid4(),
        name=name,
        email=email or f"{name.lower()}@example.com",
        role=role,
        is_active=is_active,
    )


def make_team(owner: User, *members, name: str = "Core") -> Team:
    """Team owned by owner; members are (user, TeamRole) pairs"""
    team = Team.create(name=name, owner_id=owner.id)
    team.id = uuid4()
    for user, role in members:
        team.add_member(user.id, role)
    return team


def make_task(
    creator: User,
    team: Optional[Team] = None,
    assigned_to: Optional[UUID] = None,
    **fields,
) -> Task:
    return Task(
        id=uuid4(),
        title=fields.pop("title", "Write report"),
        team_id=team.id if team else None,
        created_by=creator.id,
        assigned_to=assigned_to,
        **fields,
    )


def created_notifications(uow):
    """Notification entities passed to notifications.create, in order"""
    return [c.args[0] for c in uow.notifications.create.call_args_list]


def created_activities(uow):
    """ActivityLog entities passed to activity_logs.create, in order"""
    return [c.args[0] for c in uow.activity_logs.create.call_args_list]
