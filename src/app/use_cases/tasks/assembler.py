"""
Read-side assembly of task documents.

Tasks reference users and teams by id only; this module resolves those ids
in bulk and builds the TaskResponse the API returns.
"""

from typing import Dict, Iterable, List, Optional
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.schema import TeamSummary, UserSummary
from src.domain.entities import Task, Team, User

from .dtos import (
    ActiveTimerResponse,
    CommentResponse,
    SubtaskResponse,
    TaskResponse,
    TimeEntryResponse,
)


def _referenced_user_ids(tasks: Iterable[Task]) -> set:
    ids = set()
    for task in tasks:
        ids.add(task.created_by)
        if task.assigned_to is not None:
            ids.add(task.assigned_to)
        for comment in task.get_comments():
            ids.add(comment.user_id)
    return ids


def build_task_response(
    task: Task, users: Dict[UUID, User], teams: Dict[UUID, Team]
) -> TaskResponse:
    def summary(user_id: Optional[UUID]) -> Optional[UserSummary]:
        user = users.get(user_id) if user_id is not None else None
        return UserSummary.from_entity(user) if user else None

    team = teams.get(task.team_id) if task.team_id is not None else None
    timer = task.get_active_timer()

    return TaskResponse(
        id=task.id,
        title=task.title,
        description=task.description,
        team=TeamSummary(id=team.id, name=team.name) if team else None,
        assigned_to=summary(task.assigned_to),
        created_by=summary(task.created_by),
        status=task.status,
        priority=task.priority,
        is_billable=task.is_billable,
        due_date=task.due_date,
        tags=list(task.tags or []),
        comments=[
            CommentResponse(
                id=c.id, user=summary(c.user_id), text=c.text, created_at=c.created_at
            )
            for c in task.get_comments()
        ],
        subtasks=[
            SubtaskResponse(
                id=s.id, title=s.title, completed=s.completed, created_at=s.created_at
            )
            for s in task.get_subtasks()
        ],
        time_spent=task.time_spent,
        time_entries=[
            TimeEntryResponse(**e.model_dump()) for e in task.get_time_entries()
        ],
        active_timer=(
            ActiveTimerResponse(start_time=timer.start_time, user_id=timer.user_id)
            if timer
            else None
        ),
        created_at=task.created_at,
        updated_at=task.updated_at,
    )


async def assemble_tasks(uow: UnitOfWork, tasks: List[Task]) -> List[TaskResponse]:
    """Resolve referenced users and teams for many tasks with two queries"""
    users = {u.id: u for u in await uow.users.get_by_ids(_referenced_user_ids(tasks))}
    team_ids = {t.team_id for t in tasks if t.team_id is not None}
    teams = {t.id: t for t in await uow.teams.get_by_ids(team_ids)}
    return [build_task_response(task, users, teams) for task in tasks]


async def assemble_task(
    uow: UnitOfWork, task: Task, team: Optional[Team] = None
) -> TaskResponse:
    users = {u.id: u for u in await uow.users.get_by_ids(_referenced_user_ids([task]))}
    teams = {}
    if team is not None:
        teams[team.id] = team
    elif task.team_id is not None:
        teams = {t.id: t for t in await uow.teams.get_by_ids([task.team_id])}
    return build_task_response(task, users, teams)
