from dataclasses import dataclass
from typing import List, Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.repositories.task_repository import TaskScope
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Team

PERSONAL = "personal"


@dataclass
class ResolvedScope:
    scope: TaskScope
    # Active teams the actor belongs to, whatever the narrowing
    teams: List[Team]


async def resolve_scope(
    uow: UnitOfWork, user_id: UUID, team: Optional[str], denied_message: str
) -> Result[ResolvedScope]:
    """
    Work out which tasks a listing or aggregation may see.

    Args:
        team: None for everything visible (the actor's active teams plus their
            personal tasks), "personal" for personal tasks only, or a team id
        denied_message: Message used when the actor is not in that team
    """
    teams = await uow.teams.list_active_for_user(user_id)

    if team is None or team == "":
        scope = TaskScope(team_ids=[t.id for t in teams], personal_owner_id=user_id)
    elif team == PERSONAL:
        scope = TaskScope(team_ids=[], personal_owner_id=user_id)
    else:
        try:
            team_id = UUID(team)
        except ValueError:
            return Return.err(Error("VALIDATION_ERROR", "Invalid team id"))
        if not any(t.id == team_id for t in teams):
            return Return.err(Error("NOT_AUTHORIZED", denied_message))
        scope = TaskScope(team_ids=[team_id])

    return Return.ok(ResolvedScope(scope=scope, teams=teams))
