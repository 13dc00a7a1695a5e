from abc import ABC, abstractmethod

from src.app.repositories.activity_log_repository import IActivityLogRepository
from src.app.repositories.notification_repository import INotificationRepository
from src.app.repositories.pending_invitation_repository import (
    IPendingInvitationRepository,
)
from src.app.repositories.task_repository import ITaskRepository
from src.app.repositories.team_repository import ITeamRepository
from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    teams: ITeamRepository
    pending_invitations: IPendingInvitationRepository
    tasks: ITaskRepository
    activity_logs: IActivityLogRepository
    notifications: INotificationRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
