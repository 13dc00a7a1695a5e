"""Admin use cases: account management for global admins."""

from .create_user_use_case import CreateUserUseCase, generate_temporary_password
from .list_users_use_case import ListUsersUseCase
from .update_user_role_use_case import UpdateUserRoleUseCase
from .deactivate_user_use_case import DeactivateUserUseCase
from .delete_user_use_case import DeleteUserUseCase
from .get_user_stats_use_case import GetUserStatsUseCase

__all__ = [
    "CreateUserUseCase",
    "generate_temporary_password",
    "ListUsersUseCase",
    "UpdateUserRoleUseCase",
    "DeactivateUserUseCase",
    "DeleteUserUseCase",
    "GetUserStatsUseCase",
]
