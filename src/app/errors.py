"""
Error taxonomy.

Use cases report failures as ``libs.result.Error`` codes; every code belongs
to exactly one kind below, and the API layer turns the kind into a status.
"""

from enum import Enum
from typing import Optional

from libs.result import Error


class ErrorKind(str, Enum):
    validation = "ValidationError"
    authentication = "AuthenticationError"
    authorization = "AuthorizationError"
    not_found = "NotFoundError"
    conflict = "ConflictError"
    dependency = "DependencyFailure"


class DependencyFailure(Exception):
    """Raised by email/storage/push adapters when the provider fails."""

    def __init__(self, provider: str, message: str):
        self.provider = provider
        super().__init__(f"{provider}: {message}")


ERROR_KINDS = {
    # Validation
    "VALIDATION_ERROR": ErrorKind.validation,
    "INVALID_ASSIGNEE": ErrorKind.validation,
    "PERSONAL_TASK_ASSIGNEE": ErrorKind.validation,
    "TITLE_REQUIRED": ErrorKind.validation,
    "COMMENT_TEXT_REQUIRED": ErrorKind.validation,
    "NO_ACTIVE_TIMER": ErrorKind.validation,
    "TIME_REQUIRED": ErrorKind.validation,
    "INVALID_DURATION": ErrorKind.validation,
    "INVALID_INVITE_TOKEN": ErrorKind.validation,
    "INVALID_INVITATION_TOKEN": ErrorKind.validation,
    "CANNOT_REMOVE_OWNER": ErrorKind.validation,
    "CANNOT_CHANGE_OWNER_ROLE": ErrorKind.validation,
    "INVALID_ROLE": ErrorKind.validation,
    "CANNOT_MODIFY_SELF": ErrorKind.validation,
    "NAME_REQUIRED": ErrorKind.validation,
    "EMAIL_REQUIRED": ErrorKind.validation,
    "PASSWORD_TOO_SHORT": ErrorKind.validation,
    "NOT_FIRST_LOGIN": ErrorKind.validation,
    # Authentication
    "UNAUTHENTICATED": ErrorKind.authentication,
    "ACCOUNT_DISABLED": ErrorKind.authentication,
    "INVALID_PASSWORD": ErrorKind.authentication,
    # Authorization
    "NOT_AUTHORIZED": ErrorKind.authorization,
    "ADMIN_ONLY_FIELD": ErrorKind.authorization,
    "INSUFFICIENT_ROLE": ErrorKind.authorization,
    "EMAIL_MISMATCH": ErrorKind.authorization,
    "ADMIN_REQUIRED": ErrorKind.authorization,
    # Not found
    "TASK_NOT_FOUND": ErrorKind.not_found,
    "TEAM_NOT_FOUND": ErrorKind.not_found,
    "SUBTASK_NOT_FOUND": ErrorKind.not_found,
    "TIME_ENTRY_NOT_FOUND": ErrorKind.not_found,
    "ACTIVITY_NOT_FOUND": ErrorKind.not_found,
    "NOTIFICATION_NOT_FOUND": ErrorKind.not_found,
    "MEMBER_NOT_FOUND": ErrorKind.not_found,
    "USER_NOT_FOUND": ErrorKind.not_found,
    # Conflict
    "ALREADY_MEMBER": ErrorKind.conflict,
    "ALREADY_INVITED": ErrorKind.conflict,
    "EMAIL_TAKEN": ErrorKind.conflict,
    "TIMER_IN_USE": ErrorKind.conflict,
    # Dependency
    "EMAIL_DELIVERY_FAILED": ErrorKind.dependency,
}


def kind_of(error: Error) -> Optional[ErrorKind]:
    """Kind of an error code, None for codes outside the taxonomy."""
    return ERROR_KINDS.get(error.code)
